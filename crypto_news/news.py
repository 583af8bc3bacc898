"""Filtering and categorizing of articles."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Dict, Iterable, List, Optional

from . import utils
from .models import Article


def filter_today(articles: Iterable[Article], now: Optional[datetime] = None,
                 tz: Optional[tzinfo] = None) -> List[Article]:
    """Keep the articles published on the same local calendar day as `now`."""
    tz = utils.local_tz(tz)
    today = utils.local_day(now or utils.utcnow(), tz)
    return [
        a for a in articles
        if utils.local_day(utils.from_timestamp(a.published_on, tz), tz) == today
    ]


def categorize(articles: Iterable[Article]) -> Dict[str, List[Article]]:
    """Index articles by category label; an article appears under each of its labels."""
    index: Dict[str, List[Article]] = {}
    for article in articles:
        for category in article.categories:
            index.setdefault(category, []).append(article)
    return index
