"""
View models for the dashboard page.

Each function turns data into plain records; the page template only
lays them out. Nothing here touches Flask.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from . import icons, utils
from .models import Article, PriceQuote

EXCERPT_LENGTH = 150
PINNED_CATEGORY = "ICP"


@dataclass(frozen=True)
class NavEntry:
    category: str
    label: str
    icon: str


@dataclass(frozen=True)
class ArticleCard:
    title: str
    excerpt: str
    image_url: str
    source: str
    published: str
    tags: Tuple[str, ...]
    url: str


@dataclass(frozen=True)
class TickerItem:
    asset_id: str
    text: str
    direction: str

    def to_dict(self) -> Dict[str, str]:
        return {"asset_id": self.asset_id, "text": self.text, "direction": self.direction}


def category_nav(index: Mapping[str, List[Article]]) -> List[NavEntry]:
    """The "all" entry first, then ICP when present, then the rest in index order."""
    entries = [NavEntry(icons.ALL_CATEGORY, "All", icons.ALL_ICON)]
    if PINNED_CATEGORY in index:
        entries.append(NavEntry(PINNED_CATEGORY, PINNED_CATEGORY, icons.icon_for(PINNED_CATEGORY)))
    for category in index:
        if category != PINNED_CATEGORY:
            entries.append(NavEntry(category, category, icons.icon_for(category)))
    return entries


def excerpt(body: str, length: int = EXCERPT_LENGTH) -> str:
    return body[:length] + "..."


def article_cards(articles: Iterable[Article], tz: Optional[tzinfo] = None) -> List[ArticleCard]:
    return [
        ArticleCard(
            title=a.title,
            excerpt=excerpt(a.body),
            image_url=a.image_url,
            source=a.source,
            published=utils.format_local(a.published_on, tz),
            tags=tuple(tag.strip() for tag in a.categories),
            url=a.url,
        )
        for a in articles
    ]


def _fixed2(value: float) -> str:
    # half-up on the shortest repr, so 50000.005 renders as 50000.01
    return str(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def ticker_items(prices: Mapping[str, PriceQuote]) -> List[TickerItem]:
    """One "SYMBOL: $price ▲/▼ change%" segment per asset."""
    items: List[TickerItem] = []
    for asset_id, quote in prices.items():
        change = quote.change_24h_percent
        up = change >= 0
        arrow = "▲" if up else "▼"
        text = f"{asset_id.upper()}: ${_fixed2(quote.price_usd)} {arrow} {_fixed2(abs(change))}%"
        items.append(TickerItem(asset_id, text, "price-up" if up else "price-down"))
    return items
