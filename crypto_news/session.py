"""
Dashboard session.

Owns the news loaded for today and the live ticker, and sequences
fetch -> filter -> categorize -> render -> ticker.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, tzinfo
from typing import Any, Callable, Dict, List, Mapping, Optional

from . import icons, ingest, news, render, utils
from .config import PRICE_REFRESH_SECONDS
from .errors import CryptoNewsError, EmptyResultError
from .models import Article, PriceQuote

logger = logging.getLogger(__name__)

LOADING = "loading"
READY = "ready"
ERROR = "error"

NO_NEWS_MESSAGE = "No news available for today. Please check back later."
LOAD_FAILED_MESSAGE = "Failed to load news. Please try again later."

NewsFetcher = Callable[[], List[Dict[str, Any]]]
PriceFetcher = Callable[[], Mapping[str, PriceQuote]]


class Session:
    """State of one dashboard: loading, ready or error."""

    def __init__(
        self,
        fetch_news: NewsFetcher = ingest.fetch_news,
        fetch_prices: PriceFetcher = ingest.fetch_prices,
        refresh_seconds: int = PRICE_REFRESH_SECONDS,
        tz: Optional[tzinfo] = None,
    ) -> None:
        self._fetch_news = fetch_news
        self._fetch_prices = fetch_prices
        self.refresh_seconds = refresh_seconds
        self.tz = tz

        self.state = LOADING
        self.error_message: Optional[str] = None
        self.articles: List[Article] = []
        self.index: Dict[str, List[Article]] = {}
        self.nav: List[render.NavEntry] = []
        self.ticker: List[render.TickerItem] = []
        self.ticker_updated: Optional[datetime] = None

    @property
    def loading(self) -> bool:
        return self.state == LOADING

    def load(self, now: Optional[datetime] = None) -> str:
        """Run the whole load sequence and return the terminal state."""
        self.state = LOADING
        self.error_message = None
        try:
            raw = self._fetch_news()
            today = news.filter_today([Article.from_raw(r) for r in raw], now=now, tz=self.tz)
            if not today:
                raise EmptyResultError("No articles published today")

            index = news.categorize(today)
            self.articles = today
            self.index = index
            self.nav = render.category_nav(index)

            self._apply_prices(self._fetch_prices())
        except EmptyResultError as e:
            logger.info("%s", e)
            return self._fail(NO_NEWS_MESSAGE)
        except CryptoNewsError as e:
            logger.error("Initialization error: %s", e)
            return self._fail(LOAD_FAILED_MESSAGE)
        except Exception:
            logger.exception("Initialization error")
            return self._fail(LOAD_FAILED_MESSAGE)

        self.state = READY
        logger.info("Loaded %d articles in %d categories", len(self.articles), len(self.index))
        return self.state

    def _fail(self, message: str) -> str:
        self.state = ERROR
        self.error_message = message
        return self.state

    def _apply_prices(self, prices: Mapping[str, PriceQuote]) -> None:
        self.ticker = render.ticker_items(prices)
        self.ticker_updated = utils.utcnow()

    def select(self, category: str) -> List[Article]:
        """Articles shown when a category is picked; unknown categories show none."""
        if category == icons.ALL_CATEGORY:
            return self.articles
        return self.index.get(category, [])

    def cards(self, category: str = icons.ALL_CATEGORY) -> List[render.ArticleCard]:
        return render.article_cards(self.select(category), self.tz)

    def refresh_ticker(self) -> bool:
        """Re-fetch prices; on failure keep the last ticker content."""
        try:
            prices = self._fetch_prices()
        except CryptoNewsError as e:
            logger.warning("Skipping ticker refresh, keeping last prices: %s", e)
            return False
        except Exception:
            logger.exception("Skipping ticker refresh, keeping last prices")
            return False
        self._apply_prices(prices)
        return True

    def run(self, stop_event: threading.Event) -> None:
        self.load()
        if self.state != READY:
            return
        while not stop_event.wait(self.refresh_seconds):
            self.refresh_ticker()
