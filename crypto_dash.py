#!/usr/bin/env python3
"""
crypto_dash.py — crypto news dashboard
- Flask web UI (Tailwind + Font Awesome via CDN)
- CryptoCompare news, filtered to today and grouped by category
- CoinGecko price ticker, refreshed every 5 minutes
"""

from __future__ import annotations

import functools
import logging

from crypto_news import ingest
from crypto_news.config import load_config
from crypto_news.session import Session
from crypto_news.web import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    session = Session(
        fetch_news=functools.partial(ingest.fetch_news, config.news_url, config.fetch_timeout),
        fetch_prices=functools.partial(ingest.fetch_prices, config.price_url, config.fetch_timeout),
        refresh_seconds=config.price_refresh_seconds,
    )
    app = create_app(config.app_title, config.price_refresh_seconds, session=session)
    logger.info("Serving %s on http://%s:%d", config.app_title, config.host, config.port)
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
