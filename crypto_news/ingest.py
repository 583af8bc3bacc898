"""News and price API fetching."""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any, Dict, List

from .config import FETCH_TIMEOUT, NEWS_API_URL, PRICE_API_URL
from .errors import NetworkError, ParseError
from .models import PriceQuote

logger = logging.getLogger(__name__)

USER_AGENT = "Crypto-Dash/1.0 (Crypto News Dashboard)"


def fetch_json(url: str, timeout: float = FETCH_TIMEOUT) -> Any:
    """
    GET a URL and decode its JSON body.

    Raises NetworkError on a non-success status or transport failure and
    ParseError when the body is not valid JSON. A single attempt is made.
    """
    req = urllib.request.Request(
        url,
        headers={
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        },
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as response:
            http_status = response.getcode()
            if http_status is not None and not 200 <= http_status < 300:
                raise NetworkError(f"HTTP error! status: {http_status}", url, http_status)
            payload = response.read()
    except urllib.error.HTTPError as e:
        raise NetworkError(f"HTTP error! status: {e.code}", url, e.code) from e
    except urllib.error.URLError as e:
        raise NetworkError(f"Network error: {e.reason}", url) from e
    except (OSError, http.client.HTTPException) as e:
        raise NetworkError(f"{type(e).__name__}: {e}", url) from e

    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Response is not valid JSON: {e}", {"url": url}) from e


def fetch_news(url: str = NEWS_API_URL, timeout: float = FETCH_TIMEOUT) -> List[Dict[str, Any]]:
    """Fetch the raw article records from the news envelope's Data field."""
    try:
        data = fetch_json(url, timeout)
        if not isinstance(data, dict) or not isinstance(data.get("Data"), list):
            raise ParseError("News envelope has no Data array", {"url": url})
        return data["Data"]
    except (NetworkError, ParseError) as e:
        logger.error("Error fetching news: %s", e)
        raise


def fetch_prices(url: str = PRICE_API_URL, timeout: float = FETCH_TIMEOUT) -> Dict[str, PriceQuote]:
    """Fetch USD price and 24h change for each asset, keyed by asset id."""
    try:
        data = fetch_json(url, timeout)
        if not isinstance(data, dict):
            raise ParseError("Price response is not an object", {"url": url})
        return {asset_id: PriceQuote.from_raw(asset_id, raw) for asset_id, raw in data.items()}
    except (NetworkError, ParseError) as e:
        logger.error("Error fetching prices: %s", e)
        raise
