"""
News and price data models.

Both models are frozen dataclasses built from the raw API records.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from .errors import ParseError


def _text(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    return "" if value is None else str(value)


def _number(raw: Mapping[str, Any], key: str, owner: str) -> float:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ParseError(f"{owner}: field '{key}' is not a number", {"value": repr(value)[:100]})
    return value


@dataclass(frozen=True)
class Article:
    """One news item from the news endpoint."""
    title: str
    body: str
    image_url: str
    source: str
    published_on: int
    categories: Tuple[str, ...]
    url: str

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Article":
        """Build an Article from a record of the news envelope's Data array."""
        if not isinstance(raw, Mapping):
            raise ParseError("Article record is not an object", {"value": repr(raw)[:100]})
        published_on = int(_number(raw, "published_on", "Article"))
        # label tokens are kept untrimmed; only the tag chips are trimmed
        categories = tuple(_text(raw, "categories").split("|"))
        return cls(
            title=_text(raw, "title"),
            body=_text(raw, "body"),
            image_url=_text(raw, "imageurl"),
            source=_text(raw, "source"),
            published_on=published_on,
            categories=categories,
            url=_text(raw, "url"),
        )


@dataclass(frozen=True)
class PriceQuote:
    """Price and 24 hour change of one asset, in USD."""
    asset_id: str
    price_usd: float
    change_24h_percent: float

    @classmethod
    def from_raw(cls, asset_id: str, raw: Any) -> "PriceQuote":
        if not isinstance(raw, Mapping):
            raise ParseError(f"Quote for {asset_id} is not an object")
        return cls(
            asset_id=asset_id,
            price_usd=_number(raw, "usd", asset_id),
            change_24h_percent=_number(raw, "usd_24h_change", asset_id),
        )
