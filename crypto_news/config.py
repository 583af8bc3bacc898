"""
Dashboard configuration.

Every environment variable the dashboard reads is defined here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError

NEWS_API_URL = "https://min-api.cryptocompare.com/data/v2/news/?lang=EN"

PRICE_ASSETS = ("bitcoin", "ethereum", "ripple", "cardano", "polkadot")
PRICE_API_URL = (
    "https://api.coingecko.com/api/v3/simple/price"
    f"?ids={','.join(PRICE_ASSETS)}&vs_currencies=usd&include_24hr_change=true"
)

# Ticker refresh interval (5 minutes)
PRICE_REFRESH_SECONDS = 300

# Timeout for API requests (seconds)
FETCH_TIMEOUT = 30.0


def _optional_env(name: str, default: str = "") -> str:
    return os.environ.get(name) or default


def _optional_env_int(name: str, default: int) -> int:
    """Get an optional integer environment variable with a default."""
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Invalid integer value for {name}: {value}")


def _optional_env_float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"Invalid number for {name}: {value}")


@dataclass(frozen=True)
class DashConfig:
    """Settings for one dashboard process."""
    app_title: str = "Crypto News Dashboard"
    news_url: str = NEWS_API_URL
    price_url: str = PRICE_API_URL
    price_refresh_seconds: int = PRICE_REFRESH_SECONDS
    fetch_timeout: float = FETCH_TIMEOUT
    host: str = "127.0.0.1"
    port: int = 5000


def load_config() -> DashConfig:
    """Build the configuration from CRYPTO_DASH_* environment variables."""
    refresh = _optional_env_int("CRYPTO_DASH_PRICE_REFRESH", PRICE_REFRESH_SECONDS)
    if refresh <= 0:
        raise ConfigurationError(f"CRYPTO_DASH_PRICE_REFRESH must be positive, got {refresh}")
    return DashConfig(
        app_title=_optional_env("CRYPTO_DASH_TITLE", DashConfig.app_title),
        news_url=_optional_env("CRYPTO_DASH_NEWS_URL", NEWS_API_URL),
        price_url=_optional_env("CRYPTO_DASH_PRICE_URL", PRICE_API_URL),
        price_refresh_seconds=refresh,
        fetch_timeout=_optional_env_float("CRYPTO_DASH_FETCH_TIMEOUT", FETCH_TIMEOUT),
        host=_optional_env("CRYPTO_DASH_HOST", DashConfig.host),
        port=_optional_env_int("CRYPTO_DASH_PORT", DashConfig.port),
    )
