"""Error taxonomy for news and price fetching."""

from __future__ import annotations

from typing import Any, Dict, Optional


class CryptoNewsError(Exception):
    """Base exception for all dashboard errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class NetworkError(CryptoNewsError):
    """Raised on a non-success HTTP status or a transport failure."""

    def __init__(self, message: str, url: str, status: Optional[int] = None) -> None:
        ctx: Dict[str, Any] = {"url": url}
        if status is not None:
            ctx["status"] = status
        super().__init__(message, ctx)
        self.url = url
        self.status = status


class ParseError(CryptoNewsError):
    """Raised when a response body is not the JSON shape we expect."""


class EmptyResultError(CryptoNewsError):
    """Raised when no article was published today."""


class ConfigurationError(CryptoNewsError):
    """Raised when a setting from the environment is invalid."""
