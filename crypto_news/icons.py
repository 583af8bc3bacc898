"""Category to icon mapping."""

from __future__ import annotations

from typing import Dict

ALL_CATEGORY = "all"
ALL_ICON = "fas fa-globe"

CATEGORY_ICONS: Dict[str, str] = {
    "Blockchain": "fas fa-link",
    "Bitcoin": "fab fa-bitcoin",
    "Ethereum": "fab fa-ethereum",
    "Altcoin": "fas fa-coins",
    "Trading": "fas fa-chart-line",
    "Mining": "fas fa-microchip",
    "ICO": "fas fa-rocket",
    "Regulation": "fas fa-gavel",
    "Exchange": "fas fa-exchange-alt",
    "Wallet": "fas fa-wallet",
    "ICP": "fas fa-infinity",
    "Default": "fas fa-newspaper",
}


def icon_for(category: str) -> str:
    """Exact-match lookup, falling back to the Default icon."""
    return CATEGORY_ICONS.get(category, CATEGORY_ICONS["Default"])
