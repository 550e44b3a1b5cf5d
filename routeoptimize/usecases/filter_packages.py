"""Visibility rules for package cards (tab filter and free-text search)."""

from __future__ import annotations

from typing import Optional

from ..domain.packages import PackageStatus


def matches_tab(card_status: Optional[str], tab: PackageStatus) -> bool:
    """A card belongs to a tab iff its status token equals the tab."""
    if card_status is None:
        return False
    return card_status.strip().lower() == tab.value


def matches_query(card_text: str, query: Optional[str]) -> bool:
    """Case-insensitive substring match; an empty query matches every card."""
    return (query or "").lower() in (card_text or "").lower()
