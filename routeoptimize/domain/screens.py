"""Screen identifiers, their fixed order, and transition direction.

The order in :data:`SCREEN_ORDER` only decides which way a transition slides.
It never restricts navigation: any screen may request any other screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ScreenId(str, Enum):
    LOGIN = "login"
    HOME = "home"
    PACKAGES = "packages"
    NAVIGATE = "navigate"
    SETTINGS = "settings"

    @property
    def element_id(self) -> str:
        """Presentation id of the screen container (``screen-<name>``)."""
        return f"screen-{self.value}"


SCREEN_ORDER: tuple[ScreenId, ...] = (
    ScreenId.LOGIN,
    ScreenId.HOME,
    ScreenId.PACKAGES,
    ScreenId.NAVIGATE,
    ScreenId.SETTINGS,
)


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class Transition:
    """One completed screen change."""

    source: ScreenId
    target: ScreenId
    direction: Direction


def parse_screen(value: Union[ScreenId, str, None]) -> Optional[ScreenId]:
    """Return the matching ScreenId, or ``None`` for unknown input."""
    if isinstance(value, ScreenId):
        return value
    if not isinstance(value, str):
        return None
    token = value.strip().lower()
    if token.startswith("screen-"):
        token = token[len("screen-"):]
    try:
        return ScreenId(token)
    except ValueError:
        return None


def screen_index(screen: ScreenId) -> int:
    return SCREEN_ORDER.index(screen)


def direction_between(source: ScreenId, target: ScreenId) -> Direction:
    """Forward iff the target sits at the same or a later position."""
    if screen_index(target) >= screen_index(source):
        return Direction.FORWARD
    return Direction.BACKWARD


__all__ = [
    "Direction",
    "SCREEN_ORDER",
    "ScreenId",
    "Transition",
    "direction_between",
    "parse_screen",
    "screen_index",
]
