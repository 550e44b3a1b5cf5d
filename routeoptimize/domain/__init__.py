"""Domain package exports for screens, profiles, packages and ports."""

from .errors import MissingElementError, UseCaseError
from .packages import DEMO_PACKAGES, PackageCard, PackageStatus
from .profiles import (
    ADMIN_PROFILE,
    DRIVER_PROFILE,
    LoginMode,
    Profile,
    profile_for,
)
from .screens import SCREEN_ORDER, Direction, ScreenId, Transition, direction_between

__all__ = [
    "ADMIN_PROFILE",
    "DEMO_PACKAGES",
    "DRIVER_PROFILE",
    "Direction",
    "LoginMode",
    "MissingElementError",
    "PackageCard",
    "PackageStatus",
    "Profile",
    "SCREEN_ORDER",
    "ScreenId",
    "Transition",
    "UseCaseError",
    "direction_between",
    "profile_for",
]
