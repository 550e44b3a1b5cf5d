"""Login modes and the role-scoped profile bundles shown after sign-in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class LoginMode(str, Enum):
    DRIVER = "driver"
    ADMIN = "admin"


DEFAULT_LOGIN_MODE = LoginMode.DRIVER

SIGNING_IN_LABEL = "Signing in..."


@dataclass(frozen=True)
class Profile:
    """Display strings substituted into the home and settings screens.

    A profile is always applied as a whole, never field by field.
    """

    greeting: str
    display_name: str
    avatar_initials: str
    role_label: str
    email: str
    show_admin_banner: bool
    show_driver_stats: bool


DRIVER_PROFILE = Profile(
    greeting="Good morning,",
    display_name="John Driver",
    avatar_initials="JD",
    role_label="Driver ID: DRV-2026-456",
    email="john.driver@example.com",
    show_admin_banner=False,
    show_driver_stats=True,
)

ADMIN_PROFILE = Profile(
    greeting="Welcome back,",
    display_name="Admin User",
    avatar_initials="AU",
    role_label="Admin · Fleet Manager",
    email="admin@routeoptimize.com",
    show_admin_banner=True,
    show_driver_stats=False,
)

_PROFILES: Dict[LoginMode, Profile] = {
    LoginMode.DRIVER: DRIVER_PROFILE,
    LoginMode.ADMIN: ADMIN_PROFILE,
}

_SIGN_IN_LABELS: Dict[LoginMode, str] = {
    LoginMode.DRIVER: "Sign In as Driver",
    LoginMode.ADMIN: "Sign In as Admin",
}


def parse_login_mode(value: Union[LoginMode, str]) -> LoginMode:
    """Normalize a mode token; raise ``ValueError`` for anything else."""
    if isinstance(value, LoginMode):
        return value
    if isinstance(value, str):
        try:
            return LoginMode(value.strip().lower())
        except ValueError:
            pass
    raise ValueError(f"Unsupported login mode: {value!r}")


def profile_for(mode: LoginMode) -> Profile:
    return _PROFILES[mode]


def sign_in_label(mode: LoginMode) -> str:
    return _SIGN_IN_LABELS[mode]


def default_email(mode: LoginMode) -> str:
    """Address pre-filled into the email field when the mode is selected."""
    return _PROFILES[mode].email


__all__ = [
    "ADMIN_PROFILE",
    "DEFAULT_LOGIN_MODE",
    "DRIVER_PROFILE",
    "LoginMode",
    "Profile",
    "SIGNING_IN_LABEL",
    "default_email",
    "parse_login_mode",
    "profile_for",
    "sign_in_label",
]
