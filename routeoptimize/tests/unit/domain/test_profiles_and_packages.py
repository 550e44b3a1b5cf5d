from __future__ import annotations

import pytest

from routeoptimize.domain.packages import (
    DEMO_PACKAGES,
    PackageStatus,
    parse_status,
)
from routeoptimize.domain.profiles import (
    ADMIN_PROFILE,
    DRIVER_PROFILE,
    LoginMode,
    default_email,
    parse_login_mode,
    profile_for,
    sign_in_label,
)


def test_profiles_are_role_scoped() -> None:
    assert profile_for(LoginMode.DRIVER) is DRIVER_PROFILE
    assert profile_for(LoginMode.ADMIN) is ADMIN_PROFILE
    assert DRIVER_PROFILE.show_driver_stats and not DRIVER_PROFILE.show_admin_banner
    assert ADMIN_PROFILE.show_admin_banner and not ADMIN_PROFILE.show_driver_stats


def test_mode_labels_and_default_emails() -> None:
    assert sign_in_label(LoginMode.DRIVER) == "Sign In as Driver"
    assert sign_in_label(LoginMode.ADMIN) == "Sign In as Admin"
    assert default_email(LoginMode.DRIVER) == "john.driver@example.com"
    assert default_email(LoginMode.ADMIN) == "admin@routeoptimize.com"


def test_parse_login_mode() -> None:
    assert parse_login_mode("ADMIN") is LoginMode.ADMIN
    with pytest.raises(ValueError):
        parse_login_mode("dispatcher")


def test_demo_data_has_no_completed_cards() -> None:
    statuses = [card.status for card in DEMO_PACKAGES]
    assert PackageStatus.COMPLETED not in statuses
    assert statuses.count(PackageStatus.ACTIVE) == 3
    assert statuses.count(PackageStatus.PENDING) == 2


def test_parse_status_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        parse_status("lost")
