from __future__ import annotations

import pytest

from routeoptimize.domain.errors import MissingElementError
from routeoptimize.domain.profiles import LoginMode
from routeoptimize.domain.screens import ScreenId
from routeoptimize.tests.helpers import make_session


def _text(ui, element_id: str) -> str:
    return ui.get_element(element_id).text


def _login_snapshot(ui) -> tuple:
    return (
        frozenset(ui.get_element("driver-toggle").classes),
        frozenset(ui.get_element("admin-toggle").classes),
        _text(ui, "sign-btn-label"),
        ui.get_element("login-email").value,
        ui.get_element("sign-btn").enabled,
    )


@pytest.mark.parametrize(
    "email,password,enabled",
    [
        ("a@b.com", "x", True),
        ("", "x", False),
        ("a@b.com", "", False),
        ("  ", "  ", False),
        ("  a@b.com ", " x ", True),
    ],
)
def test_validate_fields_enables_iff_both_fields_filled(email, password, enabled) -> None:
    session, ui, _ = make_session()
    ui.get_element("login-email").value = email
    ui.get_element("login-pw").value = password

    assert session.login.validate_fields() is enabled
    assert ui.get_element("sign-btn").enabled is enabled


def test_start_disables_button_for_empty_password() -> None:
    _, ui, _ = make_session(password="")
    assert ui.get_element("sign-btn").enabled is False


def test_set_mode_admin_updates_toggles_label_and_email() -> None:
    session, ui, _ = make_session()

    session.login.set_mode("admin")

    assert session.state.login_mode is LoginMode.ADMIN
    assert "active" in ui.get_element("admin-toggle").classes
    assert "active" not in ui.get_element("driver-toggle").classes
    assert _text(ui, "sign-btn-label") == "Sign In as Admin"
    assert ui.get_element("login-email").value == "admin@routeoptimize.com"


def test_mode_round_trip_restores_login_form() -> None:
    session, ui, _ = make_session()
    original = _login_snapshot(ui)

    session.login.set_mode(LoginMode.ADMIN)
    session.login.set_mode(LoginMode.DRIVER)

    assert _login_snapshot(ui) == original


def test_set_mode_rejects_unknown_mode() -> None:
    session, _, _ = make_session()
    with pytest.raises(ValueError):
        session.login.set_mode("dispatcher")
    assert session.state.login_mode is LoginMode.DRIVER


def test_set_mode_revalidates_button() -> None:
    session, ui, _ = make_session(password="")
    ui.get_element("login-pw").value = "pw"

    session.login.set_mode("admin")

    assert ui.get_element("sign-btn").enabled is True


def test_submit_shows_progress_until_latency_elapses() -> None:
    session, ui, clock = make_session()

    session.login.submit()

    button = ui.get_element("sign-btn")
    assert button.opacity == 0.6
    assert button.interactive is False
    assert _text(ui, "sign-btn-label") == "Signing in..."
    assert session.state.submit_in_flight is True

    clock.advance(899)
    assert session.state.current_screen is ScreenId.LOGIN
    clock.advance(1)
    assert session.state.current_screen is ScreenId.HOME
    assert button.opacity is None
    assert button.interactive is True
    assert session.state.submit_in_flight is False


def test_admin_sign_in_populates_admin_profile() -> None:
    session, ui, clock = make_session()
    session.login.set_mode("admin")

    session.login.submit()
    clock.advance(900)

    assert _text(ui, "home-greeting") == "Welcome back,"
    assert _text(ui, "home-name") == "Admin User"
    assert _text(ui, "home-avatar") == "AU"
    assert ui.get_element("admin-home-banner").visible is True
    assert ui.get_element("driver-stats").visible is False
    assert _text(ui, "settings-name") == "Admin User"
    assert _text(ui, "settings-email") == "admin@routeoptimize.com"
    assert _text(ui, "settings-driverid") == "Admin · Fleet Manager"
    assert _text(ui, "settings-avatar") == "AU"
    assert _text(ui, "sign-btn-label") == "Sign In as Admin"
    assert session.state.current_screen is ScreenId.HOME


def test_driver_sign_in_populates_driver_profile() -> None:
    session, ui, clock = make_session()
    session.login.set_mode("admin")
    session.login.submit()
    clock.advance(900)
    session.navigate("login")
    session.login.set_mode("driver")

    session.login.submit()
    clock.advance(900)

    assert _text(ui, "home-greeting") == "Good morning,"
    assert _text(ui, "home-name") == "John Driver"
    assert _text(ui, "home-avatar") == "JD"
    assert ui.get_element("admin-home-banner").visible is False
    assert ui.get_element("driver-stats").visible is True
    assert _text(ui, "settings-driverid") == "Driver ID: DRV-2026-456"
    assert _text(ui, "sign-btn-label") == "Sign In as Driver"


def test_profile_follows_mode_at_completion_time() -> None:
    session, ui, clock = make_session()

    session.login.submit()
    session.login.set_mode("admin")
    clock.advance(900)

    assert _text(ui, "home-name") == "Admin User"


def test_reentrant_submit_runs_both_completions_by_default() -> None:
    session, _, clock = make_session()
    seen = []
    session.router.on_screen_changed = seen.append

    first = session.login.submit()
    clock.advance(300)
    second = session.login.submit()

    assert first is not None and second is not None
    clock.advance(600)
    assert session.state.submit_in_flight is True  # second still pending
    session.navigate("packages")
    clock.advance(300)

    assert seen == [ScreenId.HOME, ScreenId.PACKAGES, ScreenId.HOME]
    assert session.state.submit_in_flight is False


def test_hardened_submit_rejects_while_in_flight() -> None:
    session, _, clock = make_session(harden_submit=True)

    assert session.login.submit() is not None
    assert session.login.submit() is None
    assert clock.pending() == 1

    clock.advance(900)
    assert session.login.submit() is not None


def test_cancel_pending_restores_button() -> None:
    session, ui, clock = make_session()
    session.login.submit()

    assert session.login.cancel_pending() == 1
    clock.advance(900)

    assert session.state.current_screen is ScreenId.LOGIN
    assert ui.get_element("sign-btn").opacity is None
    assert _text(ui, "sign-btn-label") == "Sign In as Driver"
    assert session.state.submit_in_flight is False


def test_custom_latency_is_honored() -> None:
    session, _, clock = make_session(login_latency_ms=50)
    session.login.submit()
    clock.advance(50)
    assert session.state.current_screen is ScreenId.HOME


@pytest.mark.parametrize("missing", ["admin-toggle", "sign-btn-label"])
def test_set_mode_with_missing_element_keeps_mode_and_indicators(missing) -> None:
    session, ui, _ = make_session(omit=(missing,))

    with pytest.raises(MissingElementError):
        session.login.set_mode("admin")

    assert session.state.login_mode is LoginMode.DRIVER
    assert "active" in ui.get_element("driver-toggle").classes
    assert ui.get_element("login-email").value == "john.driver@example.com"
    if missing != "sign-btn-label":
        assert ui.get_element("sign-btn-label").text == "Sign In as Driver"
