from __future__ import annotations

from routeoptimize.app.logout_controller import LOGOUT_PROMPT
from routeoptimize.domain.profiles import LoginMode
from routeoptimize.domain.screens import ScreenId
from routeoptimize.tests.helpers import make_session


def _signed_in_admin(**settings):
    session, ui, clock = make_session(**settings)
    session.login.set_mode("admin")
    session.login.submit()
    clock.advance(900)
    session.navigate("settings")
    return session, ui, clock


def test_confirmed_logout_resets_mode_and_returns_to_login() -> None:
    session, ui, _ = _signed_in_admin()
    ui.confirm_answers.append(True)

    assert session.logout() is True

    assert ui.prompts == [LOGOUT_PROMPT]
    assert session.state.login_mode is LoginMode.DRIVER
    assert session.state.current_screen is ScreenId.LOGIN
    assert "active" in ui.get_element("driver-toggle").classes
    assert ui.get_element("sign-btn-label").text == "Sign In as Driver"
    assert ui.get_element("login-email").value == "john.driver@example.com"
    assert "hidden" in ui.get_element("screen-settings").classes


def test_declined_logout_changes_nothing() -> None:
    session, ui, _ = _signed_in_admin()
    ui.confirm_answers.append(False)
    classes_before = {s: set(ui.get_element(s.element_id).classes) for s in ScreenId}

    assert session.logout() is False

    assert session.state.login_mode is LoginMode.ADMIN
    assert session.state.current_screen is ScreenId.SETTINGS
    assert ui.get_element("login-email").value == "admin@routeoptimize.com"
    assert {s: set(ui.get_element(s.element_id).classes) for s in ScreenId} == classes_before


def test_pending_sign_in_still_lands_after_logout_by_default() -> None:
    session, _, clock = make_session()
    session.login.submit()

    session.logout()  # already on login; only the mode reset is visible
    clock.advance(900)

    assert session.state.current_screen is ScreenId.HOME


def test_logout_cancels_pending_callbacks_when_configured() -> None:
    session, ui, clock = make_session(cancel_superseded_timers=True)
    session.navigate("navigate")
    session.arrival.mark_arrived()
    session.login.submit()

    session.logout()
    clock.advance(5000)

    assert session.state.current_screen is ScreenId.LOGIN
    assert clock.pending() == 0
    button = ui.get_element("nav-arrived-btn")
    assert button.text == "✓ Arrived"
    assert button.background is None
