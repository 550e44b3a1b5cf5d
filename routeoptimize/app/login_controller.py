"""Login controller: mode selection, credential gating and simulated sign-in.

Sign-in never fails. ``submit`` dims the button, waits ``login_latency_ms``
and then applies the profile of whatever mode is selected when the wait ends,
before handing off to the router.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from ..domain.ports import PresentationPort
from ..domain.profiles import (
    SIGNING_IN_LABEL,
    LoginMode,
    default_email,
    parse_login_mode,
    profile_for,
    sign_in_label,
)
from ..domain.screens import ScreenId
from ..usecases.element_access import ElementAccess
from ..usecases.populate_profile import PopulateProfile
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.shell_state import ShellState
from .deferred_scheduler import DeferredHandle, DeferredScheduler
from .screen_router import ScreenRouter

DRIVER_TOGGLE_ID = "driver-toggle"
ADMIN_TOGGLE_ID = "admin-toggle"
SIGN_BUTTON_ID = "sign-btn"
SIGN_LABEL_ID = "sign-btn-label"
EMAIL_INPUT_ID = "login-email"
PASSWORD_INPUT_ID = "login-pw"

ACTIVE = "active"
BUSY_OPACITY = 0.6
LOGIN_CHANNEL = "login"


class LoginController:
    """Owns ``ShellState.login_mode`` and the sign-in button lifecycle."""

    def __init__(
        self,
        *,
        presentation: PresentationPort,
        state: ShellState,
        elements: ElementAccess,
        scheduler: DeferredScheduler,
        router: ScreenRouter,
        settings: SettingsVM,
        populate_profile: Optional[PopulateProfile] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.presentation = presentation
        self.state = state
        self.elements = elements
        self.scheduler = scheduler
        self.router = router
        self.settings = settings
        self.populate_profile = populate_profile or PopulateProfile(elements)
        self._pending: List[DeferredHandle] = []

    @property
    def mode(self) -> LoginMode:
        return self.state.login_mode

    # ------------------------------------------------------------------
    def set_mode(self, mode: Union[LoginMode, str]) -> None:
        """Select driver/admin and refresh toggles, label and email.

        Every element is resolved before ``login_mode`` changes, so a missing
        element in strict mode leaves the mode and its indicators untouched.
        """
        selected = parse_login_mode(mode)
        p = self.presentation
        driver_toggle = self.elements.require(DRIVER_TOGGLE_ID)
        admin_toggle = self.elements.require(ADMIN_TOGGLE_ID)
        label = self.elements.require(SIGN_LABEL_ID)
        email = self.elements.require(EMAIL_INPUT_ID)
        password = self.elements.require(PASSWORD_INPUT_ID)
        button = self.elements.require(SIGN_BUTTON_ID)

        self.state.login_mode = selected
        if driver_toggle is not None:
            p.toggle_class(driver_toggle, ACTIVE, selected is LoginMode.DRIVER)
        if admin_toggle is not None:
            p.toggle_class(admin_toggle, ACTIVE, selected is LoginMode.ADMIN)
        if label is not None:
            p.set_text(label, sign_in_label(selected))
        if email is not None:
            p.write_value(email, default_email(selected))

        self._log.debug("Login mode set to %s", selected.value)
        self._gate_button(email, password, button)

    def validate_fields(self) -> bool:
        """Enable the sign-in button iff email and password are non-blank."""
        return self._gate_button(
            self.elements.require(EMAIL_INPUT_ID),
            self.elements.require(PASSWORD_INPUT_ID),
            self.elements.require(SIGN_BUTTON_ID),
        )

    def submit(self) -> Optional[DeferredHandle]:
        """Start the simulated sign-in.

        The dimmed button does not block programmatic re-entry. Unless
        ``harden_submit`` is set, a second call while one is pending schedules
        a second completion. Returns the completion handle, or ``None`` when
        the call was rejected.
        """
        if self.settings.harden_submit and self.state.submit_in_flight:
            self._log.info("Sign-in already in progress; ignoring submit")
            return None

        button = self.elements.require(SIGN_BUTTON_ID)
        if button is not None:
            self.presentation.set_opacity(button, BUSY_OPACITY)
            self.presentation.set_interactive(button, False)
        self._set_label(SIGNING_IN_LABEL)

        self.state.submit_in_flight = True
        self._log.info("Signing in as %s", self.state.login_mode.value)

        handle: Optional[DeferredHandle] = None

        def complete() -> None:
            self._complete(handle)

        handle = self.scheduler.schedule_detached(
            self.settings.login_latency_ms, complete, channel=LOGIN_CHANNEL
        )
        self._pending.append(handle)
        return handle

    def cancel_pending(self) -> int:
        """Cancel every sign-in completion that has not run yet."""
        cancelled = 0
        for handle in list(self._pending):
            if handle.active:
                handle.cancel()
                cancelled += 1
        self._pending.clear()
        if cancelled:
            self._restore_button()
            self._set_label(sign_in_label(self.state.login_mode))
        self.state.submit_in_flight = False
        return cancelled

    # ------------------------------------------------------------------
    def _complete(self, handle: Optional[DeferredHandle]) -> None:
        if handle in self._pending:
            self._pending.remove(handle)
        self.state.submit_in_flight = any(h.active for h in self._pending)

        self._restore_button()
        mode = self.state.login_mode
        self.populate_profile(profile_for(mode))
        self._set_label(sign_in_label(mode))
        self._log.info("Signed in as %s", mode.value)
        self.router.navigate(ScreenId.HOME)

    def _gate_button(self, email, password, button) -> bool:
        p = self.presentation
        email_value = p.read_trimmed_value(email) if email is not None else ""
        password_value = p.read_trimmed_value(password) if password is not None else ""
        enabled = bool(email_value and password_value)
        if button is not None:
            p.set_enabled(button, enabled)
        return enabled

    def _restore_button(self) -> None:
        button = self.elements.require(SIGN_BUTTON_ID)
        if button is not None:
            self.presentation.set_opacity(button, None)
            self.presentation.set_interactive(button, True)

    def _set_label(self, text: str) -> None:
        label = self.elements.require(SIGN_LABEL_ID)
        if label is not None:
            self.presentation.set_text(label, text)


__all__ = ["LoginController"]
