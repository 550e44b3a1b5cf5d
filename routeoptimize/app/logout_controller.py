from __future__ import annotations

import logging
from typing import Optional

from ..domain.ports import PresentationPort
from ..domain.profiles import DEFAULT_LOGIN_MODE
from ..domain.screens import ScreenId
from ..viewmodels.settings_vm import SettingsVM
from .arrival_controller import ArrivalController
from .login_controller import LoginController
from .screen_router import ScreenRouter

LOGOUT_PROMPT = "Log out of RouteOptimize?"


class LogoutController:
    """Confirmation-gated logout back to the login screen."""

    def __init__(
        self,
        *,
        presentation: PresentationPort,
        login: LoginController,
        router: ScreenRouter,
        settings: SettingsVM,
        arrival: Optional[ArrivalController] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.presentation = presentation
        self.login = login
        self.router = router
        self.settings = settings
        self.arrival = arrival

    def logout(self) -> bool:
        """Return ``True`` when the user confirmed and the shell logged out."""
        if not self.presentation.confirm(LOGOUT_PROMPT):
            self._log.debug("Logout declined")
            return False

        if self.settings.cancel_superseded_timers:
            self.login.cancel_pending()
            if self.arrival is not None:
                self.arrival.cancel_pending()

        self.login.set_mode(DEFAULT_LOGIN_MODE)
        self.router.navigate(ScreenId.LOGIN)
        self._log.info("Logged out")
        return True


__all__ = ["LOGOUT_PROMPT", "LogoutController"]
