"""Composition of one shell session.

``ShellSession`` builds the state object, the scheduler and every controller
exactly once and exposes them to the desktop window and to tests. Nothing in
the shell keeps module-level mutable state.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain.ports import CancelFn, ClockPort, PresentationPort, ScheduleFn
from ..domain.screens import ScreenId
from ..usecases.element_access import ElementAccess
from ..usecases.populate_profile import PopulateProfile
from ..viewmodels.settings_vm import SettingsVM
from ..viewmodels.shell_state import ShellState
from .arrival_controller import ArrivalController
from .deferred_scheduler import DeferredScheduler
from .login_controller import LoginController
from .logout_controller import LogoutController
from .package_list_controller import PackageListController
from .screen_router import ScreenRouter
from .setting_toggle_controller import SettingToggleController


class ShellSession:
    """Owns the shell state and the controllers for one session.

    Call chain:
        ``routeoptimize.app.main.App`` creates one instance with Tk timers;
        tests create one with :class:`ManualClock` and the in-memory adapter.
    """

    def __init__(
        self,
        presentation: PresentationPort,
        *,
        schedule: ScheduleFn,
        cancel: CancelFn,
        settings: Optional[SettingsVM] = None,
        on_screen_changed: Optional[Callable[[ScreenId], None]] = None,
        on_dark_mode_changed: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.presentation = presentation
        self.settings = settings or SettingsVM()
        self.state = ShellState()
        self.elements = ElementAccess(presentation, strict=self.settings.strict_elements)
        self.scheduler = DeferredScheduler(schedule, cancel)

        self.router = ScreenRouter(
            presentation=presentation,
            state=self.state,
            elements=self.elements,
            on_screen_changed=on_screen_changed,
        )
        self.login = LoginController(
            presentation=presentation,
            state=self.state,
            elements=self.elements,
            scheduler=self.scheduler,
            router=self.router,
            settings=self.settings,
            populate_profile=PopulateProfile(self.elements),
        )
        self.arrival = ArrivalController(
            presentation=presentation,
            elements=self.elements,
            scheduler=self.scheduler,
            settings=self.settings,
        )
        self.logout_controller = LogoutController(
            presentation=presentation,
            login=self.login,
            router=self.router,
            settings=self.settings,
            arrival=self.arrival,
        )
        self.packages = PackageListController(
            presentation=presentation,
            state=self.state,
            elements=self.elements,
        )
        self.toggles = SettingToggleController(
            presentation=presentation,
            elements=self.elements,
            on_dark_mode_changed=on_dark_mode_changed,
        )

    @classmethod
    def with_clock(
        cls, presentation: PresentationPort, clock: ClockPort, **kwargs
    ) -> "ShellSession":
        """Build a session driven by an ``after``/``after_cancel`` clock."""
        return cls(presentation, schedule=clock.after, cancel=clock.after_cancel, **kwargs)

    def start(self) -> None:
        """Initial evaluation of the sign-in button for the pre-filled form."""
        self.login.validate_fields()
        self._log.info("Shell session started on %s", self.state.current_screen.value)

    # ---- Convenience passthroughs used by view callbacks ----
    def navigate(self, target) -> None:
        self.router.navigate(target)

    def logout(self) -> bool:
        return self.logout_controller.logout()

    def shutdown(self) -> None:
        """Cancel every pending deferred callback.

        Controllers drop their own work first so the button state they track
        is restored along with the timers.
        """
        pending = self.scheduler.pending_count()
        self.login.cancel_pending()
        self.arrival.cancel_pending()
        self.scheduler.cancel_all()
        self.state.submit_in_flight = False
        self._log.debug("Shell session shut down (%d pending callback(s) cancelled)", pending)


__all__ = ["ShellSession"]
