# routeoptimize/app/main.py
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from ..domain.errors import UseCaseError
from ..domain.packages import PackageStatus
from ..domain.screens import ScreenId
from ..utils import logging as logging_utils
from ..viewmodels.settings_vm import SettingsVM
from .session import ShellSession
from .views.shell_window import ShellWindowView


class App:
    """Bootstrap: wire the Tk window <-> ShellSession with Tk timers."""

    def __init__(self, settings: Optional[SettingsVM] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.settings = settings or SettingsVM.from_env()
        logging_utils.apply_gui_preferences(self.settings.debug_logging)

        self.win = ShellWindowView(
            on_set_mode=self._guard(lambda mode: self.session.login.set_mode(mode)),
            on_credentials_changed=self._guard(lambda: self.session.login.validate_fields()),
            on_submit=self._guard(self._on_submit),
            on_navigate=self._guard(lambda screen: self.session.navigate(screen)),
            on_logout=self._guard(lambda: self.session.logout()),
            on_set_tab=self._guard(self._on_set_tab),
            on_toggle_package=self._guard(lambda card_id: self.session.packages.toggle_expanded(card_id)),
            on_search=self._guard(lambda query: self.session.packages.filter_by_text(query)),
            on_toggle_setting=self._guard(lambda row_id: self.session.toggles.toggle(row_id)),
            on_toggle_dark_mode=self._guard(lambda row_id: self.session.toggles.toggle_dark_mode(row_id)),
            on_mark_arrived=self._guard(lambda: self.session.arrival.mark_arrived()),
        )

        self.session = ShellSession(
            self.win.presentation,
            schedule=self.win.after,
            cancel=self.win.after_cancel,
            settings=self.settings,
            on_screen_changed=self._on_screen_changed,
        )
        self.win.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self.session.start()
        self.win.mainloop()

    # ------------------------------------------------------------------
    def _on_submit(self) -> None:
        # The Return key reaches here even while the button is disabled.
        if not self.session.login.validate_fields():
            return
        self.session.login.submit()

    def _on_set_tab(self, tab: PackageStatus, control_id: str) -> None:
        self.session.packages.set_tab(tab, control_id)

    def _on_screen_changed(self, screen: ScreenId) -> None:
        self.win.set_tabbar_visible(screen is not ScreenId.LOGIN)
        self.win.set_screen_title(screen)

    def _on_close(self) -> None:
        self.session.shutdown()
        self.win.destroy()

    def _guard(self, fn):
        """Log layout errors with their code before Tk reports the traceback."""

        def wrapper(*args):
            try:
                return fn(*args)
            except UseCaseError as exc:
                self._log.error("%s: %s", exc.code, exc.message)
                raise

        return wrapper


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="routeoptimize", description="RouteOptimize driver shell")
    parser.add_argument("--debug", action="store_true", help="enable DEBUG logging")
    parser.add_argument(
        "--harden",
        action="store_true",
        help="reject re-entrant sign-in and cancel pending timers on logout",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="skip missing layout elements instead of failing",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    settings = SettingsVM.from_env()
    overrides = {}
    if args.debug:
        overrides["debug_logging"] = True
    if args.harden:
        overrides["harden_submit"] = True
        overrides["cancel_superseded_timers"] = True
    if args.lenient:
        overrides["strict_elements"] = False
    settings.apply_dict(overrides)
    logging_utils.configure_root(settings.debug_logging)

    App(settings).run()


if __name__ == "__main__":
    main()
