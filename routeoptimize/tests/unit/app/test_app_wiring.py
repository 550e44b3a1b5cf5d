from __future__ import annotations

from typing import List

import pytest

from routeoptimize.adapters.manual_clock import ManualClock
from routeoptimize.adapters.shell_layout import build_memory_shell
from routeoptimize.app.main import App, build_arg_parser
from routeoptimize.app.session import ShellSession
from routeoptimize.domain.errors import MissingElementError
from routeoptimize.domain.screens import ScreenId
from routeoptimize.viewmodels.settings_vm import SettingsVM, ShellSettings


class WinStub:
    def __init__(self, password: str = "") -> None:
        self.presentation = build_memory_shell(password=password)
        self.clock = ManualClock()
        self.tabbar_visible: List[bool] = []
        self.titles: List[ScreenId] = []
        self.destroyed = False

    def after(self, delay: int, callback):
        return self.clock.after(delay, callback)

    def after_cancel(self, token) -> None:
        self.clock.after_cancel(token)

    def set_tabbar_visible(self, visible: bool) -> None:
        self.tabbar_visible.append(visible)

    def set_screen_title(self, screen: ScreenId) -> None:
        self.titles.append(screen)

    def destroy(self) -> None:
        self.destroyed = True


class LogStub:
    def __init__(self) -> None:
        self.errors: List[tuple] = []

    def error(self, *args, **kwargs) -> None:
        self.errors.append(args)


def _make_app(*, password: str = "") -> tuple[App, WinStub]:
    app = App.__new__(App)
    win = WinStub(password=password)
    app.win = win
    app._log = LogStub()
    app.settings = SettingsVM(config=ShellSettings())
    app.session = ShellSession(
        win.presentation,
        schedule=win.after,
        cancel=win.after_cancel,
        settings=app.settings,
        on_screen_changed=app._on_screen_changed,
    )
    app.session.start()
    return app, win


def test_submit_with_blank_password_schedules_nothing() -> None:
    app, win = _make_app(password="")

    app._on_submit()

    assert win.clock.pending() == 0
    assert app.session.state.submit_in_flight is False


def test_submit_signs_in_and_updates_window_chrome() -> None:
    app, win = _make_app(password="hunter2")

    app._on_submit()
    assert win.clock.pending() == 1
    win.clock.advance(900)

    assert app.session.state.current_screen is ScreenId.HOME
    assert win.tabbar_visible == [True]
    assert win.titles == [ScreenId.HOME]


def test_tab_callback_reaches_package_list() -> None:
    app, win = _make_app()

    app._on_set_tab("pending", "pkg-tab-pending")

    assert app.session.state.active_tab.value == "pending"


def test_guard_logs_error_code_and_reraises() -> None:
    app, _ = _make_app()
    guarded = app._guard(lambda: app.session.packages.toggle_expanded("pkg-card-missing"))

    with pytest.raises(MissingElementError):
        guarded()

    assert app._log.errors
    assert app._log.errors[0][1] == "MISSING_ELEMENT"


def test_close_cancels_timers_and_destroys_window() -> None:
    app, win = _make_app(password="hunter2")
    app._on_submit()

    app._on_close()

    assert win.destroyed is True
    assert win.clock.pending() == 0
    assert app.session.state.current_screen is ScreenId.LOGIN


def test_arg_parser_flags() -> None:
    args = build_arg_parser().parse_args(["--harden", "--lenient"])
    assert args.harden is True
    assert args.lenient is True
    assert args.debug is False
