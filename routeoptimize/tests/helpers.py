from __future__ import annotations

from typing import Tuple

from routeoptimize.adapters.manual_clock import ManualClock
from routeoptimize.adapters.presentation_memory import MemoryPresentation
from routeoptimize.adapters.shell_layout import build_memory_shell
from routeoptimize.app.session import ShellSession
from routeoptimize.viewmodels.settings_vm import SettingsVM, ShellSettings


def make_session(
    *, password: str = "hunter2", omit=(), **settings
) -> Tuple[ShellSession, MemoryPresentation, ManualClock]:
    ui = build_memory_shell(password=password, omit=omit)
    clock = ManualClock()
    vm = SettingsVM(config=ShellSettings())
    vm.apply_dict(settings)
    session = ShellSession.with_clock(ui, clock, settings=vm)
    session.start()
    return session, ui, clock


def visible_card_ids(ui: MemoryPresentation) -> list:
    return [card.element_id for card in ui.query_all(".pkg-card") if card.visible]


__all__ = ["make_session", "visible_card_ids"]
