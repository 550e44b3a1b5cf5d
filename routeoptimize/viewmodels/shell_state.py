from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain.packages import PackageStatus
from ..domain.profiles import DEFAULT_LOGIN_MODE, LoginMode
from ..domain.screens import ScreenId, Transition


@dataclass
class ShellState:
    """Session-wide view state; one instance owned by the shell session.

    ``current_screen`` is written by the screen router only and
    ``login_mode`` by the login controller only.
    """

    current_screen: ScreenId = ScreenId.LOGIN
    login_mode: LoginMode = DEFAULT_LOGIN_MODE
    submit_in_flight: bool = False
    active_tab: PackageStatus = PackageStatus.ACTIVE
    search_query: str = ""
    last_transition: Optional[Transition] = None
