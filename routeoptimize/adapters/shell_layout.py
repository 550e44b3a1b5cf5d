"""Standard RouteOptimize element tree.

The ids and classes here are the contract between the controllers and any
presentation: the Tk window builds the same ids, and
:func:`build_memory_shell` builds them in memory for tests.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ..domain.packages import DEMO_PACKAGES, PackageCard, PackageStatus
from ..domain.profiles import DEFAULT_LOGIN_MODE, DRIVER_PROFILE, default_email, sign_in_label
from ..domain.screens import SCREEN_ORDER, ScreenId
from .presentation_memory import MemoryElement, MemoryPresentation

ARRIVED_LABEL = "✓ Arrived"
DARK_MODE_ROW_ID = "setting-row-dark-mode"

# (row id, label, initially on)
SETTING_ROWS: Tuple[Tuple[str, str, bool], ...] = (
    ("setting-row-notifications", "Push notifications", True),
    ("setting-row-location", "Share live location", True),
    ("setting-row-sounds", "Delivery sounds", False),
    (DARK_MODE_ROW_ID, "Dark mode", False),
)

PACKAGE_TABS: Tuple[Tuple[PackageStatus, str], ...] = (
    (PackageStatus.ACTIVE, "Active"),
    (PackageStatus.PENDING, "Pending"),
    (PackageStatus.COMPLETED, "Completed"),
)


def tab_element_id(status: PackageStatus) -> str:
    return f"pkg-tab-{status.value}"


def build_memory_shell(
    packages: Iterable[PackageCard] = DEMO_PACKAGES,
    *,
    password: str = "",
    default_confirm: bool = True,
    omit: Iterable[str] = (),
) -> MemoryPresentation:
    """Build the five screens in memory with the login screen showing.

    ``omit`` drops elements by id, which lets tests exercise broken layouts.
    """
    ui = MemoryPresentation(default_confirm=default_confirm)
    skipped = set(omit)

    def add(element_id: Optional[str], parent: MemoryElement, **kwargs) -> MemoryElement:
        if element_id in skipped:
            # Detached element: still usable as a parent, never found by lookups.
            return MemoryElement(element_id=element_id)
        return ui.add(element_id, parent=parent, **kwargs)

    screens = {}
    for screen in SCREEN_ORDER:
        classes = ("screen",) if screen is ScreenId.LOGIN else ("screen", "hidden")
        screens[screen] = add(screen.element_id, ui.root, classes=classes)

    # ---- Login ----
    login = screens[ScreenId.LOGIN]
    add("driver-toggle", login, classes=("mode-toggle", "active"), text="Driver")
    add("admin-toggle", login, classes=("mode-toggle",), text="Admin")
    add("login-email", login, value=default_email(DEFAULT_LOGIN_MODE))
    add("login-pw", login, value=password)
    sign_btn = add("sign-btn", login)
    add("sign-btn-label", sign_btn, text=sign_in_label(DEFAULT_LOGIN_MODE))

    # ---- Home ----
    home = add(None, screens[ScreenId.HOME], classes=("scroll",))
    add("home-greeting", home, text=DRIVER_PROFILE.greeting)
    add("home-name", home, text=DRIVER_PROFILE.display_name)
    add("home-avatar", home, text=DRIVER_PROFILE.avatar_initials)
    add("admin-home-banner", home, text="Fleet overview", visible=False)
    add("driver-stats", home, text="Today's stops")

    # ---- Packages ----
    pkg = add(None, screens[ScreenId.PACKAGES], classes=("scroll",))
    for status, label in PACKAGE_TABS:
        classes = ("pkg-tab", "active") if status is PackageStatus.ACTIVE else ("pkg-tab",)
        add(tab_element_id(status), pkg, classes=classes, text=label)
    add("pkg-search", pkg)
    for card in packages:
        node = add(card.element_id, pkg, classes=("pkg-card",), data={"status": card.status.value})
        for line in card.summary_lines():
            add(None, node, text=line)
        add(None, node, classes=("pkg-details",), text=f"Status: {card.status.value}")

    # ---- Navigate ----
    nav = add(None, screens[ScreenId.NAVIGATE], classes=("scroll",))
    add("nav-next-stop", nav, text="Next stop")
    add("nav-arrived-btn", nav, classes=("nav-btn-arrived",), text=ARRIVED_LABEL)

    # ---- Settings ----
    settings = add(None, screens[ScreenId.SETTINGS], classes=("scroll",))
    add("settings-avatar", settings, text=DRIVER_PROFILE.avatar_initials)
    add("settings-name", settings, text=DRIVER_PROFILE.display_name)
    add("settings-email", settings, text=DRIVER_PROFILE.email)
    add("settings-driverid", settings, text=DRIVER_PROFILE.role_label)
    for row_id, label, on in SETTING_ROWS:
        row = add(row_id, settings, classes=("setting-row",), text=label)
        add(None, row, classes=("toggle", "on") if on else ("toggle",))
    add("logout-btn", settings, text="Log Out")

    return ui


__all__ = [
    "ARRIVED_LABEL",
    "DARK_MODE_ROW_ID",
    "PACKAGE_TABS",
    "SETTING_ROWS",
    "build_memory_shell",
    "tab_element_id",
]
