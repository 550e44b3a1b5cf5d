"""
ShellWindowView
---------------
Tkinter window for the RouteOptimize driver shell. This file contains **only
View code**: no state, no timers. Every widget the controllers address is
registered in the :class:`TkPresentation` under the ids defined in
``routeoptimize.adapters.shell_layout``; user events are forwarded to the
callbacks passed to the constructor.

Layout:
  * one grid cell holding the five stacked screens (only one is gridded)
  * a bottom tab bar, hidden while the login screen is showing
"""
from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable, Optional, Tuple

from ...adapters.presentation_tk import TkElement, TkPresentation
from ...adapters.shell_layout import (
    ARRIVED_LABEL,
    DARK_MODE_ROW_ID,
    PACKAGE_TABS,
    SETTING_ROWS,
    tab_element_id,
)
from ...domain.packages import DEMO_PACKAGES, PackageCard, PackageStatus
from ...domain.profiles import DEFAULT_LOGIN_MODE, DRIVER_PROFILE, default_email, sign_in_label
from ...domain.screens import SCREEN_ORDER, ScreenId
from . import theme


class ScrollableFrame(ttk.Frame):
    """Canvas-backed vertical scroll area; children go into ``inner``."""

    def __init__(self, parent: tk.Misc) -> None:
        super().__init__(parent)
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)
        self.canvas = tk.Canvas(self, highlightthickness=0, background=theme.BG)
        scrollbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scrollbar.set)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        scrollbar.grid(row=0, column=1, sticky="ns")

        self.inner = ttk.Frame(self.canvas, padding=12)
        self.inner.columnconfigure(0, weight=1)
        window = self.canvas.create_window((0, 0), window=self.inner, anchor="nw")
        self.inner.bind(
            "<Configure>", lambda e: self.canvas.configure(scrollregion=self.canvas.bbox("all"))
        )
        self.canvas.bind("<Configure>", lambda e: self.canvas.itemconfigure(window, width=e.width))


class ShellWindowView(tk.Tk):
    """Top-level window. UI-only: layout plus callback wiring."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        packages: Iterable[PackageCard] = DEMO_PACKAGES,
        on_set_mode: Optional[Callable[[str], None]] = None,
        on_credentials_changed: OnVoid = None,
        on_submit: OnVoid = None,
        on_navigate: Optional[Callable[[ScreenId], None]] = None,
        on_logout: OnVoid = None,
        on_set_tab: Optional[Callable[[PackageStatus, str], None]] = None,
        on_toggle_package: Optional[Callable[[str], None]] = None,
        on_search: Optional[Callable[[str], None]] = None,
        on_toggle_setting: Optional[Callable[[str], None]] = None,
        on_toggle_dark_mode: Optional[Callable[[str], None]] = None,
        on_mark_arrived: OnVoid = None,
    ) -> None:
        super().__init__()

        # ---- Window basics ----
        self.title("RouteOptimize")
        self.geometry("420x780")
        self.minsize(360, 640)
        theme.apply_shell_theme(self)

        self._on_set_mode = on_set_mode
        self._on_credentials_changed = on_credentials_changed
        self._on_submit = on_submit
        self._on_navigate = on_navigate
        self._on_logout = on_logout
        self._on_set_tab = on_set_tab
        self._on_toggle_package = on_toggle_package
        self._on_search = on_search
        self._on_toggle_setting = on_toggle_setting
        self._on_toggle_dark_mode = on_toggle_dark_mode
        self._on_mark_arrived = on_mark_arrived

        self.presentation = TkPresentation(self)

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)
        stack = ttk.Frame(self)
        stack.grid(row=0, column=0, sticky="nsew")
        stack.rowconfigure(0, weight=1)
        stack.columnconfigure(0, weight=1)

        self._screens = {}
        for screen in SCREEN_ORDER:
            frame = ttk.Frame(stack)
            frame.grid(row=0, column=0, sticky="nsew")
            frame.rowconfigure(0, weight=1)
            frame.columnconfigure(0, weight=1)
            classes = ("screen",) if screen is ScreenId.LOGIN else ("screen", "hidden")
            self._screens[screen] = self.presentation.register(frame, screen.element_id, classes=classes)

        self._build_login(self._screens[ScreenId.LOGIN])
        self._build_home(self._screens[ScreenId.HOME])
        self._build_packages(self._screens[ScreenId.PACKAGES], packages)
        self._build_navigate(self._screens[ScreenId.NAVIGATE])
        self._build_settings(self._screens[ScreenId.SETTINGS])
        self._build_tabbar(self)

        self.presentation.refresh()
        self.set_tabbar_visible(False)

    # ------------------------------------------------------------------
    # Public helpers for the presenter
    # ------------------------------------------------------------------
    def set_tabbar_visible(self, visible: bool) -> None:
        if visible:
            self._tabbar.grid()
        else:
            self._tabbar.grid_remove()

    def set_screen_title(self, screen: ScreenId) -> None:
        self.title(f"RouteOptimize – {screen.value.capitalize()}")

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------
    def _scroll_area(self, screen: TkElement) -> Tuple[ScrollableFrame, TkElement]:
        area = ScrollableFrame(screen.widget)
        area.grid(row=0, column=0, sticky="nsew")
        return area, self.presentation.register(area, parent=screen, classes=("scroll",))

    def _build_login(self, screen: TkElement) -> None:
        p = self.presentation
        body = ttk.Frame(screen.widget, padding=24)
        body.grid(row=0, column=0, sticky="nsew")
        body.columnconfigure((0, 1), weight=1)

        ttk.Label(body, text="RouteOptimize", style="Title.TLabel").grid(
            row=0, column=0, columnspan=2, pady=(40, 4)
        )
        ttk.Label(body, text="Sign in to start your route", style="Subtle.TLabel").grid(
            row=1, column=0, columnspan=2, pady=(0, 24)
        )

        driver = ttk.Button(body, text="Driver", style="Tab.TButton",
                            command=lambda: self._on_set_mode and self._on_set_mode("driver"))
        driver.grid(row=2, column=0, sticky="ew", padx=(0, 4))
        admin = ttk.Button(body, text="Admin", style="Tab.TButton",
                           command=lambda: self._on_set_mode and self._on_set_mode("admin"))
        admin.grid(row=2, column=1, sticky="ew", padx=(4, 0))
        p.register(driver, "driver-toggle", parent=screen, classes=("mode-toggle", "active"), text="Driver")
        p.register(admin, "admin-toggle", parent=screen, classes=("mode-toggle",), text="Admin")

        ttk.Label(body, text="Email").grid(row=3, column=0, columnspan=2, sticky="w", pady=(20, 2))
        email_var = tk.StringVar(value=default_email(DEFAULT_LOGIN_MODE))
        email = ttk.Entry(body, textvariable=email_var)
        email.grid(row=4, column=0, columnspan=2, sticky="ew")
        p.register(email, "login-email", parent=screen, variable=email_var)

        ttk.Label(body, text="Password").grid(row=5, column=0, columnspan=2, sticky="w", pady=(12, 2))
        pw_var = tk.StringVar(value="")
        password = ttk.Entry(body, textvariable=pw_var, show="•")
        password.grid(row=6, column=0, columnspan=2, sticky="ew")
        p.register(password, "login-pw", parent=screen, variable=pw_var)

        for var in (email_var, pw_var):
            var.trace_add("write", lambda *_: self._on_credentials_changed and self._on_credentials_changed())

        label = sign_in_label(DEFAULT_LOGIN_MODE)
        sign = ttk.Button(body, text=label, style="Primary.TButton", command=self._on_submit)
        sign.grid(row=7, column=0, columnspan=2, sticky="ew", pady=(24, 0))
        sign_el = p.register(sign, "sign-btn", parent=screen)
        p.register(sign, "sign-btn-label", parent=sign_el, text=label, proxy=True)
        password.bind("<Return>", lambda e: self._on_submit and self._on_submit())

    def _build_home(self, screen: TkElement) -> None:
        p = self.presentation
        area, scroll_el = self._scroll_area(screen)
        inner = area.inner

        header = ttk.Frame(inner)
        header.grid(row=0, column=0, sticky="ew")
        header.columnconfigure(0, weight=1)
        greeting = ttk.Label(header, text=DRIVER_PROFILE.greeting, style="Subtle.TLabel")
        greeting.grid(row=0, column=0, sticky="w")
        name = ttk.Label(header, text=DRIVER_PROFILE.display_name, style="Title.TLabel")
        name.grid(row=1, column=0, sticky="w")
        avatar = ttk.Label(header, text=DRIVER_PROFILE.avatar_initials, style="Avatar.TLabel")
        avatar.grid(row=0, column=1, rowspan=2, sticky="e")
        p.register(greeting, "home-greeting", parent=scroll_el, text=DRIVER_PROFILE.greeting)
        p.register(name, "home-name", parent=scroll_el, text=DRIVER_PROFILE.display_name)
        p.register(avatar, "home-avatar", parent=scroll_el, text=DRIVER_PROFILE.avatar_initials)

        banner = ttk.Frame(inner, style="Card.TFrame", padding=10)
        banner.grid(row=1, column=0, sticky="ew", pady=(16, 0))
        ttk.Label(banner, text="Fleet overview: 12 drivers on route", style="Card.TLabel").grid(
            row=0, column=0, sticky="w"
        )
        banner_el = p.register(banner, "admin-home-banner", parent=scroll_el, text="Fleet overview")
        banner_el.visible = False

        stats = ttk.Frame(inner)
        stats.grid(row=2, column=0, sticky="ew", pady=(16, 0))
        stats.columnconfigure((0, 1, 2), weight=1)
        for col, (value, caption) in enumerate((("24", "Stops"), ("18", "Delivered"), ("86 km", "Route"))):
            cell = ttk.Frame(stats, style="Card.TFrame", padding=8)
            cell.grid(row=0, column=col, sticky="ew", padx=3)
            ttk.Label(cell, text=value, style="Card.TLabel", font=("TkDefaultFont", 13, "bold")).grid(row=0, column=0)
            ttk.Label(cell, text=caption, style="Card.TLabel").grid(row=1, column=0)
        p.register(stats, "driver-stats", parent=scroll_el, text="Today's stops")

        actions = ttk.Frame(inner)
        actions.grid(row=3, column=0, sticky="ew", pady=(20, 0))
        actions.columnconfigure((0, 1), weight=1)
        ttk.Button(actions, text="View Packages",
                   command=lambda: self._navigate(ScreenId.PACKAGES)).grid(row=0, column=0, sticky="ew", padx=(0, 4))
        ttk.Button(actions, text="Start Route", style="Primary.TButton",
                   command=lambda: self._navigate(ScreenId.NAVIGATE)).grid(row=0, column=1, sticky="ew", padx=(4, 0))

    def _build_packages(self, screen: TkElement, packages: Iterable[PackageCard]) -> None:
        p = self.presentation
        area, scroll_el = self._scroll_area(screen)
        inner = area.inner

        ttk.Label(inner, text="Packages", style="Title.TLabel").grid(row=0, column=0, sticky="w")

        tabs = ttk.Frame(inner)
        tabs.grid(row=1, column=0, sticky="ew", pady=(8, 8))
        for col, (status, label) in enumerate(PACKAGE_TABS):
            tabs.columnconfigure(col, weight=1)
            element_id = tab_element_id(status)
            button = ttk.Button(tabs, text=label, style="Tab.TButton",
                                command=lambda s=status, i=element_id: self._on_set_tab and self._on_set_tab(s, i))
            button.grid(row=0, column=col, sticky="ew", padx=2)
            classes = ("pkg-tab", "active") if status is PackageStatus.ACTIVE else ("pkg-tab",)
            p.register(button, element_id, parent=scroll_el, classes=classes, text=label)

        search_var = tk.StringVar(value="")
        search = ttk.Entry(inner, textvariable=search_var)
        search.grid(row=2, column=0, sticky="ew", pady=(0, 8))
        p.register(search, "pkg-search", parent=scroll_el, variable=search_var)
        search_var.trace_add("write", lambda *_: self._on_search and self._on_search(search_var.get()))

        cards = ttk.Frame(inner)
        cards.grid(row=3, column=0, sticky="ew")
        cards.columnconfigure(0, weight=1)
        for row, card in enumerate(packages):
            self._build_card(cards, row, card, scroll_el)

    def _build_card(self, parent: ttk.Frame, row: int, card: PackageCard, scroll_el: TkElement) -> None:
        p = self.presentation
        frame = ttk.Frame(parent, style="Card.TFrame", padding=10)
        frame.grid(row=row, column=0, sticky="ew", pady=4)
        frame.columnconfigure(0, weight=1)
        card_el = p.register(frame, card.element_id, parent=scroll_el, classes=("pkg-card",),
                             data={"status": card.status.value})

        toggle = lambda e, i=card.element_id: self._on_toggle_package and self._on_toggle_package(i)
        frame.bind("<Button-1>", toggle)
        for line_no, line in enumerate(card.summary_lines()):
            label = ttk.Label(frame, text=line, style="Card.TLabel")
            label.grid(row=line_no, column=0, sticky="w")
            label.bind("<Button-1>", toggle)
            p.register(label, parent=card_el, text=line)

        details_text = f"Status: {card.status.value}"
        details = ttk.Label(frame, text=details_text, style="Card.TLabel")
        details.grid(row=len(card.summary_lines()), column=0, sticky="w", pady=(6, 0))
        details_el = p.register(details, parent=card_el, classes=("pkg-details",), text=details_text)
        details_el.visible = False

    def _build_navigate(self, screen: TkElement) -> None:
        p = self.presentation
        area, scroll_el = self._scroll_area(screen)
        inner = area.inner

        ttk.Label(inner, text="Next stop", style="Subtle.TLabel").grid(row=0, column=0, sticky="w")
        stop = ttk.Label(inner, text="1420 Harbor Blvd, Suite 3", style="Title.TLabel")
        stop.grid(row=1, column=0, sticky="w")
        p.register(stop, "nav-next-stop", parent=scroll_el, text="Next stop")

        arrived = tk.Button(inner, text=ARRIVED_LABEL, background=theme.PRIMARY, foreground="#ffffff",
                            relief="flat", padx=12, pady=8, command=self._on_mark_arrived)
        arrived.grid(row=2, column=0, sticky="ew", pady=(24, 0))
        p.register(arrived, "nav-arrived-btn", parent=scroll_el, classes=("nav-btn-arrived",),
                   text=ARRIVED_LABEL)

    def _build_settings(self, screen: TkElement) -> None:
        p = self.presentation
        area, scroll_el = self._scroll_area(screen)
        inner = area.inner

        profile = ttk.Frame(inner, style="Card.TFrame", padding=10)
        profile.grid(row=0, column=0, sticky="ew")
        profile.columnconfigure(1, weight=1)
        avatar = ttk.Label(profile, text=DRIVER_PROFILE.avatar_initials, style="Avatar.TLabel")
        avatar.grid(row=0, column=0, rowspan=3, padx=(0, 10))
        p.register(avatar, "settings-avatar", parent=scroll_el, text=DRIVER_PROFILE.avatar_initials)
        for row, (element_id, text) in enumerate((
            ("settings-name", DRIVER_PROFILE.display_name),
            ("settings-email", DRIVER_PROFILE.email),
            ("settings-driverid", DRIVER_PROFILE.role_label),
        )):
            label = ttk.Label(profile, text=text, style="Card.TLabel")
            label.grid(row=row, column=1, sticky="w")
            p.register(label, element_id, parent=scroll_el, text=text)

        rows = ttk.Frame(inner)
        rows.grid(row=1, column=0, sticky="ew", pady=(16, 0))
        rows.columnconfigure(0, weight=1)
        for index, (row_id, caption, on) in enumerate(SETTING_ROWS):
            frame = ttk.Frame(rows, style="Card.TFrame", padding=8)
            frame.grid(row=index, column=0, sticky="ew", pady=2)
            frame.columnconfigure(0, weight=1)
            row_el = p.register(frame, row_id, parent=scroll_el, classes=("setting-row",), text=caption)
            ttk.Label(frame, text=caption, style="Card.TLabel").grid(row=0, column=0, sticky="w")
            indicator = ttk.Label(frame, text="ON" if on else "OFF", style="Toggle.TLabel")
            indicator.grid(row=0, column=1, sticky="e")
            p.register(indicator, parent=row_el, classes=("toggle", "on") if on else ("toggle",))

            callback = self._on_toggle_dark_mode if row_id == DARK_MODE_ROW_ID else self._on_toggle_setting
            handler = lambda e, i=row_id, cb=callback: cb and cb(i)
            for widget in (frame, indicator):
                widget.bind("<Button-1>", handler)

        logout = ttk.Button(inner, text="Log Out", command=self._on_logout)
        logout.grid(row=2, column=0, sticky="ew", pady=(24, 0))
        p.register(logout, "logout-btn", parent=scroll_el, text="Log Out")

    def _build_tabbar(self, parent: tk.Misc) -> None:
        self._tabbar = ttk.Frame(parent, padding=(6, 4))
        self._tabbar.grid(row=1, column=0, sticky="ew")
        for col, screen in enumerate(SCREEN_ORDER[1:]):
            self._tabbar.columnconfigure(col, weight=1)
            ttk.Button(self._tabbar, text=screen.value.capitalize(), style="Tab.TButton",
                       command=lambda s=screen: self._navigate(s)).grid(row=0, column=col, sticky="ew", padx=2)

    def _navigate(self, screen: ScreenId) -> None:
        if self._on_navigate:
            self._on_navigate(screen)
