"""Shared visual theme for the RouteOptimize desktop shell.

The module centralizes ttk style tokens so the screens can render a cohesive
mobile-style look without carrying styling logic in each view.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BG = "#f3f5f9"
CARD_BG = "#ffffff"
BORDER = "#d9dfeb"
PRIMARY = "#2457ff"
TEXT = "#1f2937"
MUTED = "#64748b"
SUCCESS = "#00a37a"


def apply_shell_theme(root: tk.Misc) -> None:
    """Apply the ttk + tk theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BG)

    style.configure(".", background=BG, foreground=TEXT)
    style.configure("TFrame", background=BG)
    style.configure("Card.TFrame", background=CARD_BG, relief="solid", borderwidth=1)
    style.configure("TLabel", background=BG, foreground=TEXT)
    style.configure("Card.TLabel", background=CARD_BG, foreground=TEXT)
    style.configure("Subtle.TLabel", background=BG, foreground=MUTED)
    style.configure("Title.TLabel", background=BG, foreground=TEXT, font=("TkDefaultFont", 14, "bold"))
    style.configure("Avatar.TLabel", background=PRIMARY, foreground="#ffffff", padding=(8, 6),
                    font=("TkDefaultFont", 11, "bold"))
    style.configure("Toggle.TLabel", background=CARD_BG, foreground=MUTED, padding=(6, 2))

    style.configure("TButton", padding=(10, 6), background=CARD_BG, bordercolor=BORDER, relief="flat")
    style.map("TButton", background=[("active", "#edf2ff")])
    style.configure("Primary.TButton", background=PRIMARY, foreground="#ffffff", bordercolor=PRIMARY)
    style.map("Primary.TButton", background=[("active", "#1b45ce")])
    style.configure("Active.TButton", background="#d9e4ff", foreground=PRIMARY, bordercolor=PRIMARY)
    style.configure("Busy.TButton", background="#9fb4ff", foreground="#eef2ff", bordercolor=BORDER)
    style.configure("Tab.TButton", padding=(6, 4))

    style.configure("TEntry", fieldbackground="#ffffff", bordercolor=BORDER)
