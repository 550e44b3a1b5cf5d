"""Tkinter implementation of the presentation port.

Tk has no CSS classes, so this adapter keeps the class set of every
registered widget and renders the few classes the shell uses:

* ``hidden`` / ``slide-left``: widget removed from its grid
* ``active``: accent style (mode toggles, package tabs)
* ``on``: ``ON``/``OFF`` caption of a settings toggle
* ``open``: ``.pkg-details`` children of a card shown
"""

from __future__ import annotations

import tkinter as tk
from dataclasses import dataclass, field
from tkinter import messagebox, ttk
from typing import Dict, Iterator, List, Optional, Set

from ..domain.ports import PresentationPort

_HIDING_CLASSES = {"hidden", "slide-left"}
_BUSY_STYLE = "Busy.TButton"
_ACTIVE_STYLE = "Active.TButton"


@dataclass(eq=False)
class TkElement:
    widget: tk.Misc
    element_id: Optional[str] = None
    classes: Set[str] = field(default_factory=set)
    data: Dict[str, str] = field(default_factory=dict)
    text: str = ""
    variable: Optional[tk.StringVar] = None
    visible: bool = True
    opacity: Optional[float] = None
    interactive: bool = True
    enabled: bool = True
    proxy: bool = False  # shares its widget with the parent element
    base_style: Optional[str] = None
    base_background: Optional[str] = None
    children: List["TkElement"] = field(default_factory=list)
    parent: Optional["TkElement"] = field(default=None, repr=False)

    def iter_descendants(self) -> Iterator["TkElement"]:
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def matches(self, selector: str) -> bool:
        token = selector.strip()
        if token.startswith("."):
            return token[1:] in self.classes
        if token.startswith("#"):
            token = token[1:]
        return self.element_id == token


class TkPresentation(PresentationPort):
    def __init__(self, root: tk.Misc) -> None:
        self.root = root
        self._elements: List[TkElement] = []

    # ---- Registration (called by the views while building) ----
    def register(
        self,
        widget: tk.Misc,
        element_id: Optional[str] = None,
        *,
        parent: Optional[TkElement] = None,
        classes: tuple = (),
        data: Optional[Dict[str, str]] = None,
        text: str = "",
        variable: Optional[tk.StringVar] = None,
        proxy: bool = False,
    ) -> TkElement:
        element = TkElement(
            widget=widget,
            element_id=element_id,
            classes=set(classes),
            data=dict(data or {}),
            text=text,
            variable=variable,
            proxy=proxy,
            parent=parent,
        )
        if isinstance(widget, ttk.Button) and not proxy:
            element.base_style = str(widget.cget("style")) or None
        elif isinstance(widget, tk.Button) and not proxy:
            element.base_background = str(widget.cget("background"))
        if parent is not None:
            parent.children.append(element)
        self._elements.append(element)
        return element

    def refresh(self) -> None:
        """Render every registered element once the layout is built."""
        for element in self._elements:
            self.render(element)

    def render(self, element: TkElement) -> None:
        """Apply the tracked classes and flags to the widget."""
        if element.proxy:
            return
        widget = element.widget
        shown = element.visible and not (element.classes & _HIDING_CLASSES)
        if hasattr(widget, "grid_remove") and widget.winfo_manager() in ("grid", ""):
            if shown:
                widget.grid()
            else:
                widget.grid_remove()

        if "toggle" in element.classes and isinstance(widget, (ttk.Label, tk.Label)):
            widget.configure(text="ON" if "on" in element.classes else "OFF")

        if "pkg-card" in element.classes:
            is_open = "open" in element.classes
            for child in element.children:
                if "pkg-details" in child.classes:
                    child.visible = is_open
                    self.render(child)

        if isinstance(widget, ttk.Button):
            if element.opacity is not None and element.opacity < 1:
                widget.configure(style=_BUSY_STYLE)
            elif "active" in element.classes:
                widget.configure(style=_ACTIVE_STYLE)
            else:
                widget.configure(style=element.base_style or "TButton")
        if isinstance(widget, (ttk.Button, ttk.Entry)):
            usable = element.enabled and element.interactive
            widget.state(["!disabled"] if usable else ["disabled"])

    # ---- Lookup ----
    def get_element(self, element_id: str) -> Optional[TkElement]:
        for element in self._elements:
            if element.element_id == element_id:
                return element
        return None

    def query_all(self, selector: str) -> List[TkElement]:
        return [element for element in self._elements if element.matches(selector)]

    def query_descendant(self, element: TkElement, selector: str) -> Optional[TkElement]:
        for child in element.iter_descendants():
            if child.matches(selector):
                return child
        return None

    # ---- Text & style ----
    def set_text(self, element: TkElement, text: str) -> None:
        element.text = text
        try:
            element.widget.configure(text=text)
        except tk.TclError:
            pass  # containers have no caption; text is still tracked

    def text_content(self, element: TkElement) -> str:
        parts = [element.text] + [child.text for child in element.iter_descendants()]
        return " ".join(part for part in parts if part)

    def set_visible(self, element: TkElement, visible: bool) -> None:
        element.visible = bool(visible)
        self.render(element)

    def set_background(self, element: TkElement, color: Optional[str]) -> None:
        if isinstance(element.widget, tk.Button):
            element.widget.configure(background=color or element.base_background)

    def set_opacity(self, element: TkElement, opacity: Optional[float]) -> None:
        element.opacity = opacity
        self.render(element)

    def set_interactive(self, element: TkElement, interactive: bool) -> None:
        element.interactive = bool(interactive)
        self.render(element)

    def set_enabled(self, element: TkElement, enabled: bool) -> None:
        element.enabled = bool(enabled)
        self.render(element)

    # ---- Classes ----
    def has_class(self, element: TkElement, name: str) -> bool:
        return name in element.classes

    def add_class(self, element: TkElement, name: str) -> None:
        element.classes.add(name)
        self.render(element)

    def remove_class(self, element: TkElement, name: str) -> None:
        element.classes.discard(name)
        self.render(element)

    def toggle_class(self, element: TkElement, name: str, force: Optional[bool] = None) -> bool:
        enabled = (name not in element.classes) if force is None else bool(force)
        if enabled:
            element.classes.add(name)
        else:
            element.classes.discard(name)
        self.render(element)
        return enabled

    # ---- Inputs ----
    def read_value(self, element: TkElement) -> str:
        if element.variable is None:
            return ""
        return element.variable.get()

    def read_trimmed_value(self, element: TkElement) -> str:
        return self.read_value(element).strip()

    def write_value(self, element: TkElement, value: str) -> None:
        if element.variable is not None:
            element.variable.set(value)

    def get_data(self, element: TkElement, key: str) -> Optional[str]:
        return element.data.get(key)

    def reset_scroll(self, element: TkElement) -> None:
        target = getattr(element.widget, "canvas", element.widget)
        if hasattr(target, "yview_moveto"):
            target.yview_moveto(0)

    def confirm(self, prompt: str) -> bool:
        return bool(messagebox.askyesno("RouteOptimize", prompt, parent=self.root))


__all__ = ["TkElement", "TkPresentation"]
