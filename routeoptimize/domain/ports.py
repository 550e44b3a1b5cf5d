from __future__ import annotations

from typing import Any, Callable, List, Optional, Protocol

ElementId = str
# Opaque handle owned by the presentation adapter.
Element = Any

ScheduleFn = Callable[[int, Callable[[], None]], Any]
CancelFn = Callable[[Any], None]


# ---- Ports (Hexagonal boundaries) ----
class PresentationPort(Protocol):
    """Named visual elements and the primitive mutations controllers need.

    Selectors are ``#id``, ``.class`` or a bare element id.
    """

    def get_element(self, element_id: ElementId) -> Optional[Element]: ...
    def query_all(self, selector: str) -> List[Element]: ...
    def query_descendant(self, element: Element, selector: str) -> Optional[Element]: ...

    def set_text(self, element: Element, text: str) -> None: ...
    def text_content(self, element: Element) -> str: ...  # own text + descendants
    def set_visible(self, element: Element, visible: bool) -> None: ...
    def set_background(self, element: Element, color: Optional[str]) -> None: ...  # None resets
    def set_opacity(self, element: Element, opacity: Optional[float]) -> None: ...  # None resets
    def set_interactive(self, element: Element, interactive: bool) -> None: ...
    def set_enabled(self, element: Element, enabled: bool) -> None: ...

    def has_class(self, element: Element, name: str) -> bool: ...
    def add_class(self, element: Element, name: str) -> None: ...
    def remove_class(self, element: Element, name: str) -> None: ...
    def toggle_class(self, element: Element, name: str, force: Optional[bool] = None) -> bool: ...

    def read_value(self, element: Element) -> str: ...
    def read_trimmed_value(self, element: Element) -> str: ...
    def write_value(self, element: Element, value: str) -> None: ...
    def get_data(self, element: Element, key: str) -> Optional[str]: ...
    def reset_scroll(self, element: Element) -> None: ...

    def confirm(self, prompt: str) -> bool: ...  # synchronous yes/no


class ClockPort(Protocol):
    """UI timer pair compatible with Tk ``after`` / ``after_cancel``."""

    def after(self, delay_ms: int, callback: Callable[[], None]) -> Any: ...
    def after_cancel(self, token: Any) -> None: ...


__all__ = [
    "CancelFn",
    "ClockPort",
    "Element",
    "ElementId",
    "PresentationPort",
    "ScheduleFn",
]
