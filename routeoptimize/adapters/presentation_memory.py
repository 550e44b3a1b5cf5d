"""In-memory presentation used for tests and headless development.

Elements form a small tree with ids, classes, text, values and data
attributes, which is all the shell controllers touch.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, Iterator, List, Optional, Set

from ..domain.ports import PresentationPort


@dataclass(eq=False)
class MemoryElement:
    element_id: Optional[str] = None
    classes: Set[str] = field(default_factory=set)
    text: str = ""
    value: str = ""
    visible: bool = True
    background: Optional[str] = None
    opacity: Optional[float] = None
    interactive: bool = True
    enabled: bool = True
    scroll_top: int = 0
    data: Dict[str, str] = field(default_factory=dict)
    children: List["MemoryElement"] = field(default_factory=list)
    parent: Optional["MemoryElement"] = field(default=None, repr=False)

    def append(self, child: "MemoryElement") -> "MemoryElement":
        child.parent = self
        self.children.append(child)
        return child

    def iter_descendants(self) -> Iterator["MemoryElement"]:
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


class MemoryPresentation(PresentationPort):
    """Presentation port over a :class:`MemoryElement` tree.

    ``confirm`` answers from ``confirm_answers`` first and falls back to
    ``default_confirm``; every prompt is recorded in ``prompts``.
    """

    def __init__(self, root: Optional[MemoryElement] = None, *, default_confirm: bool = True) -> None:
        self.root = root or MemoryElement(element_id="app")
        self.default_confirm = default_confirm
        self.confirm_answers: Deque[bool] = deque()
        self.prompts: List[str] = []

    # ---- Building ----
    def add(
        self,
        element_id: Optional[str] = None,
        *,
        parent: Optional[MemoryElement] = None,
        classes: tuple = (),
        text: str = "",
        value: str = "",
        visible: bool = True,
        data: Optional[Dict[str, str]] = None,
    ) -> MemoryElement:
        element = MemoryElement(
            element_id=element_id,
            classes=set(classes),
            text=text,
            value=value,
            visible=visible,
            data=dict(data or {}),
        )
        return (parent or self.root).append(element)

    # ---- Lookup ----
    def get_element(self, element_id: str) -> Optional[MemoryElement]:
        for element in self.root.iter_descendants():
            if element.element_id == element_id:
                return element
        return None

    def query_all(self, selector: str) -> List[MemoryElement]:
        return [element for element in self.root.iter_descendants() if element.matches(selector)]

    def query_descendant(self, element: MemoryElement, selector: str) -> Optional[MemoryElement]:
        for child in element.iter_descendants():
            if child.matches(selector):
                return child
        return None

    # ---- Text & style ----
    def set_text(self, element: MemoryElement, text: str) -> None:
        element.text = text

    def text_content(self, element: MemoryElement) -> str:
        parts = [element.text] + [child.text for child in element.iter_descendants()]
        return " ".join(part for part in parts if part)

    def set_visible(self, element: MemoryElement, visible: bool) -> None:
        element.visible = bool(visible)

    def set_background(self, element: MemoryElement, color: Optional[str]) -> None:
        element.background = color

    def set_opacity(self, element: MemoryElement, opacity: Optional[float]) -> None:
        element.opacity = opacity

    def set_interactive(self, element: MemoryElement, interactive: bool) -> None:
        element.interactive = bool(interactive)

    def set_enabled(self, element: MemoryElement, enabled: bool) -> None:
        element.enabled = bool(enabled)

    # ---- Classes ----
    def has_class(self, element: MemoryElement, name: str) -> bool:
        return name in element.classes

    def add_class(self, element: MemoryElement, name: str) -> None:
        element.classes.add(name)

    def remove_class(self, element: MemoryElement, name: str) -> None:
        element.classes.discard(name)

    def toggle_class(self, element: MemoryElement, name: str, force: Optional[bool] = None) -> bool:
        enabled = (name not in element.classes) if force is None else bool(force)
        if enabled:
            element.classes.add(name)
        else:
            element.classes.discard(name)
        return enabled

    # ---- Inputs ----
    def read_value(self, element: MemoryElement) -> str:
        return element.value

    def read_trimmed_value(self, element: MemoryElement) -> str:
        return element.value.strip()

    def write_value(self, element: MemoryElement, value: str) -> None:
        element.value = value

    def get_data(self, element: MemoryElement, key: str) -> Optional[str]:
        return element.data.get(key)

    def reset_scroll(self, element: MemoryElement) -> None:
        element.scroll_top = 0

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if self.confirm_answers:
            return self.confirm_answers.popleft()
        return self.default_confirm
