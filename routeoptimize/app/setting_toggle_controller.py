from __future__ import annotations

from typing import Callable, Optional

from ..domain.ports import PresentationPort
from ..usecases.element_access import ElementAccess, ElementRef

TOGGLE_SELECTOR = ".toggle"
ON = "on"


class SettingToggleController:
    """Flip the on/off indicator of a settings row."""

    def __init__(
        self,
        *,
        presentation: PresentationPort,
        elements: ElementAccess,
        on_dark_mode_changed: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self.presentation = presentation
        self.elements = elements
        self.on_dark_mode_changed = on_dark_mode_changed

    def toggle(self, row: ElementRef) -> Optional[bool]:
        """Return the new indicator state, or ``None`` for rows without one."""
        element = self.elements.resolve(row)
        if element is None:
            return None
        indicator = self.presentation.query_descendant(element, TOGGLE_SELECTOR)
        if indicator is None:
            return None
        return self.presentation.toggle_class(indicator, ON)

    def toggle_dark_mode(self, row: ElementRef) -> Optional[bool]:
        # Indicator only; no theme is switched yet.
        enabled = self.toggle(row)
        if enabled is not None and self.on_dark_mode_changed:
            self.on_dark_mode_changed(enabled)
        return enabled


__all__ = ["SettingToggleController"]
