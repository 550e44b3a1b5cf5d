from __future__ import annotations

import logging
from typing import Optional

from ..domain.ports import PresentationPort
from ..usecases.element_access import ElementAccess
from ..viewmodels.settings_vm import SettingsVM
from .deferred_scheduler import DeferredHandle, DeferredScheduler

ARRIVED_SELECTOR = ".nav-btn-arrived"
CONFIRMED_LABEL = "✓ Marked Arrived!"
SUCCESS_COLOR = "#00a37a"
ARRIVAL_CHANNEL = "arrival"


class ArrivalController:
    """Temporary "arrived" confirmation on the navigation screen button.

    Calling ``mark_arrived`` again before the revert restarts the
    confirmation; only the latest revert stays scheduled.
    """

    def __init__(
        self,
        *,
        presentation: PresentationPort,
        elements: ElementAccess,
        scheduler: DeferredScheduler,
        settings: SettingsVM,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.presentation = presentation
        self.elements = elements
        self.scheduler = scheduler
        self.settings = settings
        self._original_label: Optional[str] = None

    @property
    def confirming(self) -> bool:
        return self.scheduler.handle_for(ARRIVAL_CHANNEL) is not None

    def mark_arrived(self) -> Optional[DeferredHandle]:
        button = self.elements.require_first(ARRIVED_SELECTOR)
        if button is None:
            return None
        p = self.presentation
        if self._original_label is None:
            self._original_label = p.text_content(button)

        p.set_text(button, CONFIRMED_LABEL)
        p.set_background(button, SUCCESS_COLOR)
        self._log.info("Stop marked as arrived")

        return self.scheduler.schedule(
            ARRIVAL_CHANNEL,
            self.settings.arrival_revert_ms,
            lambda: self._revert(button),
        )

    def cancel_pending(self) -> None:
        """Drop a pending revert and put the button back right away."""
        if self._original_label is None:
            return
        self.scheduler.cancel(ARRIVAL_CHANNEL)
        button = self.elements.require_first(ARRIVED_SELECTOR)
        if button is not None:
            self._revert(button)

    def _revert(self, button) -> None:
        p = self.presentation
        if self._original_label is not None:
            p.set_text(button, self._original_label)
        p.set_background(button, None)
        self._original_label = None


__all__ = ["ArrivalController"]
