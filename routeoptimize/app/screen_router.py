"""Screen router: the only writer of ``ShellState.current_screen``.

Transitions are computed from the *old* screen before state changes. Forward
exits slide out to the leading edge (``slide-left``); backward exits snap to
``hidden`` without a slide. The entering screen always ends with neither
class and its ``.scroll`` region back at the top.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from ..domain.ports import PresentationPort
from ..domain.screens import (
    Direction,
    ScreenId,
    Transition,
    direction_between,
    parse_screen,
)
from ..usecases.element_access import ElementAccess
from ..viewmodels.shell_state import ShellState

HIDDEN = "hidden"
SLIDE_LEFT = "slide-left"
SCROLL_SELECTOR = ".scroll"


class ScreenRouter:
    def __init__(
        self,
        *,
        presentation: PresentationPort,
        state: ShellState,
        elements: ElementAccess,
        on_screen_changed: Optional[Callable[[ScreenId], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.presentation = presentation
        self.state = state
        self.elements = elements
        self.on_screen_changed = on_screen_changed

    @property
    def current_screen(self) -> ScreenId:
        return self.state.current_screen

    def navigate(self, target: Union[ScreenId, str]) -> None:
        """Show ``target``; unknown targets and the current screen are no-ops."""
        screen = parse_screen(target)
        if screen is None:
            self._log.debug("Ignoring navigation to unknown screen %r", target)
            return
        source = self.state.current_screen
        if screen is source:
            return

        entering = self.elements.require(screen.element_id)
        if entering is None:
            return
        exiting = self.elements.require(source.element_id)

        direction = direction_between(source, screen)
        p = self.presentation
        if exiting is not None:
            if direction is Direction.FORWARD:
                p.add_class(exiting, SLIDE_LEFT)
                p.remove_class(exiting, HIDDEN)
            else:
                p.add_class(exiting, HIDDEN)
                p.remove_class(exiting, SLIDE_LEFT)

        p.remove_class(entering, HIDDEN)
        p.remove_class(entering, SLIDE_LEFT)

        scroll = p.query_descendant(entering, SCROLL_SELECTOR)
        if scroll is not None:
            p.reset_scroll(scroll)

        self.state.current_screen = screen
        self.state.last_transition = Transition(source=source, target=screen, direction=direction)
        self._log.info("Screen %s -> %s (%s)", source.value, screen.value, direction.value)

        if self.on_screen_changed:
            self.on_screen_changed(screen)


__all__ = ["HIDDEN", "SLIDE_LEFT", "ScreenRouter"]
