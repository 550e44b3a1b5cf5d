"""Package list screen: status tabs, free-text search and card expansion.

Tab and text filters act independently on the same cards; the last one
applied decides visibility.
"""

from __future__ import annotations

import logging
from typing import Union

from ..domain.packages import PackageStatus, parse_status
from ..domain.ports import PresentationPort
from ..usecases.element_access import ElementAccess, ElementRef
from ..usecases.filter_packages import matches_query, matches_tab
from ..viewmodels.shell_state import ShellState

TAB_SELECTOR = ".pkg-tab"
CARD_SELECTOR = ".pkg-card"
STATUS_KEY = "status"
ACTIVE = "active"
OPEN = "open"


class PackageListController:
    def __init__(
        self,
        *,
        presentation: PresentationPort,
        state: ShellState,
        elements: ElementAccess,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.presentation = presentation
        self.state = state
        self.elements = elements

    def set_tab(self, tab: Union[PackageStatus, str], requesting_control: ElementRef) -> int:
        """Activate ``requesting_control`` and show only cards of ``tab``.

        Returns the number of cards left visible.
        """
        status = parse_status(tab)
        p = self.presentation
        control = self.elements.resolve(requesting_control)
        for tab_control in p.query_all(TAB_SELECTOR):
            p.remove_class(tab_control, ACTIVE)
        if control is not None:
            p.add_class(control, ACTIVE)

        shown = 0
        for card in p.query_all(CARD_SELECTOR):
            visible = matches_tab(p.get_data(card, STATUS_KEY), status)
            p.set_visible(card, visible)
            shown += int(visible)

        self.state.active_tab = status
        self._log.debug("Package tab %s shows %d card(s)", status.value, shown)
        return shown

    def toggle_expanded(self, card: ElementRef) -> bool:
        """Flip one card's detail panel; other cards are untouched."""
        element = self.elements.resolve(card)
        if element is None:
            return False
        return self.presentation.toggle_class(element, OPEN)

    def filter_by_text(self, query: str) -> int:
        p = self.presentation
        shown = 0
        for card in p.query_all(CARD_SELECTOR):
            visible = matches_query(p.text_content(card), query)
            p.set_visible(card, visible)
            shown += int(visible)
        self.state.search_query = query or ""
        return shown


__all__ = ["PackageListController"]
