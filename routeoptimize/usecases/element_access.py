"""Element lookup shared by the shell controllers.

A missing element is a broken layout. In strict mode (development default)
lookups raise :class:`MissingElementError`; in lenient mode they log a warning
and return ``None`` so the caller skips that single mutation.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..domain.errors import MissingElementError
from ..domain.ports import Element, PresentationPort

ElementRef = Union[str, Element]


class ElementAccess:
    def __init__(self, presentation: PresentationPort, *, strict: bool = True) -> None:
        self._log = logging.getLogger(__name__)
        self.presentation = presentation
        self.strict = strict

    def require(self, element_id: str) -> Optional[Element]:
        element = self.presentation.get_element(element_id)
        if element is None:
            return self._missing(element_id)
        return element

    def require_first(self, selector: str) -> Optional[Element]:
        """First element matching ``selector`` (``.nav-btn-arrived`` style)."""
        matches = self.presentation.query_all(selector)
        if not matches:
            return self._missing(selector)
        return matches[0]

    def resolve(self, ref: ElementRef) -> Optional[Element]:
        """Accept either an element handle or an element id."""
        if isinstance(ref, str):
            return self.require(ref)
        if ref is None:
            return self._missing("<none>")
        return ref

    def _missing(self, key: str) -> None:
        if self.strict:
            raise MissingElementError(key)
        self._log.warning("Presentation element missing, skipping update: %s", key)
        return None


__all__ = ["ElementAccess", "ElementRef"]
