"""Domain-level error types shared by controllers and adapters."""

from __future__ import annotations

from typing import Optional


class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, meta: Optional[dict] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


class MissingElementError(UseCaseError):
    """A visual element required by a controller is not in the presentation."""

    def __init__(self, element_id: str):
        super().__init__(
            "MISSING_ELEMENT",
            f"Presentation element not found: {element_id}",
            meta={"element_id": element_id},
        )
        self.element_id = element_id


__all__ = ["MissingElementError", "UseCaseError"]
