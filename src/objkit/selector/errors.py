"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selector.model import SelectorPart

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class OrderOrDuplicateError(Exception):
    """Raised when a selector part repeats a singleton or arrives out of order."""

    def __init__(
        self,
        message: str,
        part: SelectorPart | None = None,
        duplicate: bool = False,
    ):
        self.part = part
        self.duplicate = duplicate
        super().__init__(message)

    @property
    def is_duplicate(self) -> bool:
        """True for a repeated singleton, False for a part out of order."""
        return self.duplicate


class ExpressionError(Exception):
    """Raised when a selector expression cannot be read."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
