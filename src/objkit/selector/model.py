"""Selector model: SelectorPart, SimpleSelector and CombinedSelector."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from objkit.selector.errors import (
    DUPLICATE_MESSAGE,
    ORDER_MESSAGE,
    OrderOrDuplicateError,
)

log = logging.getLogger(__name__)

_NO_PART = 0


class SelectorPart(Enum):
    """Kinds of compound-selector parts, valued by their canonical rank."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def rank(self) -> int:
        return self.value

    @property
    def repeatable(self) -> bool:
        """True for parts that may occur several times in one selector."""
        return self in _REPEATABLE


_REPEATABLE = frozenset(
    {SelectorPart.CLASS, SelectorPart.ATTRIBUTE, SelectorPart.PSEUDO_CLASS}
)


@dataclass
class SimpleSelector:
    """One compound selector, e.g. ``div#id.cls[attr]:hover::before``.

    Parts must be added in canonical order (element, id, class, attribute,
    pseudo-class, pseudo-element). Element, id and pseudo-element may be
    set once; the other parts may repeat and keep their insertion order.
    Every mutator returns the selector itself so calls can be chained. A
    selector always starts empty; its parts are not constructor arguments.
    """

    element_name: str | None = field(default=None, init=False)
    id_name: str | None = field(default=None, init=False)
    classes: list[str] = field(default_factory=list, init=False)
    attributes: list[str] = field(default_factory=list, init=False)
    pseudo_classes: list[str] = field(default_factory=list, init=False)
    pseudo_element_name: str | None = field(default=None, init=False)
    last_rank: int = field(default=_NO_PART, init=False)

    # --- ordering -------------------------------------------------------------

    def _check(self, part: SelectorPart) -> None:
        """Raise OrderOrDuplicateError if *part* cannot be added now."""
        if part.rank == self.last_rank and not part.repeatable:
            log.debug("Rejected %s: already set", part.name)
            raise OrderOrDuplicateError(DUPLICATE_MESSAGE, part=part, duplicate=True)
        if part.rank < self.last_rank:
            log.debug("Rejected %s: after rank %d", part.name, self.last_rank)
            raise OrderOrDuplicateError(ORDER_MESSAGE, part=part, duplicate=False)

    def _advance(self, part: SelectorPart, value: str) -> None:
        self.last_rank = part.rank
        log.debug("Added %s %r", part.name, value)

    # --- singleton parts ------------------------------------------------------

    def with_element(self, value: str) -> SimpleSelector:
        self._check(SelectorPart.ELEMENT)
        self.element_name = value
        self._advance(SelectorPart.ELEMENT, value)
        return self

    def with_id(self, value: str) -> SimpleSelector:
        self._check(SelectorPart.ID)
        self.id_name = value
        self._advance(SelectorPart.ID, value)
        return self

    def with_pseudo_element(self, value: str) -> SimpleSelector:
        self._check(SelectorPart.PSEUDO_ELEMENT)
        self.pseudo_element_name = value
        self._advance(SelectorPart.PSEUDO_ELEMENT, value)
        return self

    # --- repeatable parts -----------------------------------------------------

    def add_class(self, value: str) -> SimpleSelector:
        self._check(SelectorPart.CLASS)
        self.classes.append(value)
        self._advance(SelectorPart.CLASS, value)
        return self

    def add_attribute(self, value: str) -> SimpleSelector:
        self._check(SelectorPart.ATTRIBUTE)
        self.attributes.append(value)
        self._advance(SelectorPart.ATTRIBUTE, value)
        return self

    def add_pseudo_class(self, value: str) -> SimpleSelector:
        self._check(SelectorPart.PSEUDO_CLASS)
        self.pseudo_classes.append(value)
        self._advance(SelectorPart.PSEUDO_CLASS, value)
        return self

    # --- builder-style aliases ------------------------------------------------

    def element(self, value: str) -> SimpleSelector:
        return self.with_element(value)

    def id(self, value: str) -> SimpleSelector:
        return self.with_id(value)

    def class_(self, value: str) -> SimpleSelector:
        return self.add_class(value)

    def attr(self, value: str) -> SimpleSelector:
        return self.add_attribute(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self.add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self.with_pseudo_element(value)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        """Serialise the parts in canonical order, whatever order they came in."""
        out = [self.element_name or ""]
        if self.id_name is not None:
            out.append(f"#{self.id_name}")
        out.extend(f".{name}" for name in self.classes)
        out.extend(f"[{attr}]" for attr in self.attributes)
        out.extend(f":{pseudo}" for pseudo in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            out.append(f"::{self.pseudo_element_name}")
        return "".join(out)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator (``' '``, ``'+'``, ``'~'``, ``'>'``).

    The combinator is not checked and is echoed verbatim. Operands are held
    by reference.
    """

    left: Selector
    combinator: str
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


Selector = Union[SimpleSelector, CombinedSelector]
