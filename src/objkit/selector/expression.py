"""Lark reader that replays builder-call expressions through the facade."""

from __future__ import annotations

import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import VisitError

from objkit.selector.builder import css_selector_builder
from objkit.selector.errors import ExpressionError, OrderOrDuplicateError
from objkit.selector.model import Selector, SimpleSelector

__all__ = ["parse_selector"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE_RE = re.compile(r"\\(.)")

# Expression part name -> SimpleSelector method.
_PART_METHODS: dict[str, str] = {
    "element": "with_element",
    "id": "with_id",
    "class": "add_class",
    "attr": "add_attribute",
    "pseudoClass": "add_pseudo_class",
    "pseudo_class": "add_pseudo_class",
    "pseudoElement": "with_pseudo_element",
    "pseudo_element": "with_pseudo_element",
}


def _unquote(raw: str) -> str:
    return _ESCAPE_RE.sub(r"\1", raw[1:-1])


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into selector objects."""

    def STRING(self, token: Token) -> str:  # noqa: N802
        return _unquote(str(token))

    def part(self, items: list[object]) -> tuple[str, str]:
        return (str(items[0]), str(items[1]))

    def chain(self, items: list[tuple[str, str]]) -> SimpleSelector:
        selector = SimpleSelector()
        for name, value in items:
            getattr(selector, _PART_METHODS[name])(value)
        return selector

    def combine(self, items: list[object]) -> Selector:
        left, combinator, right = items
        return css_selector_builder.combine(left, str(combinator), right)  # type: ignore[arg-type]

    def start(self, items: list[object]) -> Selector:
        return items[0]  # type: ignore[return-value]


def parse_selector(source: str) -> Selector:
    """Read a builder-call expression and return the selector it builds.

    Raises ExpressionError for malformed text and OrderOrDuplicateError when
    a chain adds its parts in an invalid order.
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
    except Exception as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ExpressionError(str(e), line=line, column=column) from e
    try:
        return SelectorTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, OrderOrDuplicateError):
            raise e.orig_exc from None
        raise
