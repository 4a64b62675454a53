from objkit.selector.builder import CssSelectorBuilder, css_selector_builder
from objkit.selector.errors import ExpressionError, OrderOrDuplicateError
from objkit.selector.expression import parse_selector
from objkit.selector.model import CombinedSelector, Selector, SelectorPart, SimpleSelector

__all__ = [
    "SelectorPart",
    "SimpleSelector",
    "CombinedSelector",
    "Selector",
    "CssSelectorBuilder",
    "css_selector_builder",
    "OrderOrDuplicateError",
    "ExpressionError",
    "parse_selector",
]
