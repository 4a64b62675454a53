"""Facade for building CSS selectors.

Usage::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

from objkit.selector.model import CombinedSelector, Selector, SimpleSelector

__all__ = ["CssSelectorBuilder", "css_selector_builder"]


class CssSelectorBuilder:
    """Stateless entry points that start a selector chain or join two selectors."""

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().with_element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().with_id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_class(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_attribute(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().with_pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> CombinedSelector:
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = CssSelectorBuilder()
