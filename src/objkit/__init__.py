"""objkit: rectangles, JSON rebinding helpers and a CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objkit.codec import from_json, get_json  # noqa: E402
from objkit.config import ObjkitConfig  # noqa: E402
from objkit.model import Rectangle  # noqa: E402
from objkit.selector import (  # noqa: E402
    CombinedSelector,
    CssSelectorBuilder,
    OrderOrDuplicateError,
    SimpleSelector,
    css_selector_builder,
)

__all__ = [
    "__version__",
    "ObjkitConfig",
    "Rectangle",
    "get_json",
    "from_json",
    "SimpleSelector",
    "CombinedSelector",
    "CssSelectorBuilder",
    "OrderOrDuplicateError",
    "css_selector_builder",
]
