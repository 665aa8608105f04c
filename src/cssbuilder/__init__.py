"""cssbuilder: a fluent CSS selector builder."""

__version__ = "0.1.0"

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import (
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
    UnsupportedCombinatorError,
)
from cssbuilder.objects import Rectangle, from_json, to_json
from cssbuilder.selector import (
    Combinator,
    CombinedSelector,
    Part,
    Selector,
    SelectorBuilder,
    SelectorFragment,
    combine,
    css_selector_builder,
    make_attr,
    make_class,
    make_element,
    make_id,
    make_pseudo_class,
    make_pseudo_element,
)

__all__ = [
    "__version__",
    "BuilderConfig",
    "Combinator",
    "CombinedSelector",
    "DuplicateSelectorPartError",
    "Part",
    "Rectangle",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFragment",
    "SelectorOrderError",
    "UnsupportedCombinatorError",
    "combine",
    "css_selector_builder",
    "from_json",
    "make_attr",
    "make_class",
    "make_element",
    "make_id",
    "make_pseudo_class",
    "make_pseudo_element",
    "to_json",
]
