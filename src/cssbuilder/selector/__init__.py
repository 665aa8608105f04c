from cssbuilder.selector.model import Combinator, Part, Selector
from cssbuilder.selector.fragment import SelectorFragment
from cssbuilder.selector.combined import CombinedSelector
from cssbuilder.selector.builder import (
    SelectorBuilder,
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
    "Combinator",
    "CombinedSelector",
    "Part",
    "Selector",
    "SelectorBuilder",
    "SelectorFragment",
    "combine",
    "css_selector_builder",
    "make_attr",
    "make_class",
    "make_element",
    "make_id",
    "make_pseudo_class",
    "make_pseudo_element",
]
