"""Factory facade: start fragments and combine selectors."""

from __future__ import annotations

import logging

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import UnsupportedCombinatorError
from cssbuilder.selector.combined import CombinedSelector
from cssbuilder.selector.fragment import SelectorFragment
from cssbuilder.selector.model import Combinator, Selector

__all__ = [
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
    "make_attr",
    "make_class",
    "make_element",
    "make_id",
    "make_pseudo_class",
    "make_pseudo_element",
]

logger = logging.getLogger(__name__)

_TOKENS = frozenset(member.value for member in Combinator)


def make_element(value: str) -> SelectorFragment:
    return SelectorFragment().element(value)


def make_id(value: str) -> SelectorFragment:
    return SelectorFragment().id(value)


def make_class(value: str) -> SelectorFragment:
    return SelectorFragment().class_(value)


def make_attr(value: str) -> SelectorFragment:
    return SelectorFragment().attr(value)


def make_pseudo_class(value: str) -> SelectorFragment:
    return SelectorFragment().pseudo_class(value)


def make_pseudo_element(value: str) -> SelectorFragment:
    return SelectorFragment().pseudo_element(value)


def combine(
    left: Selector,
    token: str | Combinator,
    right: Selector,
    *,
    strict: bool = False,
) -> CombinedSelector:
    """Join *left* and *right* with *token*.

    Any token is passed through verbatim unless *strict* is set, in which
    case only ``' '``, ``'>'``, ``'+'`` and ``'~'`` are accepted.
    """
    if strict and token not in _TOKENS:
        raise UnsupportedCombinatorError(token)
    logger.debug("combine: %r %r %r", left, token, right)
    return CombinedSelector(left=left, combinator=token, right=right)


class SelectorBuilder:
    """Stateless entry point; every constructor call starts a fresh fragment.

    Example::

        builder = SelectorBuilder()
        builder.combine(
            builder.element("ul").class_("menu"),
            ">",
            builder.element("li").pseudo_class("first-child"),
        ).stringify()
        # 'ul.menu > li:first-child'
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, value: str) -> SelectorFragment:
        return make_element(value)

    def id(self, value: str) -> SelectorFragment:
        return make_id(value)

    def class_(self, value: str) -> SelectorFragment:
        return make_class(value)

    def attr(self, value: str) -> SelectorFragment:
        return make_attr(value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return make_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return make_pseudo_element(value)

    def combine(
        self, left: Selector, token: str | Combinator, right: Selector
    ) -> CombinedSelector:
        return combine(left, token, right, strict=self.config.strict_combinators)


css_selector_builder = SelectorBuilder()
