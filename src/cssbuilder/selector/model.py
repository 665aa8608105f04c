"""Selector model: part ranks, combinators, and the Selector protocol."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Protocol


class Part(IntEnum):
    """A simple-selector part, valued by its rank in the CSS ordering.

    Parts must appear in non-decreasing rank order:
        element#id.class[attr]:pseudo-class::pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    def render(self, value: str) -> str:
        """Wrap *value* in this part's CSS delimiters."""
        prefix, suffix = _DELIMITERS[self]
        return f"{prefix}{value}{suffix}"


_DELIMITERS: dict[Part, tuple[str, str]] = {
    Part.ELEMENT: ("", ""),
    Part.ID: ("#", ""),
    Part.CLASS: (".", ""),
    Part.ATTRIBUTE: ("[", "]"),
    Part.PSEUDO_CLASS: (":", ""),
    Part.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(str, Enum):
    """Relation joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT = "+"
    SIBLING = "~"

    @classmethod
    def lookup(cls, token: str) -> Combinator | None:
        """Resolve a literal token or a member name (case-insensitive)."""
        for member in cls:
            if token == member.value or token.lower() == member.name.lower():
                return member
        return None


class Selector(Protocol):
    """Anything that renders to CSS selector text."""

    def stringify(self) -> str: ...

    def to_dict(self) -> dict[str, Any]: ...
