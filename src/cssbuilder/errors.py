"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import Any


class SelectorError(ValueError):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, part: Any = None) -> None:
        super().__init__(message)
        self.part = part


class DuplicateSelectorPartError(SelectorError):
    """A single-occurrence part (element, id, pseudo-element) was set twice."""

    def __init__(self, message: str | None = None, *, part: Any = None) -> None:
        if message is None:
            message = (
                "Element, id and pseudo-element should not occur more than one "
                "time inside the selector"
            )
        super().__init__(message, part=part)


class SelectorOrderError(SelectorError):
    """A part was added after a part that must follow it."""

    def __init__(
        self, message: str | None = None, *, part: Any = None, after: Any = None
    ) -> None:
        if message is None:
            message = (
                "Selector parts should be arranged in the following order: "
                "element, id, class, attribute, pseudo-class, pseudo-element"
            )
        super().__init__(message, part=part)
        self.after = after


class UnsupportedCombinatorError(SelectorError):
    """A combinator token outside ' ', '>', '+', '~' was used in strict mode."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unsupported combinator: {token!r}")
        self.token = token
