"""CombinedSelector: two selectors joined by a combinator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cssbuilder.selector.model import Combinator, Selector

__all__ = ["CombinedSelector"]


@dataclass(frozen=True)
class CombinedSelector:
    """``left <combinator> right``, where either side may itself be combined.

    Operands are held by reference, so a fragment mutated after it was
    combined renders in its latest state.
    """

    left: Selector
    combinator: str
    right: Selector

    @property
    def token(self) -> str:
        """The combinator as literal text."""
        if isinstance(self.combinator, Combinator):
            return self.combinator.value
        return self.combinator

    def stringify(self) -> str:
        # Padding is unconditional: a descendant (' ') renders as three spaces.
        return f"{self.left.stringify()} {self.token} {self.right.stringify()}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left.to_dict(),
            "combinator": self.token,
            "right": self.right.to_dict(),
        }

    def __str__(self) -> str:
        return self.stringify()
