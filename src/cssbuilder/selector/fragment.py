"""SelectorFragment: a chainable simple selector with ordering checks."""

from __future__ import annotations

from typing import Any

from cssbuilder.errors import DuplicateSelectorPartError, SelectorOrderError
from cssbuilder.selector.model import Part

__all__ = ["SelectorFragment"]


class SelectorFragment:
    """A single compound selector such as ``a#nav.link[href]:hover``.

    Mutators update the fragment in place and return it, so calls chain::

        SelectorFragment().id("main").class_("container").stringify()
        # '#main.container'

    The highest rank committed so far only ever moves forward.  Adding a part
    of lower rank raises :class:`SelectorOrderError`; setting element, id or
    pseudo-element a second time raises :class:`DuplicateSelectorPartError`.
    A failed call leaves the fragment unchanged.
    """

    def __init__(self) -> None:
        self.element_name: str | None = None
        self.id_name: str | None = None
        self.classes: list[str] = []
        self.attributes: list[str] = []
        self.pseudo_classes: list[str] = []
        self.pseudo_element_name: str | None = None
        self._rank: int = -1

    # --- mutators ---------------------------------------------------------------

    def element(self, value: str) -> SelectorFragment:
        self._check(Part.ELEMENT, self.element_name is not None)
        self.element_name = value
        return self._commit(Part.ELEMENT)

    def id(self, value: str) -> SelectorFragment:
        self._check(Part.ID, self.id_name is not None)
        self.id_name = value
        return self._commit(Part.ID)

    def class_(self, value: str) -> SelectorFragment:
        self._check(Part.CLASS)
        self.classes.append(value)
        return self._commit(Part.CLASS)

    def attr(self, value: str) -> SelectorFragment:
        """Add an attribute selector body, e.g. ``href$=".png"``."""
        self._check(Part.ATTRIBUTE)
        self.attributes.append(value)
        return self._commit(Part.ATTRIBUTE)

    def pseudo_class(self, value: str) -> SelectorFragment:
        self._check(Part.PSEUDO_CLASS)
        self.pseudo_classes.append(value)
        return self._commit(Part.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> SelectorFragment:
        self._check(Part.PSEUDO_ELEMENT, self.pseudo_element_name is not None)
        self.pseudo_element_name = value
        return self._commit(Part.PSEUDO_ELEMENT)

    def add(self, part: Part, value: str) -> SelectorFragment:
        """Dispatch to the mutator for *part*."""
        return _MUTATORS[part](self, value)

    # --- rendering --------------------------------------------------------------

    def stringify(self) -> str:
        """Render the fragment.  Does not modify it."""
        pieces: list[str] = []
        if self.element_name is not None:
            pieces.append(Part.ELEMENT.render(self.element_name))
        if self.id_name is not None:
            pieces.append(Part.ID.render(self.id_name))
        pieces.extend(Part.CLASS.render(c) for c in self.classes)
        pieces.extend(Part.ATTRIBUTE.render(a) for a in self.attributes)
        pieces.extend(Part.PSEUDO_CLASS.render(p) for p in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            pieces.append(Part.PSEUDO_ELEMENT.render(self.pseudo_element_name))
        return "".join(pieces)

    def to_dict(self) -> dict[str, Any]:
        return {
            "element": self.element_name,
            "id": self.id_name,
            "classes": list(self.classes),
            "attributes": list(self.attributes),
            "pseudo_classes": list(self.pseudo_classes),
            "pseudo_element": self.pseudo_element_name,
        }

    @property
    def rank(self) -> Part | None:
        """Highest part committed so far, or None for an empty fragment."""
        return Part(self._rank) if self._rank >= 0 else None

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorFragment({self.stringify()!r})"

    # --- internals --------------------------------------------------------------

    def _check(self, part: Part, already_set: bool = False) -> None:
        if already_set:
            raise DuplicateSelectorPartError(part=part)
        if self._rank > part:
            raise SelectorOrderError(part=part, after=Part(self._rank))

    def _commit(self, part: Part) -> SelectorFragment:
        self._rank = max(self._rank, int(part))
        return self


_MUTATORS = {
    Part.ELEMENT: SelectorFragment.element,
    Part.ID: SelectorFragment.id,
    Part.CLASS: SelectorFragment.class_,
    Part.ATTRIBUTE: SelectorFragment.attr,
    Part.PSEUDO_CLASS: SelectorFragment.pseudo_class,
    Part.PSEUDO_ELEMENT: SelectorFragment.pseudo_element,
}
