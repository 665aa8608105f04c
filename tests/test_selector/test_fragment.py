"""Tests for SelectorFragment ordering, cardinality, and rendering."""

from itertools import combinations

import pytest

from cssbuilder.errors import DuplicateSelectorPartError, SelectorOrderError
from cssbuilder.selector import Part, SelectorFragment


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestStringify:
    def test_empty_fragment(self):
        assert SelectorFragment().stringify() == ""

    def test_element_only(self):
        assert SelectorFragment().element("div").stringify() == "div"

    def test_all_parts_in_order(self):
        frag = (
            SelectorFragment()
            .element("a")
            .id("nav")
            .class_("link")
            .class_("active")
            .attr("href")
            .attr('target="_blank"')
            .pseudo_class("hover")
            .pseudo_class("focus")
            .pseudo_element("after")
        )
        assert frag.stringify() == (
            'a#nav.link.active[href][target="_blank"]:hover:focus::after'
        )

    def test_id_and_classes(self):
        frag = SelectorFragment().id("main").class_("container").class_("editable")
        assert frag.stringify() == "#main.container.editable"

    def test_attribute_and_pseudo_class(self):
        frag = SelectorFragment().element("a").attr('href$=".png"').pseudo_class("focus")
        assert frag.stringify() == 'a[href$=".png"]:focus'

    def test_functional_pseudo_class(self):
        frag = SelectorFragment().element("tr").pseudo_class("nth-of-type(even)")
        assert frag.stringify() == "tr:nth-of-type(even)"

    def test_pseudo_element_alone(self):
        assert SelectorFragment().pseudo_element("selection").stringify() == "::selection"

    def test_str_matches_stringify(self):
        frag = SelectorFragment().element("p").class_("lead")
        assert str(frag) == frag.stringify() == "p.lead"

    def test_stringify_is_repeatable(self):
        frag = SelectorFragment().element("ul").class_("menu")
        assert frag.stringify() == "ul.menu"
        assert frag.stringify() == "ul.menu"

    def test_class_order_preserved(self):
        frag = SelectorFragment().class_("b").class_("a").class_("c")
        assert frag.stringify() == ".b.a.c"

    def test_duplicate_classes_allowed(self):
        frag = SelectorFragment().class_("x").class_("x")
        assert frag.stringify() == ".x.x"


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def _apply(frag: SelectorFragment, part: Part, value: str = "v") -> SelectorFragment:
    return frag.add(part, value)


class TestOrdering:
    @pytest.mark.parametrize("lower,higher", list(combinations(Part, 2)))
    def test_increasing_rank_is_accepted(self, lower, higher):
        frag = _apply(_apply(SelectorFragment(), lower), higher)
        assert frag.rank is higher

    @pytest.mark.parametrize("lower,higher", list(combinations(Part, 2)))
    def test_decreasing_rank_is_rejected(self, lower, higher):
        frag = _apply(SelectorFragment(), higher)
        with pytest.raises(SelectorOrderError) as excinfo:
            _apply(frag, lower)
        assert excinfo.value.part is lower
        assert excinfo.value.after is higher

    def test_element_after_class(self):
        with pytest.raises(SelectorOrderError):
            SelectorFragment().class_("x").element("a")

    def test_id_after_class(self):
        with pytest.raises(SelectorOrderError):
            SelectorFragment().class_("x").id("a")

    def test_class_after_attribute(self):
        with pytest.raises(SelectorOrderError):
            SelectorFragment().attr("href").class_("x")

    def test_pseudo_class_after_pseudo_element(self):
        with pytest.raises(SelectorOrderError):
            SelectorFragment().pseudo_element("before").pseudo_class("hover")

    def test_element_then_id_is_valid(self):
        assert SelectorFragment().element("a").id("x").stringify() == "a#x"

    def test_rank_is_none_when_empty(self):
        assert SelectorFragment().rank is None

    def test_rank_never_moves_back(self):
        frag = SelectorFragment().attr("href")
        with pytest.raises(SelectorOrderError):
            frag.class_("x")
        assert frag.rank is Part.ATTRIBUTE

    def test_order_message(self):
        with pytest.raises(SelectorOrderError, match="element, id, class, attribute"):
            SelectorFragment().id("a").element("div")


# ---------------------------------------------------------------------------
# Cardinality
# ---------------------------------------------------------------------------


class TestDuplicates:
    def test_duplicate_element(self):
        with pytest.raises(DuplicateSelectorPartError):
            SelectorFragment().element("a").element("b")

    def test_duplicate_id(self):
        with pytest.raises(DuplicateSelectorPartError):
            SelectorFragment().id("a").id("b")

    def test_duplicate_pseudo_element(self):
        with pytest.raises(DuplicateSelectorPartError):
            SelectorFragment().pseudo_element("before").pseudo_element("after")

    def test_duplicate_checked_before_order(self):
        frag = SelectorFragment().id("a").class_("x")
        with pytest.raises(DuplicateSelectorPartError) as excinfo:
            frag.id("b")
        assert excinfo.value.part is Part.ID

    def test_duplicate_message(self):
        with pytest.raises(DuplicateSelectorPartError, match="more than one time"):
            SelectorFragment().element("a").element("b")


# ---------------------------------------------------------------------------
# Failed calls leave state untouched
# ---------------------------------------------------------------------------


class TestNoPartialMutation:
    def test_rejected_id_not_applied(self):
        frag = SelectorFragment().class_("x")
        with pytest.raises(SelectorOrderError):
            frag.id("main")
        assert frag.id_name is None
        assert frag.stringify() == ".x"

    def test_rejected_duplicate_keeps_first_value(self):
        frag = SelectorFragment().element("a")
        with pytest.raises(DuplicateSelectorPartError):
            frag.element("b")
        assert frag.stringify() == "a"

    def test_rejected_class_not_appended(self):
        frag = SelectorFragment().pseudo_class("hover")
        with pytest.raises(SelectorOrderError):
            frag.class_("x")
        assert frag.classes == []

    def test_chain_continues_after_caught_error(self):
        frag = SelectorFragment().element("a")
        with pytest.raises(DuplicateSelectorPartError):
            frag.element("b")
        assert frag.class_("ok").stringify() == "a.ok"


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------


class TestToDict:
    def test_to_dict(self):
        frag = SelectorFragment().element("a").class_("x").attr("href")
        assert frag.to_dict() == {
            "element": "a",
            "id": None,
            "classes": ["x"],
            "attributes": ["href"],
            "pseudo_classes": [],
            "pseudo_element": None,
        }

    def test_to_dict_is_a_copy(self):
        frag = SelectorFragment().class_("x")
        snapshot = frag.to_dict()
        snapshot["classes"].append("y")
        assert frag.stringify() == ".x"
