"""Tests for selector variants and self-selector resolution."""

import pytest

from stylebind.builder import build_style
from stylebind.errors import InvalidSelfInstantiation, UnresolvedSelfSelector
from stylebind.selectors import (
    AttributeSelector,
    ClassSelector,
    CombinedSelector,
    SelfSelector,
    adjacent,
    attr,
    child,
    cls,
    combine,
    create_self,
    desc,
    group,
    hover,
    id_,
    pseudo,
    pseudo_element,
    selector,
    sibling,
    tag,
    universal,
)


# ---------------------------------------------------------------------------
# Text form
# ---------------------------------------------------------------------------


class TestSelectorText:
    def test_simple_selectors(self):
        assert cls("card").as_text() == ".card"
        assert id_("main").as_text() == "#main"
        assert tag("div").as_text() == "div"
        assert universal().as_text() == "*"
        assert selector("ul li").as_text() == "ul li"

    def test_attribute_selector(self):
        assert attr("disabled").as_text() == "[disabled]"
        assert attr("type", "text").as_text() == '[type="text"]'
        assert AttributeSelector("lang", "en", "|=").as_text() == '[lang|="en"]'

    def test_pseudo_selectors(self):
        assert hover.as_text() == ":hover"
        assert pseudo("nth-child", "2n").as_text() == ":nth-child(2n)"
        assert pseudo_element("before").as_text() == "::before"

    def test_composites(self):
        a, b = cls("a"), cls("b")
        assert combine(a, hover).as_text() == ".a:hover"
        assert group(a, b).as_text() == ".a, .b"
        assert desc(a, b).as_text() == ".a .b"
        assert child(a, b).as_text() == ".a > .b"
        assert sibling(a, b).as_text() == ".a ~ .b"
        assert adjacent(a, b).as_text() == ".a + .b"

    def test_str_matches_as_text(self):
        assert str(combine(tag("a"), hover)) == "a:hover"


# ---------------------------------------------------------------------------
# Self selector
# ---------------------------------------------------------------------------


class TestSelfSelector:
    def test_unbound_as_text_raises(self):
        with pytest.raises(UnresolvedSelfSelector):
            create_self().as_text()

    def test_unbound_str_raises(self):
        with pytest.raises(InvalidSelfInstantiation):
            str(create_self())

    def test_bound_str_raises(self):
        me = SelfSelector(cls("x"))
        with pytest.raises(InvalidSelfInstantiation, match=r"selector\(<your string>\)"):
            f"{me} > span"
        assert me.as_text() == ".x"

    def test_string_concatenation_in_declared_body_raises(self):
        def body(css):
            css.property("content", f"{css.self_} > span")

        with pytest.raises(InvalidSelfInstantiation):
            build_style(cls("x"), cls("x"), body)

    def test_composite_str_uses_bound_text(self):
        assert str(combine(SelfSelector(cls("x")), hover)) == ".x:hover"

    def test_unbound_inside_composite_raises(self):
        with pytest.raises(UnresolvedSelfSelector):
            combine(create_self(), hover).as_text()

    def test_bind_resolves_text(self):
        me = create_self()
        me.bind(cls("auto-1"))
        assert me.is_bound
        assert me.as_text() == ".auto-1"

    def test_composite_resolves_after_bind(self):
        me = create_self()
        hovered = combine(me, hover)
        me.bind(cls("x"))
        assert hovered.as_text() == ".x:hover"

    def test_double_bind_raises(self):
        me = create_self()
        me.bind(cls("a"))
        with pytest.raises(InvalidSelfInstantiation):
            me.bind(cls("b"))
        assert me.as_text() == ".a"

    def test_bind_to_self_raises(self):
        with pytest.raises(InvalidSelfInstantiation):
            create_self().bind(create_self())

    def test_wrap_self_raises(self):
        with pytest.raises(InvalidSelfInstantiation):
            SelfSelector(create_self())


class TestSelfSelectorEquality:
    def test_two_unbound_are_equal(self):
        assert create_self() == create_self()

    def test_unbound_equals_bound(self):
        bound = SelfSelector(cls("a"))
        assert create_self() == bound
        assert bound == create_self()

    def test_different_targets_are_equal(self):
        assert SelfSelector(cls("a")) == SelfSelector(id_("b"))

    def test_not_equal_to_its_target(self):
        target = cls("a")
        assert SelfSelector(target) != target
        assert target != SelfSelector(target)

    def test_hash_consistent_with_equality(self):
        assert hash(SelfSelector(cls("a"))) == hash(create_self())

    def test_equality_inside_composites(self):
        first = combine(create_self(), hover)
        second = combine(SelfSelector(cls("auto-7")), hover)
        assert first == second
        assert combine(create_self(), pseudo("focus")) != second

    def test_plain_selectors_use_structural_equality(self):
        assert cls("a") == ClassSelector("a")
        assert cls("a") != cls("b")
        assert CombinedSelector((cls("a"), hover)) == combine(cls("a"), hover)
