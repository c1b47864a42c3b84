"""Tests for dynamic rules: content-addressed reuse and auto naming."""

import threading

import pytest

from stylebind import StyleSheet
from stylebind.dynamic import BoundClassRegistry, DynamicRuleCache, next_auto_index
from stylebind.events import DynamicRuleRegistered, DynamicRuleReused
from stylebind.rules import StyleRule
from stylebind.selectors import ClassSelector, cls, desc, tag
from stylebind.store import RuleStore


def _red(css):
    css.property("color", "red")


def _red_with_hover(css):
    css.property("color", "red")
    css.hover(lambda h: h.property("color", "darkred"))


# ---------------------------------------------------------------------------
# Naming counter
# ---------------------------------------------------------------------------


class TestCounter:
    def test_monotonic(self):
        first = next_auto_index()
        second = next_auto_index()
        assert second > first

    def test_unique_across_threads(self):
        results: list[int] = []
        lock = threading.Lock()

        def worker():
            values = [next_auto_index() for _ in range(200)]
            with lock:
                results.extend(values)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == len(set(results)) == 1600


# ---------------------------------------------------------------------------
# Reuse
# ---------------------------------------------------------------------------


class TestReuse:
    def test_identical_bodies_share_name(self):
        sheet = StyleSheet("S")
        first = sheet.css(_red)
        length = len(sheet.snapshot())
        second = sheet.css(lambda css: css.property("color", "red"))
        assert first == second
        assert first.startswith("auto-")
        assert len(sheet.snapshot()) == length == 1

    def test_three_calls_store_one_rule(self):
        sheet = StyleSheet("S")
        names = {sheet.css(_red) for _ in range(3)}
        assert len(names) == 1
        rules = sheet.snapshot()
        assert len(rules) == 1
        assert rules[0] == StyleRule(ClassSelector(names.pop()), {"color": "red"})

    def test_property_order_does_not_affect_reuse(self):
        sheet = StyleSheet("S")

        def ab(css):
            css["a"] = "1"
            css["b"] = "2"

        def ba(css):
            css["b"] = "2"
            css["a"] = "1"

        assert sheet.css(ab) == sheet.css(ba)
        assert list(sheet.snapshot()[0].properties) == ["a", "b"]

    def test_reuse_with_nested_rules(self):
        sheet = StyleSheet("S")
        first = sheet.css(_red_with_hover)
        length = len(sheet.snapshot())
        assert sheet.css(_red_with_hover) == first
        assert len(sheet.snapshot()) == length == 2

    def test_empty_body_reused(self):
        sheet = StyleSheet("S")
        first = sheet.css(lambda css: None)
        assert sheet.css(lambda css: None) == first
        assert sheet.snapshot() == (StyleRule(ClassSelector(first), {}),)

    def test_reuses_declared_class_with_same_properties(self):
        sheet = StyleSheet("S")
        declared = sheet.declare("danger", _red)
        assert sheet.css(_red) == declared

    def test_body_runs_on_every_call(self):
        sheet = StyleSheet("S")
        calls = []

        def body(css):
            calls.append(1)
            css.property("color", "red")

        sheet.css(body)
        sheet.css(body)
        assert len(calls) == 2


# ---------------------------------------------------------------------------
# Discrimination
# ---------------------------------------------------------------------------


class TestDiscrimination:
    def test_different_values_get_new_names(self):
        sheet = StyleSheet("S")
        red = sheet.css(_red)
        blue = sheet.css(lambda css: css.property("color", "blue"))
        assert red != blue
        assert len(sheet.snapshot()) == 2

    def test_nested_rules_distinguish(self):
        sheet = StyleSheet("S")
        plain = sheet.css(_red)
        before = len(sheet.snapshot())
        hovered = sheet.css(_red_with_hover)
        assert plain != hovered
        assert len(sheet.snapshot()) == before + 2

    def test_nested_values_distinguish(self):
        sheet = StyleSheet("S")
        first = sheet.css(_red_with_hover)
        second = sheet.css(lambda css: (
            css.property("color", "red"),
            css.hover(lambda h: h.property("color", "pink")),
        ))
        assert first != second

    def test_empty_properties_distinct_from_nonempty(self):
        sheet = StyleSheet("S")
        assert sheet.css(lambda css: None) != sheet.css(_red)

    def test_growth_is_one_plus_nested(self):
        sheet = StyleSheet("S")

        def body(css):
            css.property("margin", "1px")
            css.hover(lambda h: h.property("margin", "2px"))
            css.style(desc(css.self_, tag("b")), lambda b: b.property("margin", "3px"))

        sheet.css(body)
        assert len(sheet.snapshot()) == 3

    def test_names_are_never_reused_across_sheets(self):
        first = StyleSheet("A").css(_red)
        second = StyleSheet("B").css(_red)
        assert first != second


# ---------------------------------------------------------------------------
# Binding and registry
# ---------------------------------------------------------------------------


class TestBinding:
    def test_nested_selectors_bound_to_new_name(self):
        sheet = StyleSheet("S")
        name = sheet.css(_red_with_hover)
        rules = sheet.snapshot()
        assert rules[0].selector == cls(name)
        assert rules[1].selector.as_text() == f".{name}:hover"

    def test_registry_records_nested_rules(self):
        store = RuleStore()
        registry = BoundClassRegistry()
        cache = DynamicRuleCache(store, registry=registry)
        assert cache.registry is registry
        name = cache.register(_red_with_hover)
        assert name in registry
        assert len(registry.get(name)) == 1
        assert registry.get("missing") == ()

    def test_lookup_misses_on_empty_store(self):
        cache = DynamicRuleCache(RuleStore())
        assert cache.lookup({"color": "red"}, ()) is None

    def test_custom_prefix(self):
        cache = DynamicRuleCache(RuleStore(), prefix="gen", separator="_")
        assert cache.register(_red).startswith("gen_")

    def test_events(self):
        sheet = StyleSheet("S")
        events = []
        sheet.store.events.subscribe(DynamicRuleRegistered, events.append)
        sheet.store.events.subscribe(DynamicRuleReused, events.append)
        name = sheet.css(_red_with_hover)
        sheet.css(_red_with_hover)
        assert events == [
            DynamicRuleRegistered(class_name=name, nested_count=1),
            DynamicRuleReused(class_name=name),
        ]


class TestFailingListener:
    def test_registration_survives_listener_error(self):
        sheet = StyleSheet("S")
        seen = []

        def listener(event):
            seen.append(event)
            if len(seen) == 1:
                raise RuntimeError("listener failed")

        sheet.subscribe(listener)
        with pytest.raises(RuntimeError):
            sheet.css(_red_with_hover)
        rules = sheet.snapshot()
        assert len(rules) == 2
        name = rules[0].selector.name
        assert sheet.css(_red_with_hover) == name
        assert len(sheet.snapshot()) == 2


class TestConcurrency:
    def test_parallel_identical_registrations_store_once(self):
        sheet = StyleSheet("S")
        names: list[str] = []
        lock = threading.Lock()

        def worker():
            for _ in range(50):
                name = sheet.css(_red_with_hover)
                with lock:
                    names.append(name)

        threads = [threading.Thread(target=worker) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(set(names)) == 1
        assert len(sheet.snapshot()) == 2
