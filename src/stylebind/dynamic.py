"""Runtime ("ad hoc") rules with content-addressed reuse.

A dynamic rule has no member name.  Its body is built against an unbound
self selector, then compared with every class rule already in the store:
same properties plus the same nested rules means the existing class name
is returned and nothing is stored.  Otherwise a fresh ``auto-<n>`` name is
minted from a process-wide counter, bound and registered.

The scan is linear in the number of stored rules.
"""

from __future__ import annotations

import itertools
import logging
import threading

from stylebind.builder import StyleBody, build_style
from stylebind.events.types import DynamicRuleRegistered, DynamicRuleReused
from stylebind.rules import RuleDeclaration, StyleRule
from stylebind.selectors import ClassSelector, create_self
from stylebind.store import RuleStore

logger = logging.getLogger(__name__)

__all__ = ["BoundClassRegistry", "DynamicRuleCache", "next_auto_index"]

_counter = itertools.count()
_counter_lock = threading.Lock()


def next_auto_index() -> int:
    """Return the next value of the process-wide naming counter."""
    with _counter_lock:
        return next(_counter)


class BoundClassRegistry:
    """Nested rules registered alongside each dynamically named class."""

    def __init__(self) -> None:
        self._rules: dict[str, tuple[RuleDeclaration, ...]] = {}

    def record(self, class_name: str, rules: tuple[RuleDeclaration, ...]) -> None:
        self._rules[class_name] = tuple(rules)

    def get(self, class_name: str) -> tuple[RuleDeclaration, ...]:
        return self._rules.get(class_name, ())

    def __contains__(self, class_name: str) -> bool:
        return class_name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


class DynamicRuleCache:
    """Registers dynamic rules on one store, reusing structurally equal ones."""

    def __init__(
        self,
        store: RuleStore,
        prefix: str = "auto",
        separator: str = "-",
        registry: BoundClassRegistry | None = None,
    ) -> None:
        self._store = store
        self.prefix = prefix
        self.separator = separator
        self.registry = registry if registry is not None else BoundClassRegistry()

    def register(self, body: StyleBody) -> str:
        """Return a class name whose rules match what *body* declares."""
        with self._store.lock:
            self_selector = create_self()
            properties, nested = build_style(self_selector, self_selector, body)

            existing = self.lookup(properties, nested)
            if existing is not None:
                logger.debug("Reusing dynamic class %s", existing)
                self._store.events.emit(DynamicRuleReused(class_name=existing))
                return existing

            class_selector = ClassSelector(f"{self.prefix}{self.separator}{next_auto_index()}")
            self_selector.bind(class_selector)
            # Recorded before the store notifies listeners.
            self.registry.record(class_selector.name, nested)
            self._store.extend((StyleRule(selector=class_selector, properties=properties), *nested))
            logger.debug(
                "Registered dynamic class %s (%d properties, %d nested rules)",
                class_selector.name,
                len(properties),
                len(nested),
            )
            self._store.events.emit(
                DynamicRuleRegistered(class_name=class_selector.name, nested_count=len(nested))
            )
            return class_selector.name

    def lookup(
        self, properties: dict[str, object], nested: tuple[RuleDeclaration, ...]
    ) -> str | None:
        """Return the class name of a stored rule equal to the candidate, if any."""

        def matches(rule: RuleDeclaration) -> bool:
            return (
                isinstance(rule, StyleRule)
                and isinstance(rule.selector, ClassSelector)
                and rule.properties == properties
                and self.registry.get(rule.selector.name) == tuple(nested)
            )

        found = self._store.find(matches)
        if found is None:
            return None
        return found.selector.name
