"""Append-only, observable store of rule declarations."""

from __future__ import annotations

import threading
from typing import Callable, Iterable, Iterator

from stylebind.events.bus import EventBus
from stylebind.events.types import RuleAdded
from stylebind.rules import RuleDeclaration, StyleRule
from stylebind.selectors import Selector


class RuleStore:
    """Ordered sequence of rule declarations for one stylesheet.

    Declarations are only ever appended.  Every append is announced as a
    :class:`RuleAdded` event on :attr:`events` before ``add`` returns.
    All public methods take the store's re-entrant lock, so a listener may
    read the store while it is being notified.
    """

    def __init__(self, events: EventBus | None = None) -> None:
        self._lock = threading.RLock()
        self._rules: list[RuleDeclaration] = []
        self.events = events if events is not None else EventBus()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # --- write ----------------------------------------------------------------

    def add(self, rule: RuleDeclaration) -> None:
        """Append a declaration and notify subscribers."""
        self.extend((rule,))

    def extend(self, rules: Iterable[RuleDeclaration]) -> None:
        """Append a group of declarations, then notify subscribers of each.

        The whole group is stored before the first listener runs, so a
        failing listener never leaves a partial group behind.
        """
        with self._lock:
            start = len(self._rules)
            added = list(rules)
            self._rules.extend(added)
            for offset, rule in enumerate(added):
                self.events.emit(RuleAdded(rule=rule, index=start + offset))

    def add_style(self, selector: Selector, properties: dict[str, object]) -> StyleRule:
        """Append a :class:`StyleRule` built from *selector* and *properties*."""
        rule = StyleRule(selector=selector, properties=dict(properties))
        self.add(rule)
        return rule

    # --- read -----------------------------------------------------------------

    def snapshot(self) -> tuple[RuleDeclaration, ...]:
        """Return the current declarations as an immutable tuple."""
        with self._lock:
            return tuple(self._rules)

    def find(self, predicate: Callable[[RuleDeclaration], bool]) -> RuleDeclaration | None:
        """Return the first declaration matching *predicate*, or ``None``."""
        with self._lock:
            for rule in self._rules:
                if predicate(rule):
                    return rule
            return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    def __iter__(self) -> Iterator[RuleDeclaration]:
        return iter(self.snapshot())

    # --- observation ----------------------------------------------------------

    def subscribe(self, callback: Callable[[RuleAdded], None]) -> Callable[[], None]:
        """Call *callback* with a :class:`RuleAdded` event on every append.

        Returns a function that removes the subscription.
        """
        self.events.subscribe(RuleAdded, callback)

        def unsubscribe() -> None:
            self.events.unsubscribe(callback)

        return unsubscribe

    def __repr__(self) -> str:
        return f"RuleStore(rules={len(self)})"
