"""Name binding for declared members: one build, one registration, cached name."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, Callable

from stylebind.builder import KeyframesBody, StyleBody, build_keyframes, build_style
from stylebind.errors import CircularDeclaration, StyleError
from stylebind.events.types import KeyframesDeclared, StyleDeclared
from stylebind.rules import NamedKeyframes, RuleDeclaration, StyleRule
from stylebind.selectors import ClassSelector
from stylebind.store import RuleStore

if TYPE_CHECKING:
    from stylebind.sheet import StyleSheet

logger = logging.getLogger(__name__)

__all__ = ["qualified_name", "NameBinder", "style", "keyframes"]


def qualified_name(sheet_identity: str, use_prefix: bool, member_name: str, separator: str = "-") -> str:
    """Return ``<sheet><separator><member>`` when prefixing, else the member name."""
    if use_prefix:
        return f"{sheet_identity}{separator}{member_name}"
    return member_name


class NameBinder:
    """Binds member names of one sheet to built rules, exactly once each.

    The first ``declare`` for a member runs its body, appends the primary
    rule and then every nested rule to the store, and caches the result.
    Later calls for the same member return the cached value without
    running the body again.
    """

    def __init__(
        self,
        store: RuleStore,
        sheet_identity: str,
        use_prefix: bool = True,
        separator: str = "-",
    ) -> None:
        self._store = store
        self.sheet_identity = sheet_identity
        self.use_prefix = use_prefix
        self.separator = separator
        self._cache: dict[tuple[str, str], Any] = {}
        self._pending: set[tuple[str, str]] = set()

    def qualify(self, member_name: str) -> str:
        return qualified_name(self.sheet_identity, self.use_prefix, member_name, self.separator)

    def is_declared(self, member_name: str) -> bool:
        with self._store.lock:
            return any(member == member_name for _, member in self._cache)

    def declare(self, member_name: str, body: StyleBody) -> str:
        """Bind *member_name* to the style built by *body*; return the class name."""
        return self._once("style", member_name, lambda: self._build_style(member_name, body))

    def declare_keyframes(self, member_name: str, body: KeyframesBody) -> NamedKeyframes:
        """Bind *member_name* to the keyframes built by *body*."""
        return self._once("keyframes", member_name, lambda: self._build_keyframes(member_name, body))

    # --- internals ------------------------------------------------------------

    def _once(
        self,
        kind: str,
        member_name: str,
        build: Callable[[], tuple[Any, tuple[RuleDeclaration, ...], object]],
    ) -> Any:
        """Build *member_name* once, cache it, then store and announce its rules.

        The result is cached before the store notifies anyone, so a failing
        listener cannot cause the body to run (and its rules to be stored)
        a second time.
        """
        key = (kind, member_name)
        with self._store.lock:
            if key in self._cache:
                return self._cache[key]
            if key in self._pending:
                raise CircularDeclaration(member_name)
            self._pending.add(key)
            try:
                result, rules, event = build()
            finally:
                self._pending.discard(key)
            self._cache[key] = result
            self._store.extend(rules)
            self._store.events.emit(event)
            return result

    def _build_style(self, member_name: str, body: StyleBody):
        class_selector = ClassSelector(self.qualify(member_name))
        properties, nested = build_style(class_selector, class_selector, body)
        logger.debug(
            "Declared %s as %s (%d nested rules)", member_name, class_selector.name, len(nested)
        )
        primary = StyleRule(selector=class_selector, properties=properties)
        event = StyleDeclared(sheet=self.sheet_identity, member=member_name, class_name=class_selector.name)
        return class_selector.name, (primary, *nested), event

    def _build_keyframes(self, member_name: str, body: KeyframesBody):
        rule = build_keyframes(self.qualify(member_name), body)
        logger.debug("Declared keyframes %s as %s", member_name, rule.name)
        event = KeyframesDeclared(sheet=self.sheet_identity, member=member_name, name=rule.name)
        return NamedKeyframes(name=rule.name, rule=rule), (rule,), event


# ---------------------------------------------------------------------------
# Class-attribute descriptors
# ---------------------------------------------------------------------------


class _Declaration:
    """Descriptor base: records its attribute name, declares on first access.

    The body is called with the sheet instance and the builder, so it can
    reference other members of the same sheet.
    """

    def __init__(self, body: Callable[..., None]) -> None:
        self.body = body
        self.name: str | None = None
        functools.update_wrapper(self, body)

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: StyleSheet | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        if self.name is None:
            raise StyleError(f"{type(self).__name__} used outside of a class body")
        return self._declare(instance, self.name, functools.partial(self.body, instance))

    def _declare(self, sheet: StyleSheet, name: str, body: Callable[..., None]) -> Any:
        raise NotImplementedError


class style(_Declaration):
    """Declare a style rule as a sheet attribute; access yields the class name.

    ::

        class AppSheet(StyleSheet):
            sheet_name = "AppSheet"

            @style
            def container(self, css):
                css["padding"] = "24px"
    """

    def _declare(self, sheet: StyleSheet, name: str, body: StyleBody) -> str:
        return sheet.declare(name, body)


class keyframes(_Declaration):
    """Declare a keyframes block as a sheet attribute; access yields its handle."""

    def _declare(self, sheet: StyleSheet, name: str, body: KeyframesBody) -> NamedKeyframes:
        return sheet.declare_keyframes(name, body)
