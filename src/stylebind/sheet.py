"""StyleSheet: declared members, dynamic rules and the rule store behind them."""

from __future__ import annotations

from typing import Callable

from stylebind.binding import NameBinder, _Declaration
from stylebind.builder import KeyframesBody, StyleBody, build_style
from stylebind.config import DEFAULT_CONFIG, StyleConfig
from stylebind.dynamic import DynamicRuleCache
from stylebind.errors import StyleError
from stylebind.events.types import RuleAdded
from stylebind.render import render_css
from stylebind.rules import NamedKeyframes, RuleDeclaration, StyleRule
from stylebind.selectors import Selector
from stylebind.store import RuleStore

__all__ = ["StyleSheet"]


class StyleSheet:
    """A collection of CSS rules bound to generated class names.

    Members are declared either as class attributes (see
    :class:`stylebind.style` and :class:`stylebind.keyframes`) or through
    :meth:`declare`.  The sheet identity used as class-name prefix is the
    *name* argument or the ``sheet_name`` class attribute.

    Example::

        class AppSheet(StyleSheet):
            sheet_name = "AppSheet"

            @style
            def container(self, css):
                css["padding"] = "24px"

        sheet = AppSheet()
        sheet.container            # "AppSheet-container"
        sheet.css(lambda css: css.property("color", "red"))   # "auto-0"
    """

    sheet_name: str | None = None

    def __init__(
        self,
        name: str | None = None,
        *,
        use_prefix: bool | None = None,
        store: RuleStore | None = None,
        config: StyleConfig | None = None,
    ) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        identity = name or self.sheet_name
        if not identity:
            raise StyleError(
                f"{type(self).__name__} needs a name: pass name=... or set sheet_name"
            )
        self.name = identity
        self.use_prefix = self.config.use_prefix if use_prefix is None else use_prefix
        self.store = store if store is not None else RuleStore()
        self._binder = NameBinder(
            self.store, identity, use_prefix=self.use_prefix, separator=self.config.separator
        )
        self._dynamic = DynamicRuleCache(
            self.store, prefix=self.config.dynamic_prefix, separator=self.config.separator
        )

    # --- declared members -----------------------------------------------------

    def declare(self, member_name: str, body: StyleBody) -> str:
        """Declare a style member once and return its class name."""
        return self._binder.declare(member_name, body)

    def declare_keyframes(self, member_name: str, body: KeyframesBody) -> NamedKeyframes:
        """Declare a keyframes member once and return its handle."""
        return self._binder.declare_keyframes(member_name, body)

    def declare_all(self) -> None:
        """Touch every declared class attribute so all members are registered."""
        seen: set[str] = set()
        for klass in type(self).__mro__:
            for attr_name, value in vars(klass).items():
                if isinstance(value, _Declaration) and attr_name not in seen:
                    seen.add(attr_name)
                    getattr(self, attr_name)

    # --- dynamic rules --------------------------------------------------------

    def css(self, body: StyleBody) -> str:
        """Return a class name for *body*, reusing an identical existing rule."""
        return self._dynamic.register(body)

    # --- generic rules --------------------------------------------------------

    def rule(self, selector: Selector, body: StyleBody) -> StyleRule:
        """Append a rule for an arbitrary selector, followed by its nested rules."""
        with self.store.lock:
            properties, nested = build_style(selector, selector, body)
            rule = StyleRule(selector=selector, properties=properties)
            self.store.extend((rule, *nested))
            return rule

    @staticmethod
    def build_rules(body: Callable[["StyleSheet"], None]) -> tuple[RuleDeclaration, ...]:
        """Run *body* against a scratch, unprefixed sheet and return its rules."""
        scratch = StyleSheet("scratch", use_prefix=False)
        body(scratch)
        return scratch.snapshot()

    # --- store ----------------------------------------------------------------

    def add(self, rule: RuleDeclaration) -> None:
        self.store.add(rule)

    def add_style(self, selector: Selector, properties: dict[str, object]) -> StyleRule:
        return self.store.add_style(selector, properties)

    def snapshot(self) -> tuple[RuleDeclaration, ...]:
        return self.store.snapshot()

    @property
    def rules(self) -> tuple[RuleDeclaration, ...]:
        return self.store.snapshot()

    def subscribe(self, callback: Callable[[RuleAdded], None]) -> Callable[[], None]:
        return self.store.subscribe(callback)

    def render(self) -> str:
        """Serialize the current rules to CSS text."""
        return render_css(self.store.snapshot(), indent=self.config.indent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, rules={len(self.store)})"
