"""Rule builders: run a style body once and collect what it declares.

A *body* is a plain callable receiving a builder::

    def card(css):
        css["padding"] = "24px"
        css.hover(lambda h: h.property("color", "red"))

Properties land in an ordered mapping; nested constructs (pseudo-classes,
nested selectors, ``@media`` blocks) are collected in call order.
"""

from __future__ import annotations

from typing import Callable

from stylebind.rules import Keyframe, KeyframesRule, MediaRule, NamedKeyframes, RuleDeclaration, StyleRule
from stylebind.selectors import PseudoClassSelector, Selector, SelfSelector, combine

__all__ = [
    "PropertyBuilder",
    "StyleBuilder",
    "KeyframesBuilder",
    "StyleBody",
    "KeyframesBody",
    "build_style",
    "build_keyframes",
]


class PropertyBuilder:
    """Collects property declarations; the last write for a name wins."""

    def __init__(self) -> None:
        self._properties: dict[str, object] = {}

    @property
    def properties(self) -> dict[str, object]:
        """A copy of the declarations made so far, in order."""
        return dict(self._properties)

    def property(self, name: str, value: object) -> None:
        # Re-inserting moves an overridden property to its latest position.
        self._properties.pop(name, None)
        self._properties[name] = value

    def variable(self, name: str, value: object) -> None:
        """Declare the custom property ``--name``."""
        self.property(name if name.startswith("--") else f"--{name}", value)

    def __setitem__(self, name: str, value: object) -> None:
        self.property(name, value)

    def __getitem__(self, name: str) -> object:
        return self._properties[name]

    def __contains__(self, name: str) -> bool:
        return name in self._properties


class StyleBuilder(PropertyBuilder):
    """Builder handed to a style body.

    ``root`` is the selector of the top-level rule, ``self_`` the selector
    of the rule this body describes.  Both are :class:`SelfSelector`
    instances so bodies can reference them before a class name exists.
    """

    def __init__(self, root: SelfSelector, context: SelfSelector) -> None:
        super().__init__()
        self.root = root
        self.self_ = context
        self._rules: list[RuleDeclaration] = []

    @property
    def rules(self) -> tuple[RuleDeclaration, ...]:
        return tuple(self._rules)

    def add(self, rule: RuleDeclaration) -> None:
        """Append an already built nested declaration."""
        self._rules.append(rule)

    def style(self, selector: Selector, body: StyleBody) -> None:
        """Declare a nested rule for *selector*; its own nested rules follow it."""
        properties, nested = build_style(self.root, selector, body)
        self._rules.append(StyleRule(selector=selector, properties=properties))
        self._rules.extend(nested)

    def pseudo(self, name: str, body: StyleBody, argument: str | None = None) -> None:
        self.style(combine(self.self_, PseudoClassSelector(name, argument)), body)

    def hover(self, body: StyleBody) -> None:
        self.pseudo("hover", body)

    def focus(self, body: StyleBody) -> None:
        self.pseudo("focus", body)

    def active(self, body: StyleBody) -> None:
        self.pseudo("active", body)

    def media(self, query: str, body: StyleBody) -> None:
        """Declare an ``@media`` block.

        Properties set by *body* apply to the current selector inside the
        block; nested rules declared by *body* are grouped into it too.
        """
        inner = StyleBuilder(self.root, self.self_)
        body(inner)
        rules: list[RuleDeclaration] = []
        if inner._properties:
            rules.append(StyleRule(selector=self.self_, properties=inner.properties))
        rules.extend(inner._rules)
        self._rules.append(MediaRule(query=query, rules=tuple(rules)))

    def animation(
        self,
        keyframes: NamedKeyframes | str,
        *,
        duration: object | None = None,
        timing_function: object | None = None,
        delay: object | None = None,
        iteration_count: object | None = None,
        direction: object | None = None,
        fill_mode: object | None = None,
        play_state: object | None = None,
    ) -> None:
        """Set the ``animation`` shorthand referencing a keyframes block."""
        name = keyframes.name if isinstance(keyframes, NamedKeyframes) else keyframes
        parts = [
            duration,
            timing_function,
            delay,
            iteration_count,
            direction,
            fill_mode,
            play_state,
        ]
        values = [str(part) for part in parts if part is not None]
        values.append(name)
        self.property("animation", " ".join(values))


class KeyframesBuilder:
    """Builder handed to a keyframes body."""

    def __init__(self) -> None:
        self._frames: list[Keyframe] = []

    @property
    def frames(self) -> tuple[Keyframe, ...]:
        return tuple(self._frames)

    def frame(self, offset: str, body: Callable[[PropertyBuilder], None]) -> None:
        builder = PropertyBuilder()
        body(builder)
        self._frames.append(Keyframe(offset=offset, properties=builder.properties))

    def from_(self, body: Callable[[PropertyBuilder], None]) -> None:
        self.frame("from", body)

    def to(self, body: Callable[[PropertyBuilder], None]) -> None:
        self.frame("to", body)

    def at(self, percent: int | float, body: Callable[[PropertyBuilder], None]) -> None:
        self.frame(f"{percent}%", body)


StyleBody = Callable[[StyleBuilder], None]
KeyframesBody = Callable[[KeyframesBuilder], None]


def _as_self(selector: Selector) -> SelfSelector:
    if isinstance(selector, SelfSelector):
        return selector
    return SelfSelector(selector)


def build_style(
    root: Selector, context: Selector, body: StyleBody
) -> tuple[dict[str, object], tuple[RuleDeclaration, ...]]:
    """Run *body* once and return its properties and nested rules.

    Concrete *root* and *context* selectors are wrapped in bound
    :class:`SelfSelector` instances; self selectors are used as given.
    """
    builder = StyleBuilder(_as_self(root), _as_self(context))
    body(builder)
    return builder.properties, builder.rules


def build_keyframes(name: str, body: KeyframesBody) -> KeyframesRule:
    builder = KeyframesBuilder()
    body(builder)
    return KeyframesRule(name=name, frames=builder.frames)
