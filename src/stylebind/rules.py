"""Rule declarations: StyleRule, KeyframesRule, MediaRule and NamedKeyframes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from stylebind.selectors import Selector

__all__ = [
    "StyleRule",
    "Keyframe",
    "KeyframesRule",
    "MediaRule",
    "NamedKeyframes",
    "RuleDeclaration",
]

DEFAULT_INDENT = "    "


def _indent_lines(text: str, indent: str) -> str:
    return "\n".join(f"{indent}{line}" if line else line for line in text.splitlines())


def _declarations(properties: dict[str, object], indent: str) -> list[str]:
    return [f"{indent}{name}: {value};" for name, value in properties.items()]


def _block(header: str, lines: list[str]) -> str:
    if not lines:
        return f"{header} {{}}"
    body = "\n".join(lines)
    return f"{header} {{\n{body}\n}}"


@dataclass(frozen=True)
class StyleRule:
    """A selector paired with its property declarations.

    ``properties`` keeps declaration order for output; equality on it is
    order-insensitive, as for any ``dict``.
    """

    selector: Selector
    properties: dict[str, object] = field(default_factory=dict)

    # Unhashable: properties is a dict.
    __hash__ = None

    def as_text(self, indent: str = DEFAULT_INDENT) -> str:
        return _block(self.selector.as_text(), _declarations(self.properties, indent))


@dataclass(frozen=True)
class Keyframe:
    """One step of a keyframes block: ``from``, ``to`` or a percentage."""

    offset: str
    properties: dict[str, object] = field(default_factory=dict)

    __hash__ = None

    def as_text(self, indent: str = DEFAULT_INDENT) -> str:
        return _block(self.offset, _declarations(self.properties, indent))


@dataclass(frozen=True)
class KeyframesRule:
    name: str
    frames: tuple[Keyframe, ...] = ()

    def as_text(self, indent: str = DEFAULT_INDENT) -> str:
        lines = [_indent_lines(frame.as_text(indent), indent) for frame in self.frames]
        return _block(f"@keyframes {self.name}", lines)


@dataclass(frozen=True)
class MediaRule:
    """An ``@media`` block grouping nested declarations."""

    query: str
    rules: tuple["RuleDeclaration", ...] = ()

    def as_text(self, indent: str = DEFAULT_INDENT) -> str:
        lines = [_indent_lines(rule.as_text(indent), indent) for rule in self.rules]
        return _block(f"@media {self.query}", lines)


RuleDeclaration = Union[StyleRule, KeyframesRule, MediaRule]


@dataclass(frozen=True)
class NamedKeyframes:
    """Handle for a declared keyframes block, usable in ``animation(...)``."""

    name: str
    rule: KeyframesRule

    @property
    def frames(self) -> tuple[Keyframe, ...]:
        return self.rule.frames

    def __str__(self) -> str:
        return self.name
