"""Serialize rule declarations to CSS text, preserving their order."""

from __future__ import annotations

from typing import Iterable

from stylebind.rules import DEFAULT_INDENT, RuleDeclaration

__all__ = ["render_css"]


def render_css(rules: Iterable[RuleDeclaration], indent: str = DEFAULT_INDENT) -> str:
    """Return the CSS text of *rules*, one block per declaration."""
    blocks = [rule.as_text(indent) for rule in rules]
    if not blocks:
        return ""
    return "\n".join(blocks) + "\n"
