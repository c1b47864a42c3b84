"""Event types emitted while rules are declared and stored."""

from dataclasses import dataclass

from stylebind.rules import RuleDeclaration


@dataclass(frozen=True)
class RuleAdded:
    rule: RuleDeclaration
    index: int


@dataclass(frozen=True)
class StyleDeclared:
    sheet: str
    member: str
    class_name: str


@dataclass(frozen=True)
class KeyframesDeclared:
    sheet: str
    member: str
    name: str


@dataclass(frozen=True)
class DynamicRuleRegistered:
    class_name: str
    nested_count: int


@dataclass(frozen=True)
class DynamicRuleReused:
    class_name: str
