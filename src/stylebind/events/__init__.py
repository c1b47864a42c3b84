"""Event system: bus and event types for rule store notifications."""

from stylebind.events.bus import EventBus
from stylebind.events.types import (
    DynamicRuleRegistered,
    DynamicRuleReused,
    KeyframesDeclared,
    RuleAdded,
    StyleDeclared,
)

__all__ = [
    "EventBus",
    "DynamicRuleRegistered",
    "DynamicRuleReused",
    "KeyframesDeclared",
    "RuleAdded",
    "StyleDeclared",
]
