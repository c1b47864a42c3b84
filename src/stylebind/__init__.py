"""stylebind - declarative stylesheets with generated class names."""

from stylebind.binding import keyframes, qualified_name, style
from stylebind.builder import KeyframesBuilder, PropertyBuilder, StyleBuilder, build_keyframes, build_style
from stylebind.config import DEFAULT_CONFIG, StyleConfig
from stylebind.dynamic import BoundClassRegistry, DynamicRuleCache, next_auto_index
from stylebind.errors import CircularDeclaration, InvalidSelfInstantiation, StyleError, UnresolvedSelfSelector
from stylebind.render import render_css
from stylebind.rules import Keyframe, KeyframesRule, MediaRule, NamedKeyframes, RuleDeclaration, StyleRule
from stylebind.sheet import StyleSheet
from stylebind.store import RuleStore

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Sheets
    "StyleSheet",
    "style",
    "keyframes",
    "qualified_name",
    "StyleConfig",
    "DEFAULT_CONFIG",
    # Builders
    "PropertyBuilder",
    "StyleBuilder",
    "KeyframesBuilder",
    "build_style",
    "build_keyframes",
    # Rules and storage
    "StyleRule",
    "Keyframe",
    "KeyframesRule",
    "MediaRule",
    "NamedKeyframes",
    "RuleDeclaration",
    "RuleStore",
    "BoundClassRegistry",
    "DynamicRuleCache",
    "next_auto_index",
    "render_css",
    # Errors
    "StyleError",
    "UnresolvedSelfSelector",
    "InvalidSelfInstantiation",
    "CircularDeclaration",
]
