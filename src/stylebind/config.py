from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StyleConfig:
    use_prefix: bool = True
    separator: str = "-"  # between sheet name and member name
    dynamic_prefix: str = "auto"  # dynamic rules are named "<prefix><separator><n>"
    indent: str = "    "


DEFAULT_CONFIG = StyleConfig()
