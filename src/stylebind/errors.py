"""Error hierarchy for stylesheet authoring."""
from __future__ import annotations


class StyleError(Exception):
    """Base error for all stylebind errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnresolvedSelfSelector(StyleError):
    """A self-selector was turned into text before it was bound."""

    def __init__(self, message: str | None = None, **kwargs) -> None:
        super().__init__(
            message
            or "self selector is not bound yet; use selector(<text>) to turn a "
            "string into a selector instead of concatenating",
            **kwargs,
        )


class InvalidSelfInstantiation(StyleError):
    """A self-selector was bound more than once or to another self-selector."""


class CircularDeclaration(StyleError):
    """A declared member was accessed while its own body was still running."""

    def __init__(self, member: str, **kwargs) -> None:
        super().__init__(f"circular declaration of {member!r}", **kwargs)
        self.member = member
