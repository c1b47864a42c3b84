"""Selector model: CSS selectors as a tagged variant of small value types.

Every selector renders through ``as_text()``.  ``SelfSelector`` is the
placeholder for "the rule being built": nested rule bodies refer to it
before the owning rule has a name, and it is bound to a concrete selector
once the name is known.
"""

from __future__ import annotations

from dataclasses import dataclass

from stylebind.errors import InvalidSelfInstantiation, UnresolvedSelfSelector

__all__ = [
    "Selector",
    "RawSelector",
    "UniversalSelector",
    "TypeSelector",
    "ClassSelector",
    "IdSelector",
    "AttributeSelector",
    "PseudoClassSelector",
    "PseudoElementSelector",
    "CombinedSelector",
    "GroupSelector",
    "DescendantSelector",
    "ChildSelector",
    "SiblingSelector",
    "AdjacentSelector",
    "SelfSelector",
    "create_self",
    "selector",
    "cls",
    "id_",
    "tag",
    "universal",
    "attr",
    "pseudo",
    "pseudo_element",
    "combine",
    "group",
    "desc",
    "child",
    "sibling",
    "adjacent",
    "hover",
    "focus",
    "active",
    "visited",
    "first_child",
    "last_child",
    "disabled",
]


class Selector:
    """Base class for all selector variants."""

    def as_text(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.as_text()


@dataclass(frozen=True, eq=True)
class RawSelector(Selector):
    text: str

    def as_text(self) -> str:
        return self.text


@dataclass(frozen=True, eq=True)
class UniversalSelector(Selector):
    def as_text(self) -> str:
        return "*"


@dataclass(frozen=True, eq=True)
class TypeSelector(Selector):
    tag: str

    def as_text(self) -> str:
        return self.tag


@dataclass(frozen=True, eq=True)
class ClassSelector(Selector):
    name: str

    def as_text(self) -> str:
        return f".{self.name}"

    @property
    def class_name(self) -> str:
        return self.name


@dataclass(frozen=True, eq=True)
class IdSelector(Selector):
    name: str

    def as_text(self) -> str:
        return f"#{self.name}"


@dataclass(frozen=True, eq=True)
class AttributeSelector(Selector):
    """``[name]`` or ``[name<operator>"value"]``."""

    name: str
    value: str | None = None
    operator: str = "="

    def as_text(self) -> str:
        if self.value is None:
            return f"[{self.name}]"
        return f'[{self.name}{self.operator}"{self.value}"]'


@dataclass(frozen=True, eq=True)
class PseudoClassSelector(Selector):
    name: str
    argument: str | None = None

    def as_text(self) -> str:
        if self.argument is None:
            return f":{self.name}"
        return f":{self.name}({self.argument})"


@dataclass(frozen=True, eq=True)
class PseudoElementSelector(Selector):
    name: str

    def as_text(self) -> str:
        return f"::{self.name}"


@dataclass(frozen=True, eq=True)
class CombinedSelector(Selector):
    """Compound selector, e.g. ``.card:hover``."""

    parts: tuple[Selector, ...]

    def as_text(self) -> str:
        return "".join(part.as_text() for part in self.parts)


@dataclass(frozen=True, eq=True)
class GroupSelector(Selector):
    """Selector list, e.g. ``h1, h2``."""

    parts: tuple[Selector, ...]

    def as_text(self) -> str:
        return ", ".join(part.as_text() for part in self.parts)


@dataclass(frozen=True, eq=True)
class DescendantSelector(Selector):
    parent: Selector
    child: Selector

    def as_text(self) -> str:
        return f"{self.parent.as_text()} {self.child.as_text()}"


@dataclass(frozen=True, eq=True)
class ChildSelector(Selector):
    parent: Selector
    child: Selector

    def as_text(self) -> str:
        return f"{self.parent.as_text()} > {self.child.as_text()}"


@dataclass(frozen=True, eq=True)
class SiblingSelector(Selector):
    previous: Selector
    following: Selector

    def as_text(self) -> str:
        return f"{self.previous.as_text()} ~ {self.following.as_text()}"


@dataclass(frozen=True, eq=True)
class AdjacentSelector(Selector):
    previous: Selector
    following: Selector

    def as_text(self) -> str:
        return f"{self.previous.as_text()} + {self.following.as_text()}"


class SelfSelector(Selector):
    """Forward reference to the selector of the rule currently being built.

    Equality rule: any two ``SelfSelector`` instances are equal, whether
    bound or not and whatever they are bound to.  Structural comparison of
    a freshly built candidate rule (unbound) against stored rules (bound to
    their class) therefore succeeds without knowing the candidate's name,
    and never recurses into the bound target.
    """

    def __init__(self, target: Selector | None = None) -> None:
        if isinstance(target, SelfSelector):
            raise InvalidSelfInstantiation("a self selector cannot wrap another self selector")
        self._target = target

    @property
    def target(self) -> Selector | None:
        return self._target

    @property
    def is_bound(self) -> bool:
        return self._target is not None

    def bind(self, target: Selector) -> None:
        """Resolve this placeholder to *target*; allowed exactly once."""
        if self._target is not None:
            raise InvalidSelfInstantiation(
                f"self selector is already bound to {self._target.as_text()!r}"
            )
        if isinstance(target, SelfSelector):
            raise InvalidSelfInstantiation("a self selector cannot be bound to another self selector")
        self._target = target

    def as_text(self) -> str:
        if self._target is None:
            raise UnresolvedSelfSelector()
        return self._target.as_text()

    def __str__(self) -> str:
        # Bound or not, a self selector never turns into a plain string.
        raise InvalidSelfInstantiation(
            "a self selector cannot be concatenated with strings; "
            "use selector(<your string>) to turn a string into a selector"
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SelfSelector)

    def __hash__(self) -> int:
        return hash(SelfSelector)

    def __repr__(self) -> str:
        return f"SelfSelector({self._target!r})"


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def create_self() -> SelfSelector:
    """Return a new, unbound self selector."""
    return SelfSelector()


def selector(text: str) -> Selector:
    return RawSelector(text)


def cls(name: str) -> ClassSelector:
    return ClassSelector(name)


def id_(name: str) -> IdSelector:
    return IdSelector(name)


def tag(name: str) -> TypeSelector:
    return TypeSelector(name)


def universal() -> UniversalSelector:
    return UniversalSelector()


def attr(name: str, value: str | None = None, operator: str = "=") -> AttributeSelector:
    return AttributeSelector(name, value, operator)


def pseudo(name: str, argument: str | None = None) -> PseudoClassSelector:
    return PseudoClassSelector(name, argument)


def pseudo_element(name: str) -> PseudoElementSelector:
    return PseudoElementSelector(name)


def combine(*parts: Selector) -> CombinedSelector:
    return CombinedSelector(tuple(parts))


def group(*parts: Selector) -> GroupSelector:
    return GroupSelector(tuple(parts))


def desc(parent: Selector, descendant: Selector) -> DescendantSelector:
    return DescendantSelector(parent, descendant)


def child(parent: Selector, direct_child: Selector) -> ChildSelector:
    return ChildSelector(parent, direct_child)


def sibling(previous: Selector, following: Selector) -> SiblingSelector:
    return SiblingSelector(previous, following)


def adjacent(previous: Selector, following: Selector) -> AdjacentSelector:
    return AdjacentSelector(previous, following)


hover = PseudoClassSelector("hover")
focus = PseudoClassSelector("focus")
active = PseudoClassSelector("active")
visited = PseudoClassSelector("visited")
first_child = PseudoClassSelector("first-child")
last_child = PseudoClassSelector("last-child")
disabled = PseudoClassSelector("disabled")
