"""Selector tree model: simple, compound and complex selectors and lists.

Every node is a frozen dataclass holding tuples, so a parsed tree is
immutable and hashable.  ``str()`` on any node yields canonical selector
text that parses back to an equivalent tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Combinator(Enum):
    """Structural relation between two compound selectors."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
    COLUMN = "||"

    def __str__(self) -> str:
        if self is Combinator.DESCENDANT:
            return " "
        return f" {self.value} "


# Pseudo-classes whose argument is itself a selector list.
SELECTOR_LIST_PSEUDO_CLASSES = frozenset({"is", "where", "not", "has"})


def _quote(value: str) -> str:
    """Render an attribute value as a double-quoted CSS string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\a ")
    return f'"{escaped}"'


# ---------------------------------------------------------------------------
# Simple selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TypeSelector:
    """Element name, e.g. ``div``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class UniversalSelector:
    """The ``*`` selector."""

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True)
class IdSelector:
    """``#name``."""

    name: str

    def __str__(self) -> str:
        return f"#{self.name}"


@dataclass(frozen=True)
class ClassSelector:
    """``.name``."""

    name: str

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True)
class AttributeSelector:
    """``[name]`` or ``[name op value modifier]``.

    Attributes:
        name: Attribute name as written.
        operator: One of ``=``, ``~=``, ``|=``, ``^=``, ``$=``, ``*=``, or None
            for a presence test.
        value: Unquoted, unescaped value; None when there is no operator.
        modifier: Case-sensitivity flag (``i`` or ``s``), if given.
    """

    name: str
    operator: str | None = None
    value: str | None = None
    modifier: str | None = None

    def __post_init__(self) -> None:
        if (self.operator is None) != (self.value is None):
            raise ValueError("Attribute selector operator and value must be given together")

    def __str__(self) -> str:
        if self.operator is None:
            return f"[{self.name}]"
        suffix = f" {self.modifier}" if self.modifier else ""
        return f"[{self.name}{self.operator}{_quote(self.value or '')}{suffix}]"


@dataclass(frozen=True)
class PseudoClassSelector:
    """``:name``, ``:name(argument)`` or ``:name(selector-list)``.

    ``selectors`` is set for :is, :where, :not and :has; ``argument`` keeps
    the raw text of any other functional pseudo-class such as ``:nth-child``.
    """

    name: str
    argument: str | None = None
    selectors: SelectorList | None = None

    @property
    def takes_selector_list(self) -> bool:
        return self.name in SELECTOR_LIST_PSEUDO_CLASSES

    def __str__(self) -> str:
        if self.selectors is not None:
            return f":{self.name}({self.selectors})"
        if self.argument is not None:
            return f":{self.name}({self.argument})"
        return f":{self.name}"


@dataclass(frozen=True)
class PseudoElementSelector:
    """``::name``."""

    name: str

    def __str__(self) -> str:
        return f"::{self.name}"


@dataclass(frozen=True)
class NestingSelector:
    """The ``&`` nesting selector.

    ``context`` is the enclosing rule's selector that ``&`` stands for,
    as supplied to the parse call; None when parsed without one.
    """

    context: ComplexSelector | None = None

    def __str__(self) -> str:
        return "&"


SimpleSelector = Union[
    TypeSelector,
    UniversalSelector,
    IdSelector,
    ClassSelector,
    AttributeSelector,
    PseudoClassSelector,
    PseudoElementSelector,
    NestingSelector,
]


# ---------------------------------------------------------------------------
# Compound, complex and list
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CompoundSelector:
    """Simple selectors written with no separator, e.g. ``div.foo#bar``."""

    selectors: tuple[SimpleSelector, ...]

    def __post_init__(self) -> None:
        if not self.selectors:
            raise ValueError("CompoundSelector must contain at least one simple selector")

    def __iter__(self):
        return iter(self.selectors)

    def __len__(self) -> int:
        return len(self.selectors)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.selectors)


@dataclass(frozen=True)
class ComplexSelector:
    """Compound selectors joined by combinators, e.g. ``div > .foo``.

    ``parts`` pairs each compound with the combinator that precedes it.
    The first pair's combinator is None, except in relative selectors such
    as the ``> img`` of ``:has(> img)``.
    """

    parts: tuple[tuple[Combinator | None, CompoundSelector], ...]

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValueError("ComplexSelector must contain at least one compound selector")
        for i, (combinator, _compound) in enumerate(self.parts):
            if i > 0 and combinator is None:
                raise ValueError(f"Compound {i} of a ComplexSelector is missing its combinator")

    @classmethod
    def of(cls, *compounds: CompoundSelector, combinator: Combinator = Combinator.DESCENDANT) -> ComplexSelector:
        """Join *compounds* with a single combinator kind."""
        parts = tuple(
            (None if i == 0 else combinator, compound) for i, compound in enumerate(compounds)
        )
        return cls(parts)

    @property
    def compounds(self) -> tuple[CompoundSelector, ...]:
        return tuple(compound for _, compound in self.parts)

    @property
    def combinators(self) -> tuple[Combinator, ...]:
        return tuple(c for c, _ in self.parts if c is not None)

    @property
    def is_relative(self) -> bool:
        return self.parts[0][0] is not None

    def __str__(self) -> str:
        out: list[str] = []
        for i, (combinator, compound) in enumerate(self.parts):
            if combinator is not None:
                out.append(f"{combinator.value} " if i == 0 else str(combinator))
            out.append(str(compound))
        return "".join(out)


@dataclass(frozen=True)
class SelectorList:
    """Comma-separated alternatives.  Empty only inside ``:is()`` and friends."""

    selectors: tuple[ComplexSelector, ...] = ()

    def __iter__(self):
        return iter(self.selectors)

    def __len__(self) -> int:
        return len(self.selectors)

    def __getitem__(self, index: int) -> ComplexSelector:
        return self.selectors[index]

    def __str__(self) -> str:
        return ", ".join(str(s) for s in self.selectors)


def serialize(node: object) -> str:
    """Return canonical selector text for any model node."""
    return str(node)
