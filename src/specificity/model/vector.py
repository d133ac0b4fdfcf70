"""Specificity vector: the three-tier (a, b, c) cascade weight."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SpecificityVector:
    """Ordered weight triple compared lexicographically.

    Attributes:
        a: Number of ID selectors.
        b: Number of class, attribute and pseudo-class selectors.
        c: Number of type and pseudo-element selectors.
    """

    a: int = 0
    b: int = 0
    c: int = 0

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Specificity component {name!r} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"Specificity component {name!r} must be non-negative, got {value}")

    def __add__(self, other: SpecificityVector) -> SpecificityVector:
        if not isinstance(other, SpecificityVector):
            return NotImplemented
        return SpecificityVector(self.a + other.a, self.b + other.b, self.c + other.c)

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.b, self.c))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)

    def __str__(self) -> str:
        return f"({self.a}, {self.b}, {self.c})"


ZERO = SpecificityVector()
