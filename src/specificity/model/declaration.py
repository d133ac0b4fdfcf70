"""Declaration candidates fed to the cascade comparator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from specificity.model.vector import SpecificityVector


class Winner(Enum):
    """Which of two compared candidates wins the cascade."""

    FIRST = "first"
    SECOND = "second"


@dataclass(frozen=True)
class DeclarationCandidate:
    """A declaration already known to match the element and property.

    Attributes:
        specificity: Weight of the selector the declaration came from.
        important: True for ``!important`` declarations.
        is_inline: True for declarations from an inline ``style`` attribute.
        source_order: Position in the cascade; later declarations are larger.
    """

    specificity: SpecificityVector
    important: bool = False
    is_inline: bool = False
    source_order: int = 0
