"""Diagnostic model: structured messages for selectors skipped during scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about one selector in a batch.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        index: Position of the selector in the input batch, if applicable.
        offset: Character offset inside that selector, if known.
    """

    rule: str
    severity: Severity
    message: str
    index: int | None = None
    offset: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        location = ""
        if self.index is not None:
            location = f" [selector={self.index}"
            if self.offset is not None:
                location += f" offset={self.offset}"
            location += "]"
        return f"{self.severity.value}{location}: {self.message}"
