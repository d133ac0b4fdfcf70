"""Tests for declaration candidates and diagnostics."""

import pytest

from specificity.model import (
    ZERO,
    DeclarationCandidate,
    Diagnostic,
    Severity,
    SpecificityVector,
    Winner,
)


class TestDeclarationCandidate:
    def test_defaults(self) -> None:
        candidate = DeclarationCandidate(specificity=ZERO)
        assert candidate.important is False
        assert candidate.is_inline is False
        assert candidate.source_order == 0

    def test_frozen(self) -> None:
        candidate = DeclarationCandidate(specificity=SpecificityVector(0, 1, 0))
        with pytest.raises(AttributeError):
            candidate.important = True  # type: ignore[misc]

    def test_winner_values(self) -> None:
        assert Winner("first") is Winner.FIRST
        assert Winner("second") is Winner.SECOND


class TestDiagnostic:
    def test_is_error(self) -> None:
        assert Diagnostic("parse_error", Severity.ERROR, "bad").is_error
        assert not Diagnostic("style", Severity.WARNING, "meh").is_error

    def test_str_without_location(self) -> None:
        assert str(Diagnostic("r", Severity.INFO, "note")) == "INFO: note"

    def test_str_with_index(self) -> None:
        diag = Diagnostic("r", Severity.WARNING, "careful", index=4)
        assert str(diag) == "WARNING [selector=4]: careful"

    def test_str_with_offset(self) -> None:
        diag = Diagnostic("r", Severity.ERROR, "broken", index=0, offset=7)
        assert str(diag) == "ERROR [selector=0 offset=7]: broken"
