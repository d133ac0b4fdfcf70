"""Batch scoring: weigh many selectors, skipping and logging the bad ones."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from specificity.config import EngineConfig
from specificity.engine.calculator import max_specificity
from specificity.model.diagnostic import Diagnostic, Severity
from specificity.model.selector import ComplexSelector, SelectorList
from specificity.model.vector import SpecificityVector
from specificity.parser import ParseError, parse_selector_list


@dataclass(frozen=True)
class ScoredSelector:
    """One successfully parsed input with its weight."""

    index: int
    text: str
    selectors: SelectorList
    specificity: SpecificityVector


@dataclass(frozen=True)
class ScoreReport:
    """Result of :func:`score_selectors`."""

    scores: tuple[ScoredSelector, ...]
    diagnostics: tuple[Diagnostic, ...]

    @property
    def ok(self) -> bool:
        return not any(d.is_error for d in self.diagnostics)

    def ranked(self) -> list[ScoredSelector]:
        """Scores from most to least specific; equal weights keep input order."""
        return sorted(self.scores, key=lambda s: s.specificity, reverse=True)


def score_selectors(
    texts: Iterable[str],
    context: ComplexSelector | None = None,
    *,
    config: EngineConfig | None = None,
    logger: logging.Logger | None = None,
) -> ScoreReport:
    """Parse and weigh each selector text independently.

    A selector that fails to parse is skipped: it yields an ERROR
    diagnostic and a warning log record, and the rest of the batch is
    still scored.
    """
    log = logger or logging.getLogger(__name__)
    scores: list[ScoredSelector] = []
    diagnostics: list[Diagnostic] = []
    for index, text in enumerate(texts):
        try:
            selectors = parse_selector_list(text, context, config=config)
        except ParseError as exc:
            log.warning("Skipping selector %d %r: %s", index, text, exc)
            diagnostics.append(
                Diagnostic(
                    rule="parse_error",
                    severity=Severity.ERROR,
                    message=f"{type(exc).__name__}: {exc}",
                    index=index,
                    offset=exc.offset,
                )
            )
            continue
        scores.append(ScoredSelector(index, text, selectors, max_specificity(selectors)))
    return ScoreReport(scores=tuple(scores), diagnostics=tuple(diagnostics))
