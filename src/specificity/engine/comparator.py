"""Cascade comparator: 4-step priority for choosing the winning declaration."""

from __future__ import annotations

from collections.abc import Iterable

from specificity.model.declaration import DeclarationCandidate, Winner


def compare_declarations(x: DeclarationCandidate, y: DeclarationCandidate) -> Winner:
    """Decide which of two matching declarations the cascade applies.

    1. Importance - ``!important`` beats normal
    2. Inline - inline style outranks any selector specificity
    3. Specificity - lexicographic (a, b, c)
    4. Source order - the later declaration wins

    Candidates equal on all four steps are indistinguishable; the first
    one is reported as the winner.
    """
    # Step 1: Importance
    if x.important != y.important:
        return Winner.FIRST if x.important else Winner.SECOND

    # Step 2: Inline style
    if x.is_inline != y.is_inline:
        return Winner.FIRST if x.is_inline else Winner.SECOND

    # Step 3: Specificity
    if x.specificity != y.specificity:
        return Winner.FIRST if x.specificity > y.specificity else Winner.SECOND

    # Step 4: Source order
    if x.source_order != y.source_order:
        return Winner.FIRST if x.source_order > y.source_order else Winner.SECOND

    return Winner.FIRST


def cascade_key(candidate: DeclarationCandidate) -> tuple[bool, bool, tuple[int, int, int], int]:
    """Sort key agreeing with :func:`compare_declarations` (larger wins)."""
    return (
        candidate.important,
        candidate.is_inline,
        candidate.specificity.as_tuple(),
        candidate.source_order,
    )


def select_winner(candidates: Iterable[DeclarationCandidate]) -> DeclarationCandidate:
    """Return the candidate the cascade applies; full ties keep the earliest."""
    best: DeclarationCandidate | None = None
    for candidate in candidates:
        if best is None or compare_declarations(best, candidate) is Winner.SECOND:
            best = candidate
    if best is None:
        raise ValueError("select_winner() requires at least one candidate")
    return best


def rank_declarations(candidates: Iterable[DeclarationCandidate]) -> list[DeclarationCandidate]:
    """Return *candidates* ordered from winner to loser (stable on ties)."""
    return sorted(candidates, key=cascade_key, reverse=True)
