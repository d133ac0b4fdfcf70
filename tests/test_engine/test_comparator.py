"""Tests for the 4-step cascade comparator."""

import random

import pytest

from specificity.engine.comparator import (
    cascade_key,
    compare_declarations,
    rank_declarations,
    select_winner,
)
from specificity.model import DeclarationCandidate, SpecificityVector, Winner


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _decl(
    spec: tuple[int, int, int] = (0, 0, 0),
    important: bool = False,
    is_inline: bool = False,
    source_order: int = 0,
) -> DeclarationCandidate:
    return DeclarationCandidate(
        specificity=SpecificityVector(*spec),
        important=important,
        is_inline=is_inline,
        source_order=source_order,
    )


# ---------------------------------------------------------------------------
# Step 1: importance
# ---------------------------------------------------------------------------

class TestImportance:
    def test_important_beats_higher_specificity(self) -> None:
        x = _decl((0, 0, 1), important=True, source_order=1)
        y = _decl((1, 0, 0), source_order=2)
        assert compare_declarations(x, y) is Winner.FIRST
        assert compare_declarations(y, x) is Winner.SECOND

    def test_important_beats_inline(self) -> None:
        x = _decl(important=True)
        y = _decl(is_inline=True)
        assert compare_declarations(x, y) is Winner.FIRST

    def test_both_important_falls_through(self) -> None:
        x = _decl((0, 1, 0), important=True)
        y = _decl((0, 2, 0), important=True)
        assert compare_declarations(x, y) is Winner.SECOND


# ---------------------------------------------------------------------------
# Step 2: inline style
# ---------------------------------------------------------------------------

class TestInline:
    def test_inline_beats_any_specificity(self) -> None:
        x = _decl((9, 9, 9))
        y = _decl(is_inline=True)
        assert compare_declarations(x, y) is Winner.SECOND

    def test_inline_beats_later_source(self) -> None:
        x = _decl(is_inline=True, source_order=1)
        y = _decl(source_order=5)
        assert compare_declarations(x, y) is Winner.FIRST


# ---------------------------------------------------------------------------
# Step 3: specificity
# ---------------------------------------------------------------------------

class TestSpecificity:
    def test_lexicographic(self) -> None:
        x = _decl((1, 0, 0), source_order=1)
        y = _decl((0, 99, 99), source_order=2)
        assert compare_declarations(x, y) is Winner.FIRST

    def test_class_beats_types(self) -> None:
        x = _decl((0, 0, 50))
        y = _decl((0, 1, 0))
        assert compare_declarations(x, y) is Winner.SECOND


# ---------------------------------------------------------------------------
# Step 4: source order
# ---------------------------------------------------------------------------

class TestSourceOrder:
    def test_later_wins(self) -> None:
        x = _decl((0, 1, 0), source_order=3)
        y = _decl((0, 1, 0), source_order=7)
        assert compare_declarations(x, y) is Winner.SECOND
        assert compare_declarations(y, x) is Winner.FIRST

    def test_full_tie_reports_first(self) -> None:
        x = _decl((0, 1, 0), source_order=3)
        assert compare_declarations(x, _decl((0, 1, 0), source_order=3)) is Winner.FIRST


# ---------------------------------------------------------------------------
# Key and selection
# ---------------------------------------------------------------------------

def _random_candidates(rng: random.Random, count: int) -> list[DeclarationCandidate]:
    return [
        _decl(
            (rng.randint(0, 2), rng.randint(0, 2), rng.randint(0, 2)),
            important=rng.random() < 0.3,
            is_inline=rng.random() < 0.2,
            source_order=rng.randint(0, 5),
        )
        for _ in range(count)
    ]


class TestCascadeKey:
    def test_key_shape(self) -> None:
        key = cascade_key(_decl((1, 2, 3), important=True, source_order=4))
        assert key == (True, False, (1, 2, 3), 4)

    @pytest.mark.parametrize("seed", range(10))
    def test_agrees_with_compare(self, seed: int) -> None:
        rng = random.Random(seed)
        for x, y in zip(_random_candidates(rng, 50), _random_candidates(rng, 50)):
            winner = compare_declarations(x, y)
            if cascade_key(x) > cascade_key(y):
                assert winner is Winner.FIRST
            elif cascade_key(x) < cascade_key(y):
                assert winner is Winner.SECOND
            else:
                assert winner is Winner.FIRST

    @pytest.mark.parametrize("seed", range(10))
    def test_antisymmetric(self, seed: int) -> None:
        rng = random.Random(seed)
        for x, y in zip(_random_candidates(rng, 50), _random_candidates(rng, 50)):
            if cascade_key(x) != cascade_key(y):
                assert compare_declarations(x, y) is not compare_declarations(y, x)


class TestSelectWinner:
    def test_single(self) -> None:
        only = _decl()
        assert select_winner([only]) is only

    def test_picks_cascade_winner(self) -> None:
        normal = _decl((1, 0, 0), source_order=1)
        important = _decl((0, 0, 1), important=True, source_order=0)
        later = _decl((1, 0, 0), source_order=2)
        assert select_winner([normal, important, later]) is important
        assert select_winner([normal, later]) is later

    def test_full_tie_keeps_earliest(self) -> None:
        first = _decl((0, 1, 0))
        second = _decl((0, 1, 0))
        assert select_winner([first, second]) is first

    def test_accepts_generator(self) -> None:
        result = select_winner(_decl(source_order=i) for i in range(5))
        assert result.source_order == 4

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            select_winner([])

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_ranking_head(self, seed: int) -> None:
        candidates = _random_candidates(random.Random(seed), 20)
        assert select_winner(candidates) is rank_declarations(candidates)[0]


class TestRankDeclarations:
    def test_order(self) -> None:
        a = _decl((0, 0, 1), source_order=0)
        b = _decl((0, 1, 0), source_order=1)
        c = _decl(is_inline=True, source_order=2)
        d = _decl(important=True, source_order=3)
        assert rank_declarations([a, b, c, d]) == [d, c, b, a]

    def test_empty(self) -> None:
        assert rank_declarations([]) == []

    def test_ties_keep_input_order(self) -> None:
        first = _decl((0, 1, 0))
        second = _decl((0, 1, 0))
        ranked = rank_declarations([first, second])
        assert ranked[0] is first
        assert ranked[1] is second
