"""Weighting engine: specificity calculation, cascade comparison, caching and batch scoring."""

from specificity.engine.batch import ScoredSelector, ScoreReport, score_selectors
from specificity.engine.cache import SpecificityCache
from specificity.engine.calculator import (
    max_specificity,
    selector_specificity,
    specificities,
    specificity,
)
from specificity.engine.comparator import (
    cascade_key,
    compare_declarations,
    rank_declarations,
    select_winner,
)

__all__ = [
    "specificity",
    "max_specificity",
    "specificities",
    "selector_specificity",
    "compare_declarations",
    "cascade_key",
    "select_winner",
    "rank_declarations",
    "SpecificityCache",
    "score_selectors",
    "ScoreReport",
    "ScoredSelector",
]
