"""Specificity - CSS selector parsing, specificity weighting and cascade ordering."""

__version__ = "0.1.0"

from specificity.config import DEFAULT_CONFIG, EngineConfig  # noqa: E402
from specificity.engine import (  # noqa: E402
    ScoredSelector,
    ScoreReport,
    SpecificityCache,
    cascade_key,
    compare_declarations,
    max_specificity,
    rank_declarations,
    score_selectors,
    select_winner,
    selector_specificity,
    specificities,
    specificity,
)
from specificity.model import (  # noqa: E402
    ZERO,
    AttributeSelector,
    ClassSelector,
    Combinator,
    ComplexSelector,
    CompoundSelector,
    DeclarationCandidate,
    Diagnostic,
    IdSelector,
    NestingSelector,
    PseudoClassSelector,
    PseudoElementSelector,
    SelectorList,
    Severity,
    SimpleSelector,
    SpecificityVector,
    TypeSelector,
    UniversalSelector,
    Winner,
    serialize,
)
from specificity.parser import (  # noqa: E402
    DepthExceededError,
    EmptySelectorError,
    ParseError,
    SelectorSyntaxError,
    UnbalancedGroupError,
    normalize_selector,
    parse_selector,
    parse_selector_list,
)

__all__ = [
    "__version__",
    # config
    "EngineConfig",
    "DEFAULT_CONFIG",
    # parser
    "parse_selector_list",
    "parse_selector",
    "normalize_selector",
    "serialize",
    # engine
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
    # model
    "SelectorList",
    "ComplexSelector",
    "CompoundSelector",
    "SimpleSelector",
    "TypeSelector",
    "UniversalSelector",
    "IdSelector",
    "ClassSelector",
    "AttributeSelector",
    "PseudoClassSelector",
    "PseudoElementSelector",
    "NestingSelector",
    "Combinator",
    "SpecificityVector",
    "ZERO",
    "DeclarationCandidate",
    "Winner",
    "Diagnostic",
    "Severity",
    # errors
    "ParseError",
    "SelectorSyntaxError",
    "UnbalancedGroupError",
    "DepthExceededError",
    "EmptySelectorError",
]
