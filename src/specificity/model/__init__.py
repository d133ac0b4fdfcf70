"""Specificity model layer -- public type re-exports."""

from specificity.model.declaration import DeclarationCandidate, Winner
from specificity.model.diagnostic import Diagnostic, Severity
from specificity.model.selector import (
    SELECTOR_LIST_PSEUDO_CLASSES,
    AttributeSelector,
    ClassSelector,
    Combinator,
    ComplexSelector,
    CompoundSelector,
    IdSelector,
    NestingSelector,
    PseudoClassSelector,
    PseudoElementSelector,
    SelectorList,
    SimpleSelector,
    TypeSelector,
    UniversalSelector,
    serialize,
)
from specificity.model.vector import ZERO, SpecificityVector

__all__ = [
    # selector tree
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
    "SELECTOR_LIST_PSEUDO_CLASSES",
    "serialize",
    # vector
    "SpecificityVector",
    "ZERO",
    # declaration
    "DeclarationCandidate",
    "Winner",
    # diagnostic
    "Severity",
    "Diagnostic",
]
