"""Specificity calculation over parsed selector trees.

Weights per simple selector:

    #id                               -> (1, 0, 0)
    .class, [attr], :pseudo-class     -> (0, 1, 0)
    type, ::pseudo-element            -> (0, 0, 1)
    *, combinators                    -> (0, 0, 0)
    :where(...)                       -> (0, 0, 0)
    :is(...), :not(...), :has(...)    -> most specific argument alternative
    &                                 -> specificity of the nesting context
"""

from __future__ import annotations

from specificity.config import EngineConfig
from specificity.model.selector import (
    AttributeSelector,
    ClassSelector,
    ComplexSelector,
    IdSelector,
    NestingSelector,
    PseudoClassSelector,
    PseudoElementSelector,
    SelectorList,
    SimpleSelector,
    TypeSelector,
    UniversalSelector,
)
from specificity.model.vector import ZERO, SpecificityVector
from specificity.parser import parse_selector_list

_ID = SpecificityVector(1, 0, 0)
_CLASS = SpecificityVector(0, 1, 0)
_TYPE = SpecificityVector(0, 0, 1)


def specificity(selector: ComplexSelector) -> SpecificityVector:
    """Return the (a, b, c) weight of one complex selector."""
    a = b = c = 0
    for _combinator, compound in selector.parts:
        for simple in compound:
            da, db, dc = _simple_specificity(simple)
            a += da
            b += db
            c += dc
    return SpecificityVector(a, b, c)


def max_specificity(selectors: SelectorList) -> SpecificityVector:
    """Return the greatest per-alternative weight, or zero for an empty list.

    Alternatives are never summed: each is weighed on its own.
    """
    return max((specificity(s) for s in selectors), default=ZERO)


def specificities(selectors: SelectorList) -> tuple[SpecificityVector, ...]:
    """Return the weight of each alternative, in order."""
    return tuple(specificity(s) for s in selectors)


def selector_specificity(
    text: str,
    context: ComplexSelector | None = None,
    *,
    config: EngineConfig | None = None,
) -> SpecificityVector:
    """Parse *text* and return the weight of its most specific alternative."""
    return max_specificity(parse_selector_list(text, context, config=config))


def _simple_specificity(simple: SimpleSelector) -> SpecificityVector:
    if isinstance(simple, IdSelector):
        return _ID
    if isinstance(simple, (ClassSelector, AttributeSelector)):
        return _CLASS
    if isinstance(simple, PseudoClassSelector):
        return _pseudo_class_specificity(simple)
    if isinstance(simple, (TypeSelector, PseudoElementSelector)):
        return _TYPE
    if isinstance(simple, UniversalSelector):
        return ZERO
    if isinstance(simple, NestingSelector):
        if simple.context is None:
            return ZERO
        return specificity(simple.context)
    raise TypeError(f"Unknown simple selector: {simple!r}")


def _pseudo_class_specificity(pseudo: PseudoClassSelector) -> SpecificityVector:
    """:where() weighs nothing; :is/:not/:has take their heaviest argument.

    Any other single-colon name is a pseudo-class, including the legacy
    spellings ``:before``, ``:after``, ``:first-line`` and ``:first-letter``.
    Write them as ``::before`` etc. to get pseudo-element weight.
    """
    if pseudo.name == "where":
        return ZERO
    if pseudo.takes_selector_list:
        return max_specificity(pseudo.selectors or SelectorList())
    return _CLASS
