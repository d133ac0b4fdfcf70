"""Selector parser: text to SelectorList via a Lark LALR grammar."""

from specificity.parser.errors import (
    DepthExceededError,
    EmptySelectorError,
    ParseError,
    SelectorSyntaxError,
    UnbalancedGroupError,
)
from specificity.parser.transformer import normalize_selector, parse_selector, parse_selector_list

__all__ = [
    "parse_selector_list",
    "parse_selector",
    "normalize_selector",
    "ParseError",
    "SelectorSyntaxError",
    "UnbalancedGroupError",
    "DepthExceededError",
    "EmptySelectorError",
]
