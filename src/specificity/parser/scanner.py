"""Pre-scan of selector text: group balance and nesting depth.

Runs before the grammar sees the input so that unbalanced brackets and
runaway ``:is(:is(...))`` nesting are rejected in one linear pass, without
building a tree.
"""

from __future__ import annotations

import re

from specificity.parser.errors import DepthExceededError, UnbalancedGroupError

_CLOSERS = {")": "(", "]": "["}

# Matches a selector-list pseudo-class name ending right before "(".
_SELECTOR_FUNCTION_RE = re.compile(r":(?:is|where|not|has)$", re.IGNORECASE)
_LONGEST_FUNCTION_NAME = len(":where")


def scan_groups(text: str, max_depth: int) -> int:
    """Check bracket/quote balance and selector-list nesting depth.

    Returns the deepest selector-list nesting level seen.  Raises
    :class:`UnbalancedGroupError` for the first mismatched or unterminated
    group and :class:`DepthExceededError` as soon as nesting crosses
    *max_depth*.
    """
    # Each frame: (opener, offset, is_selector_function)
    stack: list[tuple[str, int, bool]] = []
    depth = 0
    deepest = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "\"'":
            i = _skip_string(text, i)
            continue
        if ch in "([":
            is_function = ch == "(" and _is_selector_function(text, i)
            if is_function:
                depth += 1
                if depth > max_depth:
                    raise DepthExceededError(max_depth, offset=i)
                deepest = max(deepest, depth)
            stack.append((ch, i, is_function))
        elif ch in _CLOSERS:
            if not stack or stack[-1][0] != _CLOSERS[ch]:
                raise UnbalancedGroupError(i, f"Unexpected {ch!r} at offset {i}")
            _opener, _offset, is_function = stack.pop()
            if is_function:
                depth -= 1
        i += 1

    if stack:
        opener, offset, _ = stack[-1]
        raise UnbalancedGroupError(offset, f"Unterminated {opener!r} opened at offset {offset}")
    return deepest


def top_level_commas(text: str) -> list[int]:
    """Offsets of the commas in *text* that separate top-level alternatives.

    Assumes *text* has already passed :func:`scan_groups`.
    """
    commas: list[int] = []
    level = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch in "\"'":
            i = _skip_string(text, i)
            continue
        if ch in "([":
            level += 1
        elif ch in ")]":
            level -= 1
        elif ch == "," and level == 0:
            commas.append(i)
        i += 1
    return commas


def _skip_string(text: str, start: int) -> int:
    """Return the index just past the string literal opening at *start*."""
    quote = text[start]
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n":
            break
        i += 1
    raise UnbalancedGroupError(start, f"Unterminated string opened at offset {start}")


def _is_selector_function(text: str, paren: int) -> bool:
    begin = max(0, paren - _LONGEST_FUNCTION_NAME)
    return _SELECTOR_FUNCTION_RE.search(text, begin, paren) is not None
