"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when selector text cannot be parsed.

    ``offset`` is the 0-based character position in the text passed to
    the parse call, when known.
    """

    def __init__(self, message: str, offset: int | None = None):
        self.message = message
        self.offset = offset
        super().__init__(message)


class SelectorSyntaxError(ParseError):
    """A malformed token where a selector token was expected."""

    def __init__(
        self,
        offset: int,
        expected: tuple[str, ...] = (),
        found: str = "",
        message: str | None = None,
    ):
        self.expected = expected
        self.found = found
        if message is None:
            message = f"Unexpected {found!r} at offset {offset}"
            if expected:
                message += f"; expected {', '.join(expected)}"
        super().__init__(message, offset=offset)


class UnbalancedGroupError(ParseError):
    """Mismatched or unterminated ``()``, ``[]`` or quotes."""

    def __init__(self, offset: int, message: str | None = None):
        super().__init__(message or f"Unbalanced group at offset {offset}", offset=offset)


class DepthExceededError(ParseError):
    """Selector-list pseudo-classes nested deeper than the configured limit."""

    def __init__(self, limit: int, offset: int | None = None):
        self.limit = limit
        message = f"Selector nesting exceeds the maximum depth of {limit}"
        if offset is not None:
            message += f" at offset {offset}"
        super().__init__(message, offset=offset)


class EmptySelectorError(ParseError):
    """An empty list, empty alternative, or missing compound selector."""

    def __init__(self, offset: int, message: str | None = None):
        super().__init__(message or f"Empty selector at offset {offset}", offset=offset)
