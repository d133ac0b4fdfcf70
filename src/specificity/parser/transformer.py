"""Lark Transformer that converts a selector parse tree into the selector model."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken
from lark.visitors import Transformer_NonRecursive

from specificity.config import DEFAULT_CONFIG, EngineConfig
from specificity.model.selector import (
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
)
from specificity.parser.errors import EmptySelectorError, ParseError, SelectorSyntaxError
from specificity.parser.scanner import scan_groups, top_level_commas

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMBINATORS: dict[str, Combinator] = {
    "DESCENDANT": Combinator.DESCENDANT,
    "CHILD": Combinator.CHILD,
    "NEXT_SIBLING": Combinator.NEXT_SIBLING,
    "SUBSEQUENT_SIBLING": Combinator.SUBSEQUENT_SIBLING,
    "COLUMN": Combinator.COLUMN,
}

# Terminals that can begin a compound selector.
_COMPOUND_START = frozenset({
    "IDENT",
    "STAR",
    "HASH",
    "CLASS",
    "LSQB",
    "PSEUDO_CLASS",
    "FUNCTION",
    "SELECTOR_FUNCTION",
    "HAS_FUNCTION",
    "PSEUDO_ELEMENT",
    "AMPERSAND",
})

# Tokens that, when found where a compound is required, mean it is missing.
_SEPARATORS = frozenset({"COMMA", "RPAR", "$END"} | set(_COMBINATORS))

_DESCRIPTIONS: dict[str, str] = {
    "IDENT": "identifier",
    "STAR": "'*'",
    "HASH": "'#id'",
    "CLASS": "'.class'",
    "LSQB": "'['",
    "RSQB": "']'",
    "ATTR_OPERATOR": "attribute operator",
    "ATTR_MODIFIER": "attribute modifier",
    "STRING": "string",
    "PSEUDO_CLASS": "pseudo-class",
    "FUNCTION": "functional pseudo-class",
    "SELECTOR_FUNCTION": "':is(', ':where(' or ':not('",
    "HAS_FUNCTION": "':has('",
    "ARGUMENT": "argument",
    "LPAR": "'('",
    "RPAR": "')'",
    "PSEUDO_ELEMENT": "pseudo-element",
    "AMPERSAND": "'&'",
    "COMMA": "','",
    "CHILD": "'>'",
    "NEXT_SIBLING": "'+'",
    "SUBSEQUENT_SIBLING": "'~'",
    "COLUMN": "'||'",
    "DESCENDANT": "whitespace",
    "$END": "end of input",
}

_STRING_ESCAPE_RE = re.compile(r"\\([0-9a-fA-F]{1,6})[ \t\n]?|\\(.)", re.DOTALL)


def _unescape_string(raw: str) -> str:
    """Strip quotes from a CSS string token and resolve its escapes."""

    def _replace(match: re.Match[str]) -> str:
        if match.group(1) is not None:
            codepoint = int(match.group(1), 16)
            if codepoint == 0 or codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
                return "\ufffd"
            return chr(codepoint)
        return match.group(2)

    return _STRING_ESCAPE_RE.sub(_replace, raw[1:-1])


def _ends_with_escape(text: str) -> bool:
    """True if *text* ends in an unescaped backslash."""
    backslashes = len(text) - len(text.rstrip("\\"))
    return backslashes % 2 == 1


def _describe(names: object) -> tuple[str, ...]:
    if not names:
        return ()
    return tuple(sorted({_DESCRIPTIONS.get(str(name), str(name)) for name in names}))  # type: ignore[union-attr]


class SelectorTransformer(Transformer_NonRecursive):
    """Transform a Lark parse tree into selector model objects.

    ``context`` is attached to every ``&`` in the tree, including those in
    nested :is()/:where()/:not()/:has() argument lists.
    """

    def __init__(self, context: ComplexSelector | None = None) -> None:
        super().__init__()
        self.context = context

    # ---- simple selectors ----

    def type_selector(self, items: list[Token]) -> TypeSelector:
        return TypeSelector(str(items[0]))

    def universal_selector(self, items: list[Token]) -> UniversalSelector:
        return UniversalSelector()

    def id_selector(self, items: list[Token]) -> IdSelector:
        return IdSelector(str(items[0])[1:])

    def class_selector(self, items: list[Token]) -> ClassSelector:
        return ClassSelector(str(items[0])[1:])

    def attribute_value(self, items: list[Token]) -> str:
        token = items[0]
        if token.type == "STRING":
            return _unescape_string(str(token))
        return str(token)

    def attribute_selector(self, items: list[object]) -> AttributeSelector:
        name = ""
        operator: str | None = None
        value: str | None = None
        modifier: str | None = None
        for item in items:
            if isinstance(item, Token):
                if item.type == "IDENT":
                    name = str(item)
                elif item.type == "ATTR_OPERATOR":
                    operator = str(item).strip()
                elif item.type == "ATTR_MODIFIER":
                    modifier = str(item).strip().lower()
            else:
                value = str(item)
        return AttributeSelector(name=name, operator=operator, value=value, modifier=modifier)

    def pseudo_class(self, items: list[Token]) -> PseudoClassSelector:
        return PseudoClassSelector(str(items[0])[1:].lower())

    def argument(self, items: list[object]) -> str:
        return "".join(str(item) for item in items)

    def functional_pseudo_class(self, items: list[object]) -> PseudoClassSelector:
        name = str(items[0])[1:-1].lower()
        return PseudoClassSelector(name, argument=str(items[1]).strip())

    def selector_pseudo_class(self, items: list[object]) -> PseudoClassSelector:
        head = str(items[0])
        name = head[1 : head.index("(")].lower()
        selectors = SelectorList()
        for item in items[1:]:
            if isinstance(item, SelectorList):
                selectors = item
        return PseudoClassSelector(name, selectors=selectors)

    def pseudo_element(self, items: list[Token]) -> PseudoElementSelector:
        return PseudoElementSelector(str(items[0])[2:].lower())

    def nesting_selector(self, items: list[Token]) -> NestingSelector:
        return NestingSelector(context=self.context)

    # ---- structural ----

    def compound_selector(self, items: list[SimpleSelector]) -> CompoundSelector:
        return CompoundSelector(tuple(items))

    def combinator(self, items: list[Token]) -> Combinator:
        return _COMBINATORS[items[0].type]

    def relative_combinator(self, items: list[Token]) -> Combinator:
        return _COMBINATORS[items[0].type]

    def relative_selector(self, items: list[object]) -> ComplexSelector:
        return self.complex_selector(items)

    def relative_selector_list(self, items: list[object]) -> SelectorList:
        return self.selector_list(items)

    def complex_selector(self, items: list[object]) -> ComplexSelector:
        parts: list[tuple[Combinator | None, CompoundSelector]] = []
        pending: Combinator | None = None
        for item in items:
            if isinstance(item, Combinator):
                pending = item
            elif isinstance(item, CompoundSelector):
                parts.append((pending, item))
                pending = None
        return ComplexSelector(tuple(parts))

    def selector_list(self, items: list[object]) -> SelectorList:
        return SelectorList(tuple(item for item in items if isinstance(item, ComplexSelector)))

    def start(self, items: list[object]) -> SelectorList:
        return items[0]  # type: ignore[return-value]


@lru_cache(maxsize=None)
def _build_parser() -> Lark:
    """Compile the selector grammar once per process."""
    logger.debug("Compiling selector grammar from %s", GRAMMAR_PATH)
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="contextual",
        start="start",
    )


def _translate(exc: UnexpectedInput, text: str, base: int) -> ParseError:
    """Turn a Lark exception into one of our parse errors."""
    if isinstance(exc, UnexpectedToken):
        token = exc.token
        expected = set(exc.expected or ())
        if token.type == "$END":
            offset = len(text)
            found = "end of input"
        else:
            offset = token.start_pos or 0
            found = str(token)
        if token.type in _SEPARATORS and expected & _COMPOUND_START:
            return EmptySelectorError(
                base + offset, f"Expected a selector before {found!r} at offset {base + offset}"
            )
        return SelectorSyntaxError(base + offset, expected=_describe(expected), found=found)
    if isinstance(exc, UnexpectedCharacters):
        return SelectorSyntaxError(
            base + exc.pos_in_stream, expected=_describe(exc.allowed), found=exc.char
        )
    offset = getattr(exc, "pos_in_stream", None) or 0
    return SelectorSyntaxError(base + offset, found=str(exc))


def parse_selector_list(
    text: str,
    context: ComplexSelector | None = None,
    *,
    config: EngineConfig | None = None,
) -> SelectorList:
    """Parse comma-separated selector text into a :class:`SelectorList`.

    ``context`` is the selector of the enclosing rule; every ``&`` in
    *text*, however deeply nested, refers to it.  Raises a
    :class:`ParseError` subclass on the first problem found; no partial
    tree is ever returned.
    """
    config = config or DEFAULT_CONFIG
    if not text.strip():
        raise EmptySelectorError(0, "Selector list is empty")
    base = len(text) - len(text.lstrip())
    end = len(text.rstrip())
    if end < len(text) and _ends_with_escape(text[:end]):
        end += 1  # escaped whitespace belongs to the last identifier
    stripped = text[base:end]

    scan_groups(text, config.max_depth)
    try:
        tree = _build_parser().parse(stripped)
    except UnexpectedInput as e:
        raise _translate(e, stripped, base) from e
    return SelectorTransformer(context).transform(tree)


def parse_selector(
    text: str,
    context: ComplexSelector | None = None,
    *,
    config: EngineConfig | None = None,
) -> ComplexSelector:
    """Parse text holding exactly one complex selector."""
    selectors = parse_selector_list(text, context, config=config)
    if len(selectors) != 1:
        raise SelectorSyntaxError(
            top_level_commas(text)[0],
            expected=("a single selector",),
            found=",",
            message=f"Expected a single selector, got {len(selectors)}",
        )
    return selectors[0]


def normalize_selector(
    text: str,
    context: ComplexSelector | None = None,
    *,
    config: EngineConfig | None = None,
) -> str:
    """Return the canonical serialized form of *text*."""
    return str(parse_selector_list(text, context, config=config))
