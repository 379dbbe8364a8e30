"""Lark Transformer that converts a CSS parse tree into a Stylesheet model."""

from __future__ import annotations

import functools
import logging
from pathlib import Path

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError, VisitError

from csstokens.errors import ParseError
from csstokens.model.stylesheet import (
    AtRule,
    Comment,
    Declaration,
    GroupRule,
    Keyframe,
    KeyframesRule,
    Position,
    Rule,
    Stylesheet,
)

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


def _position(meta) -> Position:
    return Position(start_line=meta.line, end_line=meta.end_line)


def _token_position(token: Token) -> Position:
    return Position(start_line=token.line, end_line=token.end_line)


def split_selectors(prelude: str) -> tuple[str, ...]:
    """Split a selector list on top-level commas.

    Commas nested in parentheses or brackets (``:is(a, b)``, ``[title="a,b"]``)
    do not split.
    """
    parts: list[str] = []
    depth = 0
    quote = ""
    current: list[str] = []
    for char in prelude:
        if quote:
            if char == quote:
                quote = ""
        elif char in "\"'":
            quote = char
        elif char in "([":
            depth += 1
        elif char in ")]":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return tuple(" ".join(p.split()) for p in parts if p.strip())


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into stylesheet nodes."""

    def comment(self, items: list[Token]) -> Comment:
        token = items[0]
        return Comment(text=str(token)[2:-2], position=_token_position(token))

    @v_args(meta=True)
    def declaration(self, meta, items: list[Token | None]) -> Declaration:
        name, value = items
        return Declaration(
            name=str(name),
            value=str(value).strip() if value is not None else "",
            position=_position(meta),
        )

    @v_args(meta=True)
    def rule(self, meta, items: list[object]) -> Rule:
        return Rule(
            selectors=split_selectors(str(items[0])),
            declarations=tuple(items[1:]),  # type: ignore[arg-type]
            position=_position(meta),
        )

    @v_args(meta=True)
    def keyframe(self, meta, items: list[object]) -> Keyframe:
        return Keyframe(
            selectors=split_selectors(str(items[0])),
            declarations=tuple(items[1:]),  # type: ignore[arg-type]
            position=_position(meta),
        )

    @v_args(meta=True)
    def keyframes(self, meta, items: list[object]) -> KeyframesRule:
        keyword = str(items[0])
        vendor = keyword[1 : -len("keyframes")]
        return KeyframesRule(
            name=str(items[1]).strip(),
            frames=tuple(items[2:]),  # type: ignore[arg-type]
            position=_position(meta),
            vendor=vendor,
        )

    @v_args(meta=True)
    def group_rule(self, meta, items: list[object]) -> GroupRule:
        keyword, prelude, *rules = items
        return GroupRule(
            keyword=str(keyword)[1:],
            prelude=str(prelude).strip() if prelude is not None else "",
            rules=tuple(rules),  # type: ignore[arg-type]
            position=_position(meta),
        )

    @v_args(meta=True)
    def at_statement(self, meta, items: list[object]) -> AtRule:
        keyword, prelude = items
        return AtRule(
            keyword=str(keyword)[1:],
            prelude=str(prelude).strip() if prelude is not None else "",
            position=_position(meta),
        )

    @v_args(meta=True)
    def at_block(self, meta, items: list[object]) -> AtRule:
        keyword, prelude, *declarations = items
        return AtRule(
            keyword=str(keyword)[1:],
            prelude=str(prelude).strip() if prelude is not None else "",
            position=_position(meta),
            declarations=tuple(declarations),  # type: ignore[arg-type]
        )

    def start(self, items: list[object]) -> tuple[object, ...]:
        return tuple(items)


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
        propagate_positions=True,
    )


def parse_stylesheet(source: str, filename: str | None = None) -> Stylesheet:
    """Parse CSS source text into a Stylesheet.

    Raises :class:`ParseError` (carrying line, column and *filename*) when
    the source is not syntactically valid.
    """
    try:
        tree = _parser().parse(source)
        rules = CssTransformer().transform(tree)
    except VisitError as e:
        raise ParseError(str(e.orig_exc), filename=filename) from e
    except LarkError as e:
        # UnexpectedInput subclasses carry the failing position.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column, filename=filename) from e
    logger.debug("Parsed %s: %d top-level node(s)", filename or "<string>", len(rules))
    return Stylesheet(rules=rules, filename=filename)
