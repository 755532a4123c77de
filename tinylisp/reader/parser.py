"""
  Lisp Reader, Lexer and Parser

- Emits Python primitives instead of Cons cells:

    - lists -> Python list (flat, growable)
    - symbols -> Symbol (case-insensitive, original spelling kept)
    - integers -> int
    - 'expr -> [quote, expr]

  There is no dotted-pair syntax: `.` is read as an ordinary symbol, so
  `(A B . C)` is the four element list [A, B, ., C]. No strings, no comments,
  no escapes.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from tinylisp import SExpression
from tinylisp.types.errors import (
    LispNestingTooDeep,
    LispTrailingTokens,
    LispUnexpectedCloseParen,
    LispUnexpectedEndOfInput,
    LispUnmatchedParenthesis,
)
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r"|(?P<symbol>[^\s()']+)"  # atoms: integers are told apart in the parser
    r")"
)

INTEGER_RE = re.compile(r"-?[0-9]+")

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                break
        pos = m.end()


def parse_atom(token: str) -> SExpression:
    if INTEGER_RE.fullmatch(token):
        return int(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise LispUnexpectedEndOfInput("Unexpected end of input")

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "quote":
            if self.at_end():
                raise LispUnexpectedEndOfInput("Expected an expression after '")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt is None:
                    raise LispUnmatchedParenthesis("Unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        # tok_type == "rparen"
        raise LispUnexpectedCloseParen("Unexpected ')'")

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read(source: str) -> SExpression:
    """Read exactly one expression from `source`.

    Empty (or all-whitespace) input reads as Nil. Raises LispTrailingTokens if
    anything follows the first complete expression.
    """
    stream = TokenStream(lex(source))
    if stream.at_end():
        return Nil
    try:
        expr = stream.parse_expr()
    except RecursionError as ex:
        raise LispNestingTooDeep("Expression nested too deeply to read") from ex
    if not stream.at_end():
        _, extra = stream.peek()
        raise LispTrailingTokens(f"Unexpected {extra!r} after a complete expression")
    logger.debug("read %r -> %r", source, expr)
    return expr


def read_all(source: str) -> Iterator[SExpression]:
    """Read every expression in `source`, in order."""
    try:
        yield from TokenStream(lex(source)).parse_all()
    except RecursionError as ex:
        raise LispNestingTooDeep("Expression nested too deeply to read") from ex
