"""
  Bel Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Bel objects directly:

    - symbols -> Symbol (nil is just Symbol("nil"))
    - lists -> right-nested Pair chains ending in nil
    - dotted lists -> (a b . c) with c as the final cdr
    - characters -> Char, written \\a or \\space
    - quote forms -> (quote expr), for both ' and `
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from bel import Object
from bel.errors import BelSyntaxError
from bel.types.char import Char
from bel.types.nil import Nil
from bel.types.object import from_list
from bel.types.symbol import Symbol

QUOTE = Symbol("quote")

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>[\'`])"  # ' and `
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<char>\\[^\s()\\`']+)"  # character literals, named or single-char
    r"|(?P<symbol>[^\s()\\'`;]+)"  # fallback: symbols
    r")",
    re.DOTALL,
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise BelSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm)
                break


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

    def parse_expr(self) -> Optional[Object]:
        """Read one object, or return None once the tokens run out."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return Symbol(tok_val)

        if tok_type == "char":
            self.advance()
            return Char(tok_val[1:])  # strip off "\"

        # Quote forms
        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise BelSyntaxError(f"Nothing to quote after {tok_val!r}")
            return from_list([QUOTE, expr])

        # List or dotted list
        if tok_type == "lparen":
            self.advance()
            items: list[Object] = []
            while True:
                next_type, next_val = self.peek()
                if next_type == "rparen":
                    self.advance()
                    return from_list(items)
                if next_type is None:
                    raise BelSyntaxError("Unmatched '('")
                if next_type == "symbol" and next_val == "." and items:
                    self.advance()
                    cdr_expr = self.parse_expr()
                    if cdr_expr is None or self.peek()[0] != "rparen":
                        raise BelSyntaxError("Expected ')' after dotted cdr")
                    self.advance()
                    return from_list(items, cdr_expr)
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise BelSyntaxError("Unexpected ')'")

        raise BelSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[Object]:
        while (expr := self.parse_expr()) is not None:
            yield expr


def parse_all(source: str) -> Iterator[Object]:
    """Yield every top-level object in `source`."""
    return TokenStream(lex(source)).parse_all()


def parse(source: str) -> Object:
    """Read exactly one object from `source`.

    Blank input reads as nil. More than one top-level object is an error.
    """
    exprs = list(parse_all(source))
    if not exprs:
        return Nil
    if len(exprs) > 1:
        raise BelSyntaxError(f"multiple objects: {' '.join(str(e) for e in exprs)}")
    return exprs[0]
