"""
  fuzzlisp parser

Builds one Value tree from a token sequence. A program is either a single
atom or one fully parenthesized list:

    program := atom | list
    list    := '(' element* ')'
    element := atom | list

Atoms become Values:

    - the first element of a list (function-name position) -> String
    - true / false                                           -> Bool
    - base-10 32-bit signed integers                         -> Int
    - floats within 32-bit float range (decimal or 0x..p..)  -> Float
    - anything else                                          -> String
"""

from __future__ import annotations

import logging
import math
import re
from typing import Sequence

from fuzzlisp.errors import (
    ExpectedOpeningParenthesis,
    TooManyTokens,
    UnexpectedEndOfExpression,
)
from fuzzlisp.reader.lexer import Token, TokenKind, tokenize
from fuzzlisp.types.value import (
    Value,
    new_bool,
    new_expression,
    new_float,
    new_int,
    new_string,
)

logger = logging.getLogger(__name__)

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)
HEX_FLOAT_RE = re.compile(
    r"[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)p[+-]?[0-9]+",
    re.IGNORECASE,
)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
FLOAT32_MAX = 3.4028234663852886e38


def atom_to_value(text: str, infer: bool = True) -> Value:
    """Convert atom text to the most specific Value (String when `infer` is off)."""
    if not infer:
        return new_string(text)
    if text == "true":
        return new_bool(True)
    if text == "false":
        return new_bool(False)
    if INT_RE.fullmatch(text):
        i = int(text)
        if INT32_MIN <= i <= INT32_MAX:
            return new_int(i)
    if FLOAT_RE.fullmatch(text):
        f = float(text)
        # a numeric literal that overflows float32 stays a string
        if math.isnan(f) or abs(f) <= FLOAT32_MAX or text.lstrip("+-")[:1] in "iI":
            return new_float(f)
    if HEX_FLOAT_RE.fullmatch(text):
        # 0x1p-2 style; the binary exponent is mandatory
        try:
            f = float.fromhex(text)
        except OverflowError:
            return new_string(text)
        if abs(f) <= FLOAT32_MAX:
            return new_float(f)
    return new_string(text)


class TokenStream:
    def __init__(self, tokens: Sequence[Token], pos: int = 0):
        self.tokens: Sequence[Token] = tokens
        self.pos: int = pos

    def peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token | None:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def parse_expr(self) -> Value:
        tok = self.peek()
        if tok is None:
            raise UnexpectedEndOfExpression("Unexpected end of expression", self.pos)

        # A lone atom is the whole program and never a function name
        if tok.kind is TokenKind.ATOM and len(self.tokens) == 1:
            self.advance()
            return atom_to_value(tok.text, infer=True)

        if tok.kind is not TokenKind.OPEN:
            raise ExpectedOpeningParenthesis(
                f"Expected '(' but found {tok.text!r}", self.pos
            )
        return self.parse_list()

    def parse_list(self) -> Value:
        self.advance()  # consume '('
        items: list[Value] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise UnexpectedEndOfExpression("Unmatched '('", self.pos)
            if tok.kind is TokenKind.CLOSE:
                self.advance()
                return new_expression(items)
            if tok.kind is TokenKind.OPEN:
                items.append(self.parse_list())
                continue
            self.advance()
            items.append(atom_to_value(tok.text, infer=bool(items)))


def parse_tokens(tokens: Sequence[Token], start: int = 0) -> tuple[Value, int]:
    """Parse one form starting at `start`; return it with the index after it."""
    stream = TokenStream(tokens, start)
    node = stream.parse_expr()
    return node, stream.pos


def parse(source: str) -> Value:
    """Parse program text into a single AST.

    Raises UnexpectedEndOfExpression, ExpectedOpeningParenthesis or
    TooManyTokens; no partial tree is returned.
    """
    tokens = tokenize(source)
    node, end = parse_tokens(tokens, 0)
    if end != len(tokens):
        raise TooManyTokens(
            f"Unexpected {tokens[end].text!r} after a complete expression", end
        )
    logger.debug("parsed %r -> %s", source, node)
    return node
