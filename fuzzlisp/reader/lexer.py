"""
  fuzzlisp lexer

Splits program text into atom and parenthesis tokens. Patterns are tried
in a fixed order at each position (whitespace, atom, '(' and ')'); the
first match wins. Whitespace is recognised and dropped.

Every non-empty remainder matches one of the patterns, so lexing has no
failure mode.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterator, NamedTuple


class TokenKind(Enum):
    WHITESPACE = "whitespace"
    ATOM = "atom"
    OPEN = "open"
    CLOSE = "close"


class Token(NamedTuple):
    kind: TokenKind
    text: str


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<atom>[^\s()]+)"
    r"|(?P<open>\()"
    r"|(?P<close>\))"
)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields non-whitespace tokens in source order."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.end() == pos:
            # unreachable for any str: the atom class covers every other char
            raise AssertionError(f"No token pattern matches at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = TokenKind(m.lastgroup)
        if kind is TokenKind.WHITESPACE:
            continue
        yield Token(kind, m.group())


def tokenize(source: str) -> list[Token]:
    return list(lex(source))
