"""Lexer: source text -> ordered tokens.

At each position, after skipping whitespace and commas, the first matching
rule wins: comment, `~@`, single-character special, string, then a run of
symbol/keyword/number characters.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, NamedTuple

from mallet.errors import LexError

logger = logging.getLogger(__name__)

SEPARATORS_RE = re.compile(r"[\s,]*")

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # line comment, discarded
    r"|(?P<splice>~@)"  # splice-unquote
    r"|(?P<special>[\[\]{}()'`~^@])"  # single-character specials
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted string, escapes intact
    r"|(?P<atom>[^\s\[\]{}()'\"`,;]+)",  # symbol / keyword / number run
    re.DOTALL,
)


class Token(NamedTuple):
    kind: str
    text: str
    pos: int


def lex(source: str) -> Iterator[Token]:
    """Token generator; raises LexError on an unterminated string."""
    pos = 0
    n = len(source)
    while True:
        pos = SEPARATORS_RE.match(source, pos).end()
        if pos >= n:
            return
        m = TOKEN_RE.match(source, pos)
        if not m:
            # The atom rule takes every character the others leave, so only an
            # opening quote without its closer fails to match
            raise LexError(f"unterminated string starting at {pos}")
        kind = m.lastgroup
        text = m.group(kind)
        pos = m.end()
        if kind == "comment":
            continue
        if kind == "atom" and text.startswith(":"):
            kind = "keyword"
        logger.debug("token %s %r", kind, text)
        yield Token(kind, text, m.start())


def tokenize(source: str) -> list[Token]:
    """Lex the whole input eagerly, so lexical errors surface before any reading."""
    return list(lex(source))
