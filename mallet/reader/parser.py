"""
  Mallet Reader

- Recursive descent over the token list with one token of lookahead.
- Emits the value model directly:

    - nil / true / false -> Nil / True / False
    - integers -> int (signed 64-bit), other numerals -> float
    - :name -> Keyword("name")
    - "text" -> str, escapes decoded
    - ( ... ) -> List, [ ... ] -> Vector, { k v ... } -> Hashmap
    - 'x `x ~x ~@x @x -> (quote x) (quasiquote x) (unquote x) (splice-unquote x) (deref x)
    - ^m x -> (with-meta x m)
    - anything else -> Symbol

A failure anywhere raises ParseError; containers under construction at every
enclosing level are simply dropped.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Iterable, Iterator, Optional

from mallet import Value
from mallet.config import INT_MIN, INT_MAX
from mallet.errors import ParseError
from mallet.reader.escapes import unescape
from mallet.reader.lexer import Token, tokenize
from mallet.reader.reader_macros import is_reader_macro, read_meta, read_quote
from mallet.types.nil import Nil, EOF
from mallet.types.symbol import Symbol, Keyword
from mallet.types.values import List, Vector, Hashmap, is_hash_key, type_name

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"[+-]?\d+")
REAL_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")

CLOSERS = {"(": ")", "[": "]", "{": "}"}
CONTAINER_NAMES = {"(": "list", "[": "vector", "{": "hashmap"}


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: list[Token] = list(tokens)
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.index += 1
        return tok

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def read_form(self) -> Value:
        tok = self.peek()
        if tok is None:
            raise ParseError("unexpected end of input, expected a form")

        if tok.kind in ("special", "splice"):
            if tok.text in CLOSERS:
                return self.read_sequence(tok.text)
            if tok.text in (")", "]", "}"):
                raise ParseError(f"unexpected '{tok.text}'")
            if is_reader_macro(tok.text):
                self.advance()
                if tok.text == "^":
                    return read_meta(self)
                return read_quote(tok.text, self)

        self.advance()
        return read_atom(tok)

    def read_sequence(self, opener: str) -> Value:
        closer = CLOSERS[opener]
        name = CONTAINER_NAMES[opener]
        self.advance()  # consume the opener
        items: list[Value] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise ParseError(f"unterminated {name}: expected '{closer}', got EOF")
            if tok.kind == "special" and tok.text == closer:
                self.advance()
                break
            if tok.kind == "special" and tok.text in (")", "]", "}"):
                raise ParseError(f"expected '{closer}', got '{tok.text}'")
            items.append(self.read_form())

        if opener == "(":
            return List(items)
        if opener == "[":
            return Vector(items)
        return build_hashmap(items)

    def read_top_level(self) -> Value:
        try:
            return self.read_form()
        except RecursionError:
            raise ParseError("nesting too deep") from None

    def read_all(self) -> Iterator[Value]:
        while not self.at_end():
            yield self.read_top_level()


def build_hashmap(items: list[Value]) -> Hashmap:
    keys = items[0::2]
    values = items[1::2]
    for key in keys:
        if not is_hash_key(key):
            raise ParseError(
                f"hashmap key must be string or keyword, got {type_name(key)}"
            )
    if len(keys) != len(values):
        raise ParseError("last key in hashmap lacks value")
    return Hashmap(keys, values)


def read_atom(tok: Token) -> Value:
    text = tok.text
    if tok.kind == "string":
        return unescape(text[1:-1])
    if tok.kind == "keyword":
        if len(text) == 1:
            raise ParseError("keyword terminated too early")
        return Keyword(text[1:])
    if text == "nil":
        return Nil
    if text == "true":
        return True
    if text == "false":
        return False
    if INTEGER_RE.fullmatch(text):
        value = int(text)
        if INT_MIN <= value <= INT_MAX:
            return value
    if REAL_RE.fullmatch(text):
        value = float(text)
        if not math.isfinite(value):
            raise ParseError(f"real literal out of range: {text}")
        return value
    return Symbol(text)


def read_str(source: str) -> Value:
    """Read the first form in `source`; input with no tokens reads as EOF."""
    stream = TokenStream(tokenize(source))
    if stream.at_end():
        return EOF
    form = stream.read_top_level()
    if not stream.at_end():
        logger.debug("ignoring %d trailing token(s)", len(stream.tokens) - stream.index)
    logger.debug("read %r", form)
    return form


def read_all(source: str) -> Iterator[Value]:
    """Yield every form in `source` in order."""
    return TokenStream(tokenize(source)).read_all()
