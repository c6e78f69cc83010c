"""Prefix sugar expanded at read time.

Each quote-like token wraps the next form in a two-element list headed by its
symbol. `^` reads two forms, metadata first, and expands target-first:
`^M T` -> (with-meta T M).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mallet.types.symbol import Symbol
from mallet.types.values import List

if TYPE_CHECKING:
    from mallet.reader.parser import TokenStream

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

WITH_META = Symbol("with-meta")


def read_quote(token: str, stream: TokenStream) -> List:
    form = stream.read_form()
    return List([QUOTE_FORMS[token], form])


def read_meta(stream: TokenStream) -> List:
    metadata = stream.read_form()
    target = stream.read_form()
    return List([WITH_META, target, metadata])


def is_reader_macro(token: str) -> bool:
    return token in QUOTE_FORMS or token == "^"
