"""Backslash escapes shared by the reader (decoding) and printer (encoding)."""

from __future__ import annotations

from mallet.errors import ParseError

ESCAPES: dict[str, str] = {
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

_ENCODE: dict[str, str] = {v: "\\" + k for k, v in ESCAPES.items()}


def unescape(body: str) -> str:
    """Decode the text between a string token's quotes."""
    out: list[str] = []
    i = 0
    n = len(body)
    while i < n:
        c = body[i]
        if c != "\\":
            out.append(c)
            i += 1
            continue
        if i + 1 >= n:
            raise ParseError("unterminated escape sequence at end of string")
        esc = body[i + 1]
        if esc not in ESCAPES:
            raise ParseError(f"unknown escape sequence '\\{esc}' in string")
        out.append(ESCAPES[esc])
        i += 2
    return "".join(out)


def escape(text: str) -> str:
    return "".join(_ENCODE.get(c, c) for c in text)
