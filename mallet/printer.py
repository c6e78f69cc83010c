"""Render values back to text.

Readable mode produces text the reader accepts again (strings quoted and
escaped); raw mode emits string contents verbatim.
"""

from __future__ import annotations

from io import StringIO

from mallet import Value
from mallet.reader.escapes import escape
from mallet.types.nil import NilType, EofType
from mallet.types.symbol import Symbol, Keyword
from mallet.types.values import List, Vector, Hashmap, Error, is_integer


def pr_str(value: Value, readable: bool = True) -> str:
    with StringIO() as buffer:
        _write(buffer, value, readable)
        return buffer.getvalue()


def _write_seq(buffer: StringIO, items, readable: bool) -> None:
    first = True
    for item in items:
        if not first:
            buffer.write(" ")
        _write(buffer, item, readable)
        first = False


def _write(buffer: StringIO, value: Value, readable: bool) -> None:
    if value is True:
        buffer.write("true")
    elif value is False:
        buffer.write("false")
    elif isinstance(value, NilType):
        buffer.write("nil")
    elif isinstance(value, EofType):
        pass
    elif is_integer(value):
        buffer.write(str(value))
    elif isinstance(value, float):
        buffer.write(repr(value))
    elif isinstance(value, str):
        if readable:
            buffer.write('"')
            buffer.write(escape(value))
            buffer.write('"')
        else:
            buffer.write(value)
    elif isinstance(value, (Symbol, Keyword)):
        buffer.write(str(value))
    elif isinstance(value, Error):
        buffer.write(value.message)
    elif isinstance(value, List):
        buffer.write("(")
        _write_seq(buffer, value, readable)
        buffer.write(")")
    elif isinstance(value, Vector):
        buffer.write("[")
        _write_seq(buffer, value, readable)
        buffer.write("]")
    elif isinstance(value, Hashmap):
        buffer.write("{")
        first = True
        for k, v in value.items():
            if not first:
                buffer.write(" ")
            _write(buffer, k, readable)
            buffer.write(" ")
            _write(buffer, v, readable)
            first = False
        buffer.write("}")
    else:
        buffer.write(repr(value))
