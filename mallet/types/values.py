"""Container and error values, plus the copy and classification helpers.

Ownership is tree-shaped: a container owns its children and a value is held
by exactly one container or binding. Anything that must be stored in a second
place goes through `clone` first.
"""

from __future__ import annotations

from typing import Iterable

from mallet import Value
from mallet.errors import ParseError
from mallet.types.nil import NilType, EofType
from mallet.types.symbol import Symbol, Keyword


class List(list):
    def __repr__(self):
        return f"List({list.__repr__(self)})"


class Vector(list):
    def __repr__(self):
        return f"Vector({list.__repr__(self)})"


class Hashmap:
    """Ordered map from String/Keyword keys to values, kept as parallel lists."""

    __slots__ = ("keys", "values")

    def __init__(self, keys: Iterable[Value] = (), values: Iterable[Value] = ()):
        self.keys: list[Value] = list(keys)
        self.values: list[Value] = list(values)
        if len(self.keys) != len(self.values):
            raise ParseError("hashmap needs a value for every key")
        for key in self.keys:
            if not is_hash_key(key):
                raise ParseError(
                    f"hashmap key must be string or keyword, got {type_name(key)}"
                )

    def items(self):
        return zip(self.keys, self.values)

    def __len__(self) -> int:
        return len(self.keys)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Hashmap)
            and self.keys == other.keys
            and self.values == other.values
        )

    def __repr__(self):
        return f"Hashmap({self.keys!r}, {self.values!r})"


class Error:
    """An error carried as an ordinary value."""

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash((Error, self.message))

    def __repr__(self):
        return f"Error({self.message!r})"


def is_hash_key(value: Value) -> bool:
    return isinstance(value, (str, Keyword))


def is_integer(value: Value) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Value) -> bool:
    return is_integer(value) or isinstance(value, float)


def type_name(value: Value) -> str:
    """Name of the value's case, as used in error messages."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, NilType):
        return "nil"
    if isinstance(value, EofType):
        return "eof"
    if is_integer(value):
        return "integer"
    if isinstance(value, float):
        return "real"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, Keyword):
        return "keyword"
    if isinstance(value, Error):
        return "error"
    if isinstance(value, List):
        return "list"
    if isinstance(value, Vector):
        return "vector"
    if isinstance(value, Hashmap):
        return "hashmap"
    return type(value).__name__


def clone(value: Value) -> Value:
    """Deep copy. Atoms are immutable and returned as-is; containers are rebuilt."""
    if isinstance(value, List):
        return List(clone(x) for x in value)
    if isinstance(value, Vector):
        return Vector(clone(x) for x in value)
    if isinstance(value, Hashmap):
        return Hashmap(value.keys, (clone(v) for v in value.values))
    return value


__all__ = [
    "List",
    "Vector",
    "Hashmap",
    "Error",
    "is_hash_key",
    "is_integer",
    "is_number",
    "type_name",
    "clone",
]
