"""Built-in functions for the Mallet root environment.

This module defines arithmetic, numeric comparison and structural equality,
and `register`, which installs them (and the special forms) into a scope's
function namespace.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from mallet import Value, EvaluatorFn
from mallet.config import INT_MIN, INT_MAX
from mallet.errors import (
    ArityError,
    DivisionByZeroError,
    IntegerOverflowError,
    MalletTypeError,
    RealOverflowError,
)
from mallet.evaluation.special_forms import SPECIAL_FORMS
from mallet.types.environment import Environment
from mallet.types.native_fn import EVALUATE_ALL
from mallet.types.nil import NilType
from mallet.types.symbol import Symbol, Keyword
from mallet.types.values import (
    List,
    Vector,
    Hashmap,
    Error,
    is_integer,
    is_number,
    type_name,
)


def _check_numbers(name: str, args: list[Value]) -> None:
    for i, arg in enumerate(args):
        if not is_number(arg):
            position = "first argument" if i == 0 else "argument"
            raise MalletTypeError(
                f"{position} to {name} not a number, got {type_name(arg)}"
            )


def _checked(value: Value) -> Value:
    if is_integer(value) and not INT_MIN <= value <= INT_MAX:
        raise IntegerOverflowError(f"integer overflow: {value}")
    if isinstance(value, float) and not math.isfinite(value):
        raise RealOverflowError("real result is not finite")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Value], _: EvaluatorFn) -> Value:
    """Left fold of + seeded with 0."""
    _check_numbers("+", args)
    total = 0
    for x in args:
        total = _checked(total + x)
    return total


def mul(env: Environment, args: list[Value], _: EvaluatorFn) -> Value:
    """Left fold of * seeded with 1."""
    _check_numbers("*", args)
    product = 1
    for x in args:
        product = _checked(product * x)
    return product


def sub(env: Environment, args: list[Value], _: EvaluatorFn) -> Value:
    """Subtract every later argument from the first."""
    if not args:
        raise ArityError("- requires at least 1 argument")
    _check_numbers("-", args)
    result = args[0]
    for x in args[1:]:
        result = _checked(result - x)
    return result


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def div(env: Environment, args: list[Value], _: EvaluatorFn) -> Value:
    """Divide the first argument by each later one; integer division truncates toward zero."""
    if not args:
        raise ArityError("/ requires at least 1 argument")
    _check_numbers("/", args)
    result = args[0]
    for x in args[1:]:
        if x == 0:
            raise DivisionByZeroError("division by 0")
        if is_integer(result) and is_integer(x):
            result = _checked(_truncating_div(result, x))
        else:
            result = _checked(result / x)
    return result


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, rel: Callable[[Value, Value], bool]):
    def compare(env: Environment, args: list[Value], _: EvaluatorFn) -> bool:
        if not args:
            raise ArityError(f"{name} requires at least 1 argument")
        _check_numbers(name, args)
        return all(rel(a, b) for a, b in zip(args, args[1:]))

    compare.__name__ = f"compare_{rel.__name__}"
    compare.__doc__ = f"Chainable {name}: true if it holds for every adjacent pair."
    return compare


lt = _comparison("<", operator.lt)
lte = _comparison("<=", operator.le)
gt = _comparison(">", operator.gt)
gte = _comparison(">=", operator.ge)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: Value, b: Value) -> bool:
    """Structural equality over the value model."""
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if isinstance(a, NilType) or isinstance(b, NilType):
        return isinstance(a, NilType) and isinstance(b, NilType)
    if type(a) is not type(b):
        return False
    if isinstance(a, (List, Vector)):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Hashmap):
        return _mapping_equal(_first_entries(a), _first_entries(b))
    if isinstance(a, (str, Symbol, Keyword, Error)):
        return a == b
    return False


def _first_entries(hm: Hashmap) -> dict[Value, Value]:
    """Key -> value using the first occurrence of each repeated key."""
    entries: dict[Value, Value] = {}
    for key, value in hm.items():
        entries.setdefault(key, value)
    return entries


def _mapping_equal(a: dict[Value, Value], b: dict[Value, Value]) -> bool:
    if a.keys() != b.keys():
        return False
    return all(is_equal(value, b[key]) for key, value in a.items())


def equals(env: Environment, args: list[Value], _: EvaluatorFn) -> bool:
    """True if every argument is structurally equal to the first."""
    if len(args) <= 1:
        return True
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "=": equals,
}


def register(env: Environment) -> None:
    """Register all builtin functions and special forms into the given environment."""
    for name, op in BUILTINS.items():
        env.define_function(name, EVALUATE_ALL, op)
    for name, (policy, op) in SPECIAL_FORMS.items():
        env.define_function(name, policy, op)
