"""Runtime environment for Mallet.

An Environment is one lexical scope: a table of variable bindings, a separate
table of function bindings, and an `outer` link used only for lookup. A child
never writes through `outer`; definitions always land in the scope they are
made in. Variables and functions are separate namespaces, so one name may be
bound in both at once.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from mallet import Value, NativeFn
from mallet.errors import UnboundSymbolError, FunctionNotFoundError
from mallet.types.native_fn import EvalPolicy, NativeFunction
from mallet.types.symbol import Symbol
from mallet.types.values import clone

logger = logging.getLogger(__name__)

Name = Union[Symbol, str]


def _as_symbol(name: Name) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str):
        return Symbol(name)
    raise TypeError(f"Cannot bind {name!r}: expected a symbol or a str")


class Environment:
    """Chained scope holding variable and function bindings."""

    __slots__ = ("vars", "functions", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Value] = {}
        self.functions: dict[Symbol, NativeFunction] = {}
        self.outer: Environment | None = outer

    def new_scope(self) -> Environment:
        """Create a child scope whose lookups fall back to this one."""
        return Environment(self)

    def define_variable(self, name: Name, value: Value) -> Value:
        """Bind `name` in this scope to a deep copy of `value`.

        Any earlier variable binding of `name` in this scope is replaced. Returns
        the stored value; callers handing it out again must copy it.
        """
        sym = _as_symbol(name)
        stored = clone(value)
        self.vars[sym] = stored
        logger.debug("define %s", sym)
        return stored

    def define_function(self, name: Name, policy: EvalPolicy, op: NativeFn) -> NativeFunction:
        """Register a host operation in the function namespace, replacing any prior one."""
        sym = _as_symbol(name)
        fn = NativeFunction(sym.id, policy, op)
        self.functions[sym] = fn
        return fn

    def find(self, name: Name) -> Optional[Environment]:
        """Find the nearest scope in the chain with a variable binding for `name`."""
        sym = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if sym in env.vars:
                return env
            env = env.outer
        return None

    def find_function(self, name: Name) -> Optional[NativeFunction]:
        """Return the nearest function binding for `name`, or None."""
        sym = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            fn = env.functions.get(sym)
            if fn is not None:
                return fn
            env = env.outer
        return None

    def lookup_variable(self, name: Name) -> Value:
        """Look up the value bound to `name`, searching outward.

        Raises UnboundSymbolError if no scope in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(f"unbound variable '{name}'")
        return env.vars[_as_symbol(name)]

    def lookup_function(self, name: Name) -> NativeFunction:
        """Look up the function bound to `name`, searching outward.

        Raises FunctionNotFoundError if no scope in the chain binds it.
        """
        fn = self.find_function(name)
        if fn is None:
            raise FunctionNotFoundError(f"function '{name}' not found")
        return fn

    def depth(self) -> int:
        """Number of scopes above this one."""
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

