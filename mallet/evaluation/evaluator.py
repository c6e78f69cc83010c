"""Tree-walking evaluator for Mallet.

`evaluate` never mutates the form it is given; every result is a fresh value
the caller owns. Failures raise and unwind, so partially evaluated containers
are discarded on the way out.
"""

from __future__ import annotations

import logging

from mallet import Value
from mallet.types.environment import Environment
from mallet.types.native_fn import NativeFunction
from mallet.types.symbol import Symbol
from mallet.types.values import List, Vector, Hashmap, clone

logger = logging.getLogger(__name__)


def evaluate(expr: Value, env: Environment) -> Value:
    """Evaluate `expr` in `env` and return a new value."""
    if isinstance(expr, Symbol):
        return clone(env.lookup_variable(expr))

    if isinstance(expr, List):
        if not expr:
            return List()
        head = expr[0]
        if isinstance(head, Symbol):
            fn = env.find_function(head)
            if fn is not None:
                return apply_native(fn, expr[1:], env)
        return List(evaluate(x, env) for x in expr)

    if isinstance(expr, Vector):
        return Vector(evaluate(x, env) for x in expr)

    if isinstance(expr, Hashmap):
        # Keys are literal; only values are evaluated
        return Hashmap(expr.keys, [evaluate(v, env) for v in expr.values])

    # --- Atoms evaluate to themselves ---
    return clone(expr)


def apply_native(fn: NativeFunction, arg_forms: list[Value], env: Environment) -> Value:
    """Prepare arguments according to `fn`'s policy and run its operation."""
    n_raw = fn.policy.raw_count
    args = [clone(form) for form in arg_forms[:n_raw]]
    args.extend(evaluate(form, env) for form in arg_forms[n_raw:])
    logger.debug("apply %s to %d argument(s)", fn.name, len(args))
    return fn.op(env, args, evaluate)
