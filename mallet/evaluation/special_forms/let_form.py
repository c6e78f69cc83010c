import logging

from mallet import EvaluatorFn, Value
from mallet.errors import ArityError, MalletTypeError
from mallet.types.environment import Environment
from mallet.types.symbol import Symbol
from mallet.types.values import List, Vector, type_name

logger = logging.getLogger(__name__)


def let_form(env: Environment, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """
    (let* (name expr ...) body)
    Both the binding list and the body arrive unevaluated. Each expr is evaluated
    in the child scope as it grows, so later bindings see earlier ones. The child
    scope is discarded once the body has been evaluated.
    """
    if len(args) != 2:
        raise ArityError(
            f"let* requires a binding list and one body expression, got {len(args)} argument(s)"
        )

    bindings, body = args
    if not isinstance(bindings, (List, Vector)):
        raise MalletTypeError(
            f"let* expects a list or vector of bindings, got {type_name(bindings)}"
        )
    if len(bindings) % 2 != 0:
        raise ArityError("let* binding list has an unterminated binding")

    scope = env.new_scope()
    logger.debug("enter let* scope at depth %d", scope.depth())
    try:
        for name, expr in zip(bindings[0::2], bindings[1::2]):
            if not isinstance(name, Symbol):
                raise MalletTypeError(f"let* can not bind non-symbol {type_name(name)}")
            scope.define_variable(name, evaluate_fn(expr, scope))
        return evaluate_fn(body, scope)
    finally:
        scope.vars.clear()
        logger.debug("leave let* scope at depth %d", scope.depth())
