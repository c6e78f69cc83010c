from mallet import EvaluatorFn, Value
from mallet.errors import ArityError, MalletTypeError
from mallet.types.environment import Environment
from mallet.types.symbol import Symbol
from mallet.types.values import clone, type_name


def define_form(env: Environment, args: list[Value], _: EvaluatorFn) -> Value:
    """
    (def! name value)
    `name` arrives unevaluated and `value` already evaluated. The binding is made
    in the current scope and a copy of the stored value is returned.
    """
    if len(args) != 2:
        raise ArityError(f"def! requires exactly 2 arguments, got {len(args)}")

    name, value = args
    if not isinstance(name, Symbol):
        raise MalletTypeError(f"def! expects a symbol to define, got {type_name(name)}")
    return clone(env.define_variable(name, value))
