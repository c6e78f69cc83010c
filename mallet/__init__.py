# Core type aliases for Mallet's data model.
# Atoms use plain Python types where one fits (int, float, str, bool) and small
# wrapper classes where one does not (Symbol, Keyword, Nil, Error). Containers
# are List, Vector and Hashmap from mallet.types.values.
#
# Naming guidance:
# - Value:       any member of the tagged value model (forms and results alike).
# - EvaluatorFn: the evaluator, handed to special forms so they can evaluate
#                their unevaluated arguments on demand.
# - NativeFn:    the host implementation behind a function binding.

from typing import Any, Callable

Value = Any

EvaluatorFn = Callable[..., Value]

# (env, args, evaluate_fn) -> Value
NativeFn = Callable[..., Value]
