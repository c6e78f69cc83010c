from mallet.types.symbol import Symbol, Keyword
from mallet.types.nil import Nil, EOF
from mallet.types.values import List, Vector, Hashmap, Error, clone, type_name
from mallet.types.native_fn import EvaluateAll, EvaluateSuffix, EVALUATE_ALL, NativeFunction
from mallet.types.environment import Environment

__all__ = [
    "Symbol",
    "Keyword",
    "Nil",
    "EOF",
    "List",
    "Vector",
    "Hashmap",
    "Error",
    "clone",
    "type_name",
    "EvaluateAll",
    "EvaluateSuffix",
    "EVALUATE_ALL",
    "NativeFunction",
    "Environment",
]
