class MalletError(Exception):
    """ Base class for all Mallet errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_value(self):
        """Return the Error value that stands for this failure in the value model."""
        from mallet.types.values import Error
        return Error(self.message)


class LexError(MalletError):
    """ Raised when source text cannot be split into tokens"""


class ParseError(MalletError):
    """ Raised when tokens do not form a valid expression"""


class EvalError(MalletError):
    """ Raised when evaluation of a well-formed expression fails"""


class UnboundSymbolError(EvalError):
    """ Raised when a symbol is used before it is bound"""


class FunctionNotFoundError(EvalError):
    """ Raised when a name has no binding in the function namespace"""


class ArityError(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class MalletTypeError(EvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class DivisionByZeroError(EvalError):
    """ Raised when dividing by an argument equal to zero"""


class IntegerOverflowError(EvalError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""


class RealOverflowError(EvalError):
    """ Raised when real arithmetic produces an infinite or undefined result"""
