from __future__ import annotations

from typing import Any


class EmberError(Exception):
    """ Base class for all Ember errors"""
    pass


# -------------------------------
# Reader errors
# -------------------------------
class EmberSyntaxError(EmberError):
    """ Raised when source text cannot be read into a value"""


class EmberUnexpectedEOF(EmberSyntaxError):
    """ Raised when the token stream ends in the middle of a form"""

    def __init__(self, expected: str | None = None):
        self.expected = expected
        if expected is None:
            super().__init__("Error: Expected any input but got EOF")
        else:
            super().__init__(f"Error: Expected '{expected}', but got EOF")


class EmberUnexpectedToken(EmberSyntaxError):
    """ Raised when a token other than the expected one is read"""

    def __init__(self, position: int, expected: str, actual: str):
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Error on position {position}: Expected '{expected}', but got '{actual}'"
        )


class EmberExpectedSymbol(EmberSyntaxError):
    """ Raised when a form needs a symbol (a name or a parameter) and gets something else"""

    def __init__(self, got: Any = None):
        self.got = got
        super().__init__("Expected symbol" if got is None else f"Expected symbol but got {got!r}")


# -------------------------------
# Evaluation errors
# -------------------------------
class EmberEvalError(EmberError):
    """ Base class for errors raised while evaluating a value"""


class EmberUnboundSymbol(EmberEvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Symbol '{name}' is undefined")


class EmberTypeError(EmberEvalError):
    """ Raised when an argument of a function or form has the wrong type"""

    def __init__(self, fn_name: str, position: int, expected: str, actual: Any):
        from ember.debug_utils.pprint import pr_str

        self.fn_name = fn_name
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Type mismatch: Expected {expected} at argument position {position} "
            f"of {fn_name} but got {pr_str(actual)}"
        )


class EmberArityError(EmberEvalError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""


class EmberCallError(EmberEvalError):
    """ Raised when a value that is not a function is called"""


class EmberEmptyListError(EmberCallError):
    """ Raised when an empty list is evaluated as a call"""


class EmberArithmeticError(EmberEvalError):
    """ Raised on division by zero or when a result leaves the 64-bit integer range"""
