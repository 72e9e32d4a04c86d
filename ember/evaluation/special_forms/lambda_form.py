from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberArityError, EmberExpectedSymbol, EmberTypeError
from ember.types.closure import Closure
from ember.types.environment import Environment
from ember.types.symbol import Symbol


def fun_form(
    tail: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> LispValue:
    """
    (fun* (p1 p2 ...) body)
    The body is not evaluated here; the closure captures the current frame.
    """
    if len(tail) != 2:
        raise EmberArityError("fun* requires a parameter list and a body")

    params, body = tail
    if not isinstance(params, list):
        raise EmberTypeError("fun*", 1, "List", params)
    for p in params:
        if not isinstance(p, Symbol):
            raise EmberExpectedSymbol(p)

    return Closure(list(params), body, env)
