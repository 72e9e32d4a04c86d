from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberArityError, EmberExpectedSymbol
from ember.types.environment import Environment
from ember.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name expr)
    Binds in the current frame, never in an ancestor, and returns the bound value.
    """
    if len(tail) != 2:
        raise EmberArityError("def! requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise EmberExpectedSymbol(name)
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
