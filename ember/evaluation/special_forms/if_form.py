from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.errors import EmberArityError
from ember.types.environment import Environment
from ember.types.nil import Nil
from ember.types.tail_call import TailCall


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    if len(tail) not in (2, 3):
        raise EmberArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    # Only the literal false is falsy: nil, 0 and () all count as true
    if cond is not False:
        return TailCall(tail[1], env)
    if len(tail) == 3:
        return TailCall(tail[2], env)
    return Nil
