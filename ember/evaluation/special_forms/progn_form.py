from ember import EvaluatorFn
from ember import SExpression, LispValue
from ember.types.environment import Environment
from ember.types.nil import Nil
from ember.types.tail_call import TailCall


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    """(do e1 e2 ... en): all but the last for effect, the last in tail position."""
    if not tail:
        return Nil
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return TailCall(tail[-1], env)
