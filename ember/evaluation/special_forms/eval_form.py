from ember import EvaluatorFn
from ember import SExpression
from ember.errors import EmberArityError
from ember.types.environment import Environment
from ember.types.tail_call import TailCall


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (eval expr)
    `expr` is evaluated in the current frame; the resulting value is then
    evaluated again in the root environment, not the lexical one.
    """
    if len(tail) != 1:
        raise EmberArityError("eval expects exactly one argument")
    expr_to_eval = evaluate_fn(tail[0], env)
    return TailCall(expr_to_eval, env.root())
