"""Block forms `let*` and `letrec`.

Both bind their names into one child frame and tail-evaluate the body in it:

    (let* (a 1 b (+ a 1)) b)        ; each value sees the names bound before it
    (letrec (f (fun* (n) ...)) ...) ; each value is evaluated in the new frame

Every value is evaluated in that child frame as it accumulates, so a `def!`
inside a value binds there and is visible to later values and the body.
Closures capture the frame by reference and so see every name of the block
once it is bound.
"""

from ember import EvaluatorFn
from ember import SExpression
from ember.errors import EmberArityError, EmberExpectedSymbol, EmberTypeError
from ember.types.environment import Environment
from ember.types.symbol import Symbol
from ember.types.tail_call import TailCall


def _bind_block(
    form_name: str,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if len(tail) != 2:
        raise EmberArityError(f"{form_name} requires a binding list and a body")
    bindings, body = tail
    if not isinstance(bindings, list):
        raise EmberTypeError(form_name, 1, "List", bindings)
    if len(bindings) % 2:
        raise EmberArityError(f"{form_name} bindings must come in name/value pairs")

    block_env = Environment(outer=env)
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise EmberExpectedSymbol(name)
        block_env.define(name, evaluate_fn(val_expr, block_env))
    return TailCall(body, block_env)


def let_star_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    return _bind_block("let*", tail, env, evaluate_fn)


def letrec_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    return _bind_block("letrec", tail, env, evaluate_fn)
