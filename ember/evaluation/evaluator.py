"""Core evaluator and trampoline for the Ember interpreter.

`evaluate` loops over a current (expression, environment) pair. Special forms
and closure application return either a final value or a TailCall; a TailCall
replaces the pair and the loop continues, so calls in tail position never grow
the Python stack.
"""

from __future__ import annotations

from ember import SExpression, LispValue
from ember.errors import EmberEmptyListError
from ember.evaluation.apply import apply
from ember.evaluation.special_forms import SPECIAL_FORMS
from ember.types.environment import Environment
from ember.types.symbol import Symbol
from ember.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    while True:
        match expr:
            case Symbol():
                return env.lookup(expr)
            case []:
                raise EmberEmptyListError("Cannot evaluate an empty list")
            case [head, *tail]:
                form = SPECIAL_FORMS.get(head) if isinstance(head, Symbol) else None
                if form is not None:
                    result = form(tail, env, evaluate)
                else:
                    fn = evaluate(head, env)
                    args = [evaluate(arg, env) for arg in tail]
                    result = apply(fn, args)
                if isinstance(result, TailCall):
                    expr, env = result.expr, result.env
                    continue
                return result
            case _:
                # Integers, booleans, strings, nil, closures, builtins and atoms
                return expr


def call_function(fn: LispValue, args: list[LispValue]) -> LispValue:
    """Apply `fn` to `args` and run the body to completion (not a tail call)."""
    result = apply(fn, args)
    if isinstance(result, TailCall):
        return evaluate(result.expr, result.env)
    return result
