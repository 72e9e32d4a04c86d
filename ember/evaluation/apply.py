"""Application engine for Ember.

Centralizes what it means to call a value:
- Closures bind their parameters in a fresh frame whose parent is the captured
  environment and hand the body back to the trampoline as a TailCall.
- Builtins run immediately on the evaluated arguments.
- Anything else is an error.
"""

from __future__ import annotations

from ember import LispValue
from ember.debug_utils.pprint import pr_str
from ember.errors import EmberCallError
from ember.types.builtin import Builtin
from ember.types.closure import Closure
from ember.types.tail_call import TailCall


def apply(fn: LispValue, args: list[LispValue]) -> LispValue | TailCall:
    """Apply `fn` to already-evaluated `args`.

    Closures are not arity-checked: surplus arguments are dropped and missing
    ones leave their parameters unbound.
    """
    if isinstance(fn, Closure):
        return TailCall(fn.body, fn.extend_env(args))
    if isinstance(fn, Builtin):
        return fn(args)
    raise EmberCallError(f"Attempted to call a non-function: {pr_str(fn)}")
