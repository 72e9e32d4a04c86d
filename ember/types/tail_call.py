from __future__ import annotations

from ember import SExpression
from ember.types.environment import Environment


class TailCall:
    """Trampoline instruction: continue the evaluation loop with `expr` in `env`."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env

    def __repr__(self) -> str:
        return f"TailCall({self.expr!r})"
