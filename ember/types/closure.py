"""User-defined function values for Ember."""

from __future__ import annotations

from io import StringIO

from ember import SExpression, LispValue
from ember.types.environment import Environment
from ember.types.symbol import Symbol


class Closure:
    """A first-class function with parameters, body, and captured environment."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env

    def __str__(self) -> str:
        from ember.debug_utils.pprint import pr_str

        with StringIO() as buffer:
            buffer.write("(fun* (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(pr_str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return "<function>"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind argument values to this closure's parameters and return the new
        frame for evaluating the body. The frame's parent is the captured
        environment, not the caller's.
        """
        return self.env.extend(self.params, args)
