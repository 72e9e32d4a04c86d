from __future__ import annotations

from typing import Callable

from ember import LispValue

BuiltinFn = Callable[[str, list[LispValue]], LispValue]


class Builtin:
    """A native function registered under `name`.

    The host callable receives its own registered name (for error messages)
    and the fully evaluated argument list.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(self.name, args)

    def __repr__(self) -> str:
        return f"<builtin:{self.name}>"
