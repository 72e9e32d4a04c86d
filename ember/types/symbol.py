"""Symbols: names read from source and used as environment keys.

The reader turns every bare token that is not an integer or one of the
literals `true`, `false` and `nil` into a Symbol. Special forms are looked up
by Symbol before any binding, so `(def! if 1)` binds a name that a call can
never reach.
"""

from __future__ import annotations
import sys


class Symbol:
    """An interned name; two Symbols are equal when their names are."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Environment frames hash every lookup key
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
