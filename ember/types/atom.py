from __future__ import annotations

import threading
from typing import Callable

from ember import LispValue


class Atom:
    """A shared mutable cell holding one value.

    Atoms compare by identity. The lock is re-entrant so that the function
    passed to `swap` may itself deref the same atom.
    """

    __slots__ = ("value", "_lock")

    def __init__(self, value: LispValue):
        self.value = value
        self._lock = threading.RLock()

    def deref(self) -> LispValue:
        with self._lock:
            return self.value

    def reset(self, value: LispValue) -> LispValue:
        with self._lock:
            self.value = value
            return value

    def swap(self, fn: Callable[[LispValue], LispValue]) -> Atom:
        with self._lock:
            self.value = fn(self.value)
            return self

    def __repr__(self) -> str:
        return f"(atom {self.value!r})"
