"""Printed representation of Ember values.

Readable output of integers, booleans, nil and strings that contain no quote
character reads back (via `ember.parse`) to an equal value.
"""

from __future__ import annotations

from io import StringIO

from ember import LispValue
from ember.types.atom import Atom
from ember.types.builtin import Builtin
from ember.types.closure import Closure
from ember.types.nil import NilType
from ember.types.symbol import Symbol

QUOTE_CHAR = "'"


def pr_str(value: LispValue, readably: bool = True) -> str:
    """Return the printed form of `value`; strings are quoted when `readably`."""
    with StringIO() as buffer:
        _write(buffer, value, readably)
        return buffer.getvalue()


def _write(buffer: StringIO, value: LispValue, readably: bool) -> None:
    match value:
        case bool():
            buffer.write("true" if value else "false")
        case int():
            buffer.write(str(value))
        case str():
            buffer.write(f"{QUOTE_CHAR}{value}{QUOTE_CHAR}" if readably else value)
        case Symbol():
            buffer.write(value.id)
        case NilType():
            buffer.write("nil")
        case list():
            buffer.write("(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(buffer, item, readably)
            buffer.write(")")
        case Closure():
            buffer.write("<function>")
        case Builtin():
            buffer.write(f"<builtin:{value.name}>")
        case Atom():
            buffer.write("(atom ")
            _write(buffer, value.deref(), readably)
            buffer.write(")")
        case _:
            buffer.write(repr(value))
