"""Built-in functions for the Ember runtime environment.

This module defines arithmetic, comparison, list, string, atom and I/O
helpers exposed to Lisp code, and the registration of all of them in a root
environment. Every builtin has the signature `fn(name, args)`: `name` is the
name it is registered under, used in error messages.
"""
from __future__ import annotations

import logging
from pathlib import Path

from ember import LispValue, INT_MIN, INT_MAX
from ember.debug_utils.pprint import pr_str
from ember.errors import EmberArityError, EmberArithmeticError, EmberTypeError
from ember.evaluation.evaluator import call_function
from ember.reader.parser import parse
from ember.types.atom import Atom
from ember.types.builtin import Builtin, BuiltinFn
from ember.types.closure import Closure
from ember.types.environment import Environment
from ember.types.nil import Nil
from ember.types.symbol import Symbol

logger = logging.getLogger(__name__)


# -------------------------------
# Argument helpers
# -------------------------------
def check_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise EmberArityError(f"{name} requires exactly {n} {plural}, got {len(args)}")


def is_integer(value: LispValue) -> bool:
    # bool is a subclass of int but never an Ember integer
    return isinstance(value, int) and not isinstance(value, bool)


def get_int(value: LispValue, position: int, name: str) -> int:
    if not is_integer(value):
        raise EmberTypeError(name, position, "Integer", value)
    return value


def get_str(value: LispValue, position: int, name: str) -> str:
    if not isinstance(value, str):
        raise EmberTypeError(name, position, "String", value)
    return value


def get_atom(value: LispValue, position: int, name: str) -> Atom:
    if not isinstance(value, Atom):
        raise EmberTypeError(name, position, "Atom", value)
    return value


def get_fun(value: LispValue, position: int, name: str) -> Closure | Builtin:
    if not isinstance(value, (Closure, Builtin)):
        raise EmberTypeError(name, position, "Function", value)
    return value


def int_result(name: str, n: int) -> int:
    if not INT_MIN <= n <= INT_MAX:
        raise EmberArithmeticError(f"Integer overflow in {name}")
    return n


def _binary_ints(name: str, args: list[LispValue]) -> tuple[int, int]:
    check_arity(name, args, 2)
    return get_int(args[0], 1, name), get_int(args[1], 2, name)


# -------------------------------
# Arithmetic
# -------------------------------
def add(name: str, args: list[LispValue]) -> int:
    a, b = _binary_ints(name, args)
    return int_result(name, a + b)


def sub(name: str, args: list[LispValue]) -> int:
    a, b = _binary_ints(name, args)
    return int_result(name, a - b)


def mul(name: str, args: list[LispValue]) -> int:
    a, b = _binary_ints(name, args)
    return int_result(name, a * b)


def div(name: str, args: list[LispValue]) -> int:
    """Integer division truncating toward zero: (/ -7 2) is -3."""
    a, b = _binary_ints(name, args)
    if b == 0:
        raise EmberArithmeticError(f"Division by zero in {name}")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return int_result(name, q)


# -------------------------------
# Equality and comparison
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: lists element-wise, scalars by value, the rest by identity."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (Closure, Builtin, Atom)):
        return False
    return a == b


def equals(name: str, args: list[LispValue]) -> bool:
    check_arity(name, args, 2)
    return is_equal(args[0], args[1])


def lt(name: str, args: list[LispValue]) -> bool:
    """Integer ordering; any non-integer operand makes the result false."""
    check_arity(name, args, 2)
    a, b = args
    return is_integer(a) and is_integer(b) and a < b


# -------------------------------
# List operations
# -------------------------------
def list_builtin(name: str, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def is_list(name: str, args: list[LispValue]) -> bool:
    check_arity(name, args, 1)
    return isinstance(args[0], list)


def is_empty(name: str, args: list[LispValue]) -> bool:
    check_arity(name, args, 1)
    return isinstance(args[0], list) and not args[0]


def count(name: str, args: list[LispValue]) -> int:
    check_arity(name, args, 1)
    return len(args[0]) if isinstance(args[0], list) else 0


# -------------------------------
# Strings and I/O
# -------------------------------
def concat_str(name: str, args: list[LispValue]) -> str:
    return "".join(get_str(arg, i, name) for i, arg in enumerate(args, start=1))


def read_text_file(path: str | Path) -> str:
    """Read a whole file as UTF-8 text.

    OSError propagates unchanged; undecodable content is reported as an OSError too.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as ex:
        raise OSError(f"{path}: stream did not contain valid UTF-8 ({ex.reason})") from ex


def slurp(name: str, args: list[LispValue]) -> str:
    check_arity(name, args, 1)
    path = get_str(args[0], 1, name)
    logger.debug("slurp: reading %s", path)
    return read_text_file(path)


def read_str(name: str, args: list[LispValue]) -> LispValue:
    check_arity(name, args, 1)
    return parse(get_str(args[0], 1, name))


def prn(name: str, args: list[LispValue]) -> LispValue:
    check_arity(name, args, 1)
    print(pr_str(args[0], readably=False))
    return Nil


# -------------------------------
# Atoms
# -------------------------------
def atom(name: str, args: list[LispValue]) -> Atom:
    check_arity(name, args, 1)
    return Atom(args[0])


def is_atom(name: str, args: list[LispValue]) -> bool:
    check_arity(name, args, 1)
    return isinstance(args[0], Atom)


def deref(name: str, args: list[LispValue]) -> LispValue:
    check_arity(name, args, 1)
    return get_atom(args[0], 1, name).deref()


def reset(name: str, args: list[LispValue]) -> LispValue:
    """(reset! atom value) stores and returns `value`."""
    check_arity(name, args, 2)
    return get_atom(args[0], 1, name).reset(args[1])


def swap(name: str, args: list[LispValue]) -> Atom:
    """(swap! atom f) stores (f current) and returns the atom.

    `f` runs as a full nested evaluation, not as a tail call.
    """
    check_arity(name, args, 2)
    cell = get_atom(args[0], 1, name)
    fn = get_fun(args[1], 2, name)
    return cell.swap(lambda current: call_function(fn, [current]))


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    "list": list_builtin,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
    "str": concat_str,
    "slurp": slurp,
    "read-str": read_str,
    "prn": prn,
    "atom": atom,
    "atom?": is_atom,
    "deref": deref,
    "reset!": reset,
    "swap!": swap,
}


def register(env: Environment, builtins: dict[str, BuiltinFn] | None = None) -> None:
    """Bind every builtin, wrapped with its own name, in `env`."""
    table = BUILTINS if builtins is None else builtins
    env.update({Symbol(name): Builtin(name, fn) for name, fn in table.items()})


def create_root_env() -> Environment:
    """Return a fresh parentless environment holding every builtin."""
    env = Environment()
    register(env)
    return env
