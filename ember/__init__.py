# Core type aliases for Ember's data model.
# Plain Python types (int, bool, str, list) represent literals and lists; Symbol,
# Nil, Closure, Builtin and Atom (see ember.types) cover the rest. The same
# values are both code (forms) and runtime data.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code is data)
SExpression = LispValue

# Evaluator function type passed to special forms
EvaluatorFn = Callable[..., LispValue]

# Bounds of the 64-bit integer type
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

from ember.reader.parser import parse, parse_all  # noqa: E402
from ember.evaluation.evaluator import evaluate  # noqa: E402
from ember.builtin.env_builtin import create_root_env  # noqa: E402
from ember.debug_utils.pprint import pr_str  # noqa: E402
from ember.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "parse",
    "parse_all",
    "evaluate",
    "create_root_env",
    "pr_str",
    "Interpreter",
]
