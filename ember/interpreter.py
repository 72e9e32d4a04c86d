from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from ember import LispValue
from ember.builtin.env_builtin import create_root_env, read_text_file
from ember.config import get_prelude_paths
from ember.debug_utils.pprint import pr_str
from ember.evaluation.evaluator import evaluate
from ember.reader.parser import parse, parse_all
from ember.types.environment import Environment
from ember.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Ember code against one root environment, so that
    definitions persist across calls. Each top-level form is an independent
    unit of work: an error aborts that form only.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = create_root_env()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            for path in get_prelude_paths():
                self.eval_file(path)
        elif prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the value of the last one."""
        result: LispValue = Nil
        for expr in parse_all(code):
            logger.debug("evaluating %s", pr_str(expr))
            result = evaluate(expr, self.env)
        return result

    def eval_file(self, path: str | Path) -> LispValue:
        logger.debug("loading %s", path)
        return self.eval(read_text_file(path))

    def rep(self, line: str) -> str:
        """Read one form from `line`, evaluate it, and return its printed form."""
        expr = parse(line)
        logger.debug("evaluating %s", pr_str(expr))
        return pr_str(evaluate(expr, self.env))
