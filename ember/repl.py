"""Line-oriented read-eval-print loop.

One line is one form. Results are printed readably on stdout; errors are
reported on stderr and the loop carries on with the same root environment.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ember.config import get_prompt
from ember.errors import EmberError
from ember.interpreter import Interpreter

logger = logging.getLogger(__name__)


def run_repl(
    interp: Interpreter,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
    prompt: str | None = None,
) -> None:
    prompt = get_prompt() if prompt is None else prompt
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # EOF
            stdout.write("\n")
            return
        if not line.strip():
            continue
        try:
            stdout.write(interp.rep(line) + "\n")
        except (EmberError, OSError, RecursionError) as ex:
            logger.debug("form failed: %r", line, exc_info=True)
            stderr.write(f"Error occurred: {ex}\n")
