from __future__ import annotations

import argparse
import sys

from ember.config import configure_logging, get_recursion_limit
from ember.errors import EmberError
from ember.interpreter import Interpreter
from ember.repl import run_repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ember", description="Ember Lisp interpreter")
    parser.add_argument("file", nargs="?", help="source file to run; starts a REPL when omitted")
    parser.add_argument("--log-level", default=None, help="logging level (default: EMBER_LOG_LEVEL or WARNING)")
    parser.add_argument("--no-prelude", action="store_true", help="skip files named by EMBER_PRELUDE_PATH")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    limit = get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto')
        if args.file is None:
            run_repl(interp)
        else:
            interp.eval_file(args.file)
    except (EmberError, OSError, RecursionError) as ex:
        print(f"Error occurred: {ex}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
