from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

DEFAULT_PROMPT = "user> "
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def paths_from_env(var: str, defaults: Iterable[Path] = ()) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prompt() -> str:
    return os.environ.get("EMBER_PROMPT", DEFAULT_PROMPT)


def get_prelude_paths() -> List[Path]:
    # Source files evaluated by every Interpreter created with prelude='auto'
    return paths_from_env("EMBER_PRELUDE_PATH")


def get_log_level() -> str:
    return os.environ.get("EMBER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get("EMBER_RECURSION_LIMIT")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"EMBER_RECURSION_LIMIT must be an integer, got {raw!r}") from None


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from `level` or EMBER_LOG_LEVEL."""
    logging.basicConfig(level=(level or get_log_level()).upper(), format=LOG_FORMAT)
