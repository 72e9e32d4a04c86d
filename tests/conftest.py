import pytest

from ember.builtin.env_builtin import create_root_env
from ember.interpreter import Interpreter


@pytest.fixture
def env():
    """Fresh root environment with every builtin registered."""
    return create_root_env()


@pytest.fixture
def interp(monkeypatch):
    """Interpreter without a prelude, isolated from EMBER_* settings."""
    for var in ("EMBER_PRELUDE_PATH", "EMBER_PROMPT", "EMBER_LOG_LEVEL", "EMBER_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)
    return Interpreter(prelude=None)
