import pytest

from bel.interpreter import Interpreter
from bel.runtime_context import RuntimeContext

# Every test runs against a clean configuration: values exported in the
# developer's shell must not change recursion limits or preludes here.
_BEL_VARS = ("BEL_RECURSION_LIMIT", "BEL_LOG_LEVEL", "BEL_HISTORY_FILE", "BEL_SOURCE_PATH")


@pytest.fixture(autouse=True)
def _clean_bel_environment(monkeypatch):
    for var in _BEL_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def interp():
    """Return a fresh interpreter for each test."""
    return Interpreter()


@pytest.fixture
def ctx():
    """Return a fresh runtime context (globals + registries) for each test."""
    return RuntimeContext()
