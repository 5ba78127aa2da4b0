import pytest

from arith_tree.environment import VariableEnvironment, reset_global_environment
from arith_tree.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def reset_global_state():
    """Fresh logger and global environment for every test"""
    configure_logging(LogLevel.MODERATE)
    reset_global_environment()
    yield
    reset_global_environment()
    configure_logging(LogLevel.MODERATE)


@pytest.fixture
def env():
    return VariableEnvironment()


@pytest.fixture
def diagnostics(caplog):
    """Returns a callable listing (kind, message) for each diagnostic logged so far"""
    def _collect():
        return [
            (record.diagnostic_kind, record.getMessage())
            for record in caplog.records
            if hasattr(record, 'diagnostic_kind')
        ]
    return _collect
