# querycount/tests/conftest.py

import pytest

from querycount.core.config import reset_app_configuration
from querycount.core.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from QUERYCOUNT_* variables and cached config/logger state."""
    for name in ("QUERYCOUNT_LOG_LEVEL", "QUERYCOUNT_LOG_FILE", "QUERYCOUNT_TRACE_EMISSIONS"):
        monkeypatch.delenv(name, raising=False)
    reset_app_configuration()
    reset_logging()
    yield
    reset_app_configuration()
    reset_logging()
