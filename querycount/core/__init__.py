# querycount/core/__init__.py

from .config import AppConfig, get_app_configuration, reset_app_configuration
from .exceptions import QueryCountError, UnsupportedOperationError, ConfigurationError
from .logging_setup import get_logger, get_console, reset_logging

__all__ = [
    "AppConfig",
    "get_app_configuration",
    "reset_app_configuration",
    "QueryCountError",
    "UnsupportedOperationError",
    "ConfigurationError",
    "get_logger",
    "get_console",
    "reset_logging"
]
