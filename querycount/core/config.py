# querycount/core/config.py

import logging
from typing import Optional

from decouple import config as decouple_config
from pydantic import BaseModel, Field, field_validator, ValidationError

from .exceptions import ConfigurationError

# This module must not log during get_app_configuration's first call:
# logging_setup reads the level from here. Logging is done by the caller.

_VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppConfig(BaseModel):
    QUERYCOUNT_LOG_LEVEL: str = Field(default="INFO")
    QUERYCOUNT_LOG_FILE: Optional[str] = Field(default=None)
    QUERYCOUNT_TRACE_EMISSIONS: bool = Field(default=False)

    model_config = {"validate_assignment": True}

    @field_validator("QUERYCOUNT_LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        if value.upper() not in _VALID_LOG_LEVELS:
            raise ValueError(f"Unsupported QUERYCOUNT_LOG_LEVEL: '{value}'. Must be one of {_VALID_LOG_LEVELS}.")
        return value.upper()

    @field_validator("QUERYCOUNT_LOG_FILE")
    @classmethod
    def blank_log_file_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.QUERYCOUNT_LOG_LEVEL)

_app_config_instance: Optional[AppConfig] = None

def get_app_configuration() -> AppConfig:
    """Load, validate and cache the process-wide configuration.

    Values come from the environment or a ``.env`` file via python-decouple.
    Raises ConfigurationError if any value fails validation.
    """
    global _app_config_instance

    if _app_config_instance:
        return _app_config_instance
    try:
        _app_config_instance = AppConfig(
            QUERYCOUNT_LOG_LEVEL=decouple_config("QUERYCOUNT_LOG_LEVEL", default="INFO"),
            QUERYCOUNT_LOG_FILE=decouple_config("QUERYCOUNT_LOG_FILE", default=""),
            QUERYCOUNT_TRACE_EMISSIONS=decouple_config("QUERYCOUNT_TRACE_EMISSIONS", cast=bool, default=False),
        )
    except ValidationError as e_val:
        raise ConfigurationError(f"Configuration validation error: {e_val}") from e_val
    except ValueError as e_cast:
        # decouple raises ValueError when a cast (e.g. bool) fails
        raise ConfigurationError(f"Invalid configuration value: {e_cast}") from e_cast
    return _app_config_instance

def reset_app_configuration() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _app_config_instance
    _app_config_instance = None
