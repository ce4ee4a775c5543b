# querycount/core/logging_setup.py

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "querycount"

console_instance: Optional[Console] = None

# Global logger instance, initialized by _setup_global_logger
logger: Optional[logging.Logger] = None

def _setup_global_logger(name: str = LOGGER_NAME, level_str: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    global logger

    effective_log_level = logging.getLevelName(level_str.upper())
    if not isinstance(effective_log_level, int):
        effective_log_level = logging.INFO

    log_instance = logging.getLogger(name)

    # Already set up with the same level
    if log_instance.hasHandlers() and \
       log_instance.level == effective_log_level and \
       getattr(log_instance, '_initialized_fully', False):
        logger = log_instance
        return logger

    log_instance.setLevel(effective_log_level)
    log_instance.handlers.clear()
    log_instance.propagate = False

    rich_handler = RichHandler(
        console=get_console(),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=(effective_log_level == logging.DEBUG),
        log_time_format="[%X]",
        level=effective_log_level,
        keywords=["subscribe", "emit", "initial", "update", "complete", "ERROR"]
    )
    log_instance.addHandler(rich_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setLevel(effective_log_level)
            file_formatter = logging.Formatter(
                '%(asctime)s - %(levelname)-8s [%(name)s] | %(filename)s:%(lineno)s | %(funcName)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            log_instance.addHandler(file_handler)
            log_instance.info(f"File logging enabled at: {Path(log_file).resolve()}")
        except OSError as e_file_log:
            log_instance.error(f"Failed to set up file logger ('{log_file}'): {e_file_log}. Console logging only.")

    logger = log_instance
    setattr(logger, '_initialized_fully', True)
    logger.debug(f"Logger '{name}' initialized. Effective logging level: {logging.getLevelName(effective_log_level)}.")
    return logger

def get_logger() -> logging.Logger:
    """Returns the configured ``querycount`` logger, initializing it from AppConfig if necessary."""
    global logger
    if logger is None or not getattr(logger, '_initialized_fully', False):
        from .config import get_app_configuration
        cfg = get_app_configuration()
        # emission traces are DEBUG records
        level_str = "DEBUG" if cfg.QUERYCOUNT_TRACE_EMISSIONS else cfg.QUERYCOUNT_LOG_LEVEL
        logger = _setup_global_logger(level_str=level_str, log_file=cfg.QUERYCOUNT_LOG_FILE)
    return logger

def get_console() -> Console:
    """Returns the shared Rich console (stderr)."""
    global console_instance
    if console_instance is None:
        console_instance = Console(stderr=True, highlight=False, log_time_format="[%X]")
    return console_instance

def reset_logging() -> None:
    """Detach handlers from the ``querycount`` logger so the next get_logger() rebuilds it."""
    global logger
    log_instance = logging.getLogger(LOGGER_NAME)
    for handler in list(log_instance.handlers):
        log_instance.removeHandler(handler)
        handler.close()
    log_instance.setLevel(logging.NOTSET)
    log_instance.propagate = True
    if hasattr(log_instance, '_initialized_fully'):
        delattr(log_instance, '_initialized_fully')
    logger = None
