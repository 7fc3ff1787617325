"""
gitz - configuration loading and migration for the git-z commit wizard.

The package reads ``git-z.toml``, recognises which schema version wrote it and
rewrites stale configurations into the current schema while keeping the
user's comments and formatting.

Logging goes through Loguru. Importing the package installs a console sink
whose level comes from the ``GITZ_LOG_LEVEL`` environment variable, except
under pytest where tests configure sinks themselves.
"""

__version__ = "0.3.0"

import os
import sys
from pathlib import Path
from typing import Dict, Optional, TextIO, Union

from loguru import logger

LOG_LEVEL_ENV_VAR = "GITZ_LOG_LEVEL"
DEFAULT_CONSOLE_LEVEL = "WARNING"


# --- Logger Configuration Classes ---

class LoggingConfigError(Exception):
    """Raised when a logging sink cannot be configured."""


class LoggerState:
    """
    Tracks which Loguru sinks this package installed.

    Keeping the sink IDs lets tests and embedding applications remove exactly
    what gitz added without touching sinks configured elsewhere.
    """

    def __init__(self):
        self._initialized = False
        self._sink_ids = []

    def is_initialized(self) -> bool:
        """Check if logger has been initialized."""
        return self._initialized

    def mark_initialized(self):
        self._initialized = True

    def add_sink_id(self, sink_id: int):
        """Track sink IDs for cleanup."""
        self._sink_ids.append(sink_id)

    @property
    def sink_ids(self):
        return tuple(self._sink_ids)

    def reset(self):
        """Forget every tracked sink."""
        self._initialized = False
        self._sink_ids.clear()


_logger_state = LoggerState()


def validate_log_level(level: str) -> str:
    """
    Validate a Loguru level name.

    Args:
        level: Log level name, case insensitive

    Returns:
        The upper-cased level name

    Raises:
        LoggingConfigError: If the level is not a Loguru level
    """
    valid_levels = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
    level_upper = level.upper()

    if level_upper not in valid_levels:
        raise LoggingConfigError(
            f"Invalid log level '{level}'. Must be one of: {', '.join(sorted(valid_levels))}"
        )

    return level_upper


def configure_console_logging(
    level: str = DEFAULT_CONSOLE_LEVEL,
    format_template: Optional[str] = None,
    colorize: bool = True,
    destination: TextIO = sys.stderr,
) -> int:
    """
    Add a console sink.

    Args:
        level: Minimum level written to the console
        format_template: Custom Loguru format (a compact default is used if None)
        colorize: Enable colored output
        destination: Stream to write to

    Returns:
        The Loguru sink ID

    Raises:
        LoggingConfigError: If the sink cannot be added
    """
    validated_level = validate_log_level(level)

    if format_template is None:
        format_template = "<level>{level: <8}</level> | <level>{message}</level>"

    try:
        sink_id = logger.add(
            destination,
            level=validated_level,
            format=format_template,
            colorize=colorize,
        )
    except (TypeError, ValueError) as e:
        raise LoggingConfigError(f"Failed to configure console logging: {e}") from e

    _logger_state.add_sink_id(sink_id)
    return sink_id


def configure_file_logging(
    log_file_path: Union[str, Path],
    level: str = "DEBUG",
    rotation: str = "1 MB",
    retention: str = "7 days",
    encoding: str = "utf-8",
) -> int:
    """
    Add a rotating file sink, creating the parent directory if needed.

    Args:
        log_file_path: Path of the log file
        level: Minimum level written to the file
        rotation: Loguru rotation setting
        retention: Loguru retention setting
        encoding: File encoding

    Returns:
        The Loguru sink ID

    Raises:
        LoggingConfigError: If the directory or the sink cannot be created
    """
    validated_level = validate_log_level(level)
    path = Path(log_file_path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise LoggingConfigError(
            f"Cannot create directory for log destination '{log_file_path}': {e}"
        ) from e

    try:
        sink_id = logger.add(
            str(path),
            level=validated_level,
            rotation=rotation,
            retention=retention,
            encoding=encoding,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        )
    except (TypeError, ValueError) as e:
        raise LoggingConfigError(f"Failed to configure file logging: {e}") from e

    _logger_state.add_sink_id(sink_id)
    return sink_id


def reset_logging():
    """Remove every sink gitz installed and forget the logger state."""
    for sink_id in _logger_state.sink_ids:
        try:
            logger.remove(sink_id)
        except ValueError:
            # Already removed by someone calling logger.remove() directly.
            pass
    _logger_state.reset()


def initialize_logging(level: Optional[str] = None) -> Dict[str, int]:
    """
    Replace Loguru's default sink with the gitz console sink.

    Args:
        level: Console level; read from ``GITZ_LOG_LEVEL`` when None

    Returns:
        Dictionary mapping sink types to sink IDs
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_CONSOLE_LEVEL)

    logger.remove()
    _logger_state.reset()

    sink_ids = {"console": configure_console_logging(level=level)}
    _logger_state.mark_initialized()
    return sink_ids


def get_logger_state() -> LoggerState:
    return _logger_state


def _is_pytest_running() -> bool:
    return "pytest" in sys.modules or "PYTEST_CURRENT_TEST" in os.environ


def _auto_initialize_logging():
    if _logger_state.is_initialized() or _is_pytest_running():
        return
    try:
        initialize_logging()
    except LoggingConfigError as e:
        logger.remove()
        logger.add(sys.stderr, level=DEFAULT_CONSOLE_LEVEL)
        logger.warning(f"{e}. Falling back to {DEFAULT_CONSOLE_LEVEL} console logging.")
        _logger_state.mark_initialized()


_auto_initialize_logging()
