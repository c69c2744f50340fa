"""
Centralized logging configuration for envcast.

The package logs through loguru and is silent by default: records are only
emitted once a host application enables the ``envcast`` logger, either
directly or by adding a sink through :class:`LoggingConfig`.
"""

import pathlib
from typing import Optional, Dict, Any
from loguru import logger

PACKAGE_NAME = "envcast"

# Library code stays quiet until the host opts in
logger.disable(PACKAGE_NAME)


class LoggingConfig:
    """
    Centralized logging configuration manager.

    Adds rotating file sinks with consistent formatting, rotation and
    retention policies, and keeps track of the sinks it has added so the
    same file is never attached twice.
    """

    # Default configuration
    DEFAULT_ROTATION = "10 MB"
    DEFAULT_RETENTION = "10 days"
    DEFAULT_LEVEL = "WARNING"
    DEFAULT_LOG_DIR = "logs"
    DEFAULT_FORMAT = ("{time:YYYY-MM-DD HH:mm:ss} | {level} | "
                      "{name}:{function}:{line} | {message}")

    # Environment variables read through envcast itself
    LEVEL_VARIABLE = "ENVCAST_LOG_LEVEL"
    LOG_DIR_VARIABLE = "ENVCAST_LOG_DIR"

    def __init__(self, base_log_dir: Optional[pathlib.Path] = None):
        """
        Initialize logging configuration.

        Parameters
        ----------
        base_log_dir : pathlib.Path, optional
            Base directory for log files. If None, ``ENVCAST_LOG_DIR`` is
            consulted, falling back to ``./logs``.
        """
        if base_log_dir is None:
            self.log_dir = pathlib.Path(
                _resolve_setting(self.LOG_DIR_VARIABLE, self.DEFAULT_LOG_DIR)
            )
        else:
            self.log_dir = pathlib.Path(base_log_dir)

        # Track added handlers to avoid duplicates
        self._added_handlers: Dict[str, Any] = {}

    def default_level(self) -> str:
        """Get the sink level from ``ENVCAST_LOG_LEVEL`` or the default."""
        return _resolve_setting(self.LEVEL_VARIABLE, self.DEFAULT_LEVEL).upper()

    def setup_logger(self,
                     log_name: str,
                     level: str = None,
                     rotation: str = None,
                     retention: str = None,
                     format_string: str = None) -> int:
        """
        Set up a file sink with the specified configuration.

        Parameters
        ----------
        log_name : str
            Name of the log file (without .log extension)
        level : str, optional
            Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation : str, optional
            When to rotate log files (e.g., "10 MB", "1 day")
        retention : str, optional
            How long to keep old log files (e.g., "10 days", "1 week")
        format_string : str, optional
            Custom log format string

        Returns
        -------
        int
            The loguru handler id of the sink
        """
        level = level or self.default_level()
        rotation = rotation or self.DEFAULT_ROTATION
        retention = retention or self.DEFAULT_RETENTION
        format_string = format_string or self.DEFAULT_FORMAT

        log_file = self.log_dir / f"{log_name}.log"

        # Check if this logger is already configured
        handler_key = str(log_file)
        if handler_key in self._added_handlers:
            return self._added_handlers[handler_key]

        self.log_dir.mkdir(parents=True, exist_ok=True)

        handler_id = logger.add(
            log_file,
            rotation=rotation,
            retention=retention,
            level=level,
            format=format_string,
            filter=PACKAGE_NAME
        )

        self._added_handlers[handler_key] = handler_id
        logger.enable(PACKAGE_NAME)

        return handler_id

    def remove_logger(self, log_name: str) -> bool:
        """
        Remove a sink previously added with :meth:`setup_logger`.

        Returns
        -------
        bool
            True if a sink was removed
        """
        handler_key = str(self.log_dir / f"{log_name}.log")
        handler_id = self._added_handlers.pop(handler_key, None)
        if handler_id is None:
            return False
        logger.remove(handler_id)
        return True

    def get_log_directory(self) -> pathlib.Path:
        """Get the log directory path."""
        return self.log_dir

    def list_log_files(self) -> list[pathlib.Path]:
        """List all log files in the log directory."""
        if not self.log_dir.exists():
            return []
        return sorted(self.log_dir.glob("*.log"))


def _resolve_setting(key: str, default: str) -> str:
    # Imported here: the lookup layer logs through this module
    from envcast.config.core import resolve
    return resolve(key, default)


# Global logging configuration instance
_global_logging_config: Optional[LoggingConfig] = None


def get_logging_config() -> LoggingConfig:
    """
    Get the global logging configuration instance.

    Returns
    -------
    LoggingConfig
        The global logging configuration instance
    """
    global _global_logging_config
    if _global_logging_config is None:
        _global_logging_config = LoggingConfig()
    return _global_logging_config


def setup_file_logging(log_name: str = PACKAGE_NAME, level: str = None) -> int:
    """
    Convenience function to add the package file sink.

    Parameters
    ----------
    log_name : str
        Name of the log file (without .log extension)
    level : str, optional
        Sink level; defaults to ``ENVCAST_LOG_LEVEL`` or WARNING
    """
    config = get_logging_config()
    return config.setup_logger(log_name, level=level)


def enable_logging() -> None:
    """Let envcast records reach the sinks configured by the host."""
    logger.enable(PACKAGE_NAME)


def disable_logging() -> None:
    """Silence envcast records again."""
    logger.disable(PACKAGE_NAME)


def get_log_directory() -> pathlib.Path:
    """Get the log directory path."""
    config = get_logging_config()
    return config.get_log_directory()


def get_logger():
    """
    Get the configured logger instance.

    Returns
    -------
    loguru.Logger
        The configured logger instance
    """
    return logger
