"""
Logging configuration for envcast.

Provides the loguru-based logging setup shared by every envcast module.
"""

from envcast.utilities.configuration.logging_config import (
    LoggingConfig,
    get_logging_config,
    setup_file_logging,
    enable_logging,
    disable_logging,
    get_log_directory,
    get_logger
)


__all__ = [
    'LoggingConfig',
    'get_logging_config',
    'setup_file_logging',
    'enable_logging',
    'disable_logging',
    'get_log_directory',
    'get_logger'
]
