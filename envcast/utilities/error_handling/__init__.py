"""
Error taxonomy and error handling patterns for envcast.

Conversion failures are raised to the caller as exceptions; whether a
malformed variable should stop the program is decided at the top of the
host application, for instance with :func:`abort_on_error`.
"""

import functools
import sys
from typing import Any, Callable, Optional

from envcast.utilities.configuration.logging_config import get_logger


class ConversionError(ValueError):
    """
    A raw value could not be converted to its target type.

    Parameters
    ----------
    value : str
        The raw text that failed to convert
    target : Any
        The target type tag (anything with a ``describe()`` method, or a type)
    reason : str
        Short description of the failure
    """

    def __init__(self, value: str, target: Any, reason: str = "parse error"):
        self.value = value
        self.target = target
        self.reason = reason
        super().__init__(self._message())

    @property
    def target_name(self) -> str:
        describe = getattr(self.target, "describe", None)
        if callable(describe):
            return describe()
        return getattr(self.target, "__name__", str(self.target))

    def _message(self) -> str:
        return f"cannot convert {self.value!r} to {self.target_name}: {self.reason}"

    def summary(self) -> str:
        """The message without the raw value, safe for logs."""
        return f"value is not a valid {self.target_name}: {self.reason}"


class EnvVarError(ConversionError):
    """A present environment variable holds a value that does not convert."""

    def __init__(self, key: str, value: str, target: Any, reason: str = "parse error"):
        self.key = key
        super().__init__(value, target, reason)

    def _message(self) -> str:
        return (f"environment variable {self.key} = {self.value!r} "
                f"is not a valid {self.target_name}: {self.reason}")

    def summary(self) -> str:
        return f"environment variable {self.key} is not a valid {self.target_name}: {self.reason}"


class StandardErrorHandler:
    """
    Standardized error handler with different severity levels.
    """

    SEVERITIES = ('debug', 'info', 'warning', 'error', 'critical')

    def __init__(self):
        """Initialize with the shared logger."""
        self.logger = get_logger()

    def handle_error(self, error: Exception, context: str = "",
                     severity: str = "error", message: Optional[str] = None) -> str:
        """
        Log an error with the appropriate severity.

        Parameters
        ----------
        error : Exception
            The error that occurred
        context : str
            Context information about where error occurred
        severity : str
            Error severity level ('debug', 'info', 'warning', 'error', 'critical')
        message : str, optional
            Logged instead of ``str(error)``; the traceback is then left out
            as it repeats the error text

        Returns
        -------
        str
            The message that was logged
        """
        if severity not in self.SEVERITIES:
            raise ValueError(f"Unknown severity: {severity}")

        text = str(error) if message is None else message
        error_msg = f"{context}: {text}" if context else text

        if severity in ('error', 'critical') and message is None:
            log = self.logger.opt(exception=error)
        else:
            log = self.logger
        getattr(log, severity)(error_msg)

        return error_msg


# Global error handler instance
error_handler = StandardErrorHandler()


def abort_on_error(context: str = ""):
    """
    Decorator that turns conversion failures into a clean process exit.

    Meant for host start-up code that reads its settings: a malformed
    variable is logged as critical and the process exits with status 1
    after writing the message to stderr. Neither the log record nor the
    message carries the raw value.

    Parameters
    ----------
    context : str
        Context description for error messages

    Returns
    -------
    callable
        Decorated function
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ConversionError as e:
                error_context = context or func.__name__
                message = error_handler.handle_error(
                    e, error_context, "critical", message=e.summary()
                )
                print(f"Configuration error in {message}", file=sys.stderr)
                raise SystemExit(1) from e
        return wrapper
    return decorator
