"""
Lookup layer - reads a variable and falls back to the default.

Conversion happens only when the variable is present. An absent variable
returns the default untouched; a present but malformed one raises
:class:`EnvVarError` and never falls back.
"""

import os
from typing import Any, Mapping, Optional

from envcast.utilities.configuration.logging_config import get_logger
from envcast.utilities.conversion import TargetType, convert, target_for
from envcast.utilities.error_handling import ConversionError, EnvVarError

logger = get_logger()


def read_raw(key: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Read the raw value of ``key``; None when it is not set."""
    store = os.environ if environ is None else environ
    return store.get(key)


def convert_variable(key: str, raw: str, target: TargetType) -> Any:
    """
    Convert the raw value of a present variable.

    Parameters
    ----------
    key : str
        Variable name, used in diagnostics
    raw : str
        The raw value
    target : TargetType
        Target tag

    Returns
    -------
    Any
        The converted value

    Raises
    ------
    EnvVarError
        If the value does not convert to the target type
    """
    try:
        value = convert(raw, target)
    except ConversionError as e:
        logger.error(f"Failed to convert {key} to {target.describe()}: {e.reason}")
        raise EnvVarError(key, raw, target, e.reason) from e

    logger.debug(f"{key} converted to {target.describe()}")
    return value


def resolve(key: str, default: Any, as_type: Any = None,
            environ: Optional[Mapping[str, str]] = None) -> Any:
    """
    Read the environment variable ``key`` as the type of ``default``.

    Parameters
    ----------
    key : str
        Variable name
    default : Any
        Value returned when the variable is not set; its type is the
        result type
    as_type : Any, optional
        Explicit type hint (``list[int]``, ``numpy.uint8``, ``"f32"``),
        needed when the default cannot express the type
    environ : Mapping[str, str], optional
        Store to read from instead of ``os.environ``

    Returns
    -------
    Any
        The converted value, or ``default`` itself when the variable is
        not set. An empty string counts as set.

    Raises
    ------
    EnvVarError
        If the variable is set but its value does not convert
    TypeError
        If the target type cannot be derived from the default and hint
    """
    raw = read_raw(key, environ)
    if raw is None:
        logger.debug(f"{key} is not set, using the default")
        return default

    target = target_for(default, as_type)
    return convert_variable(key, raw, target)
