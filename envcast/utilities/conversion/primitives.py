"""
Scalar conversions.

Turns a raw string into a single value of the target type: strings pass
through, booleans follow a loose truthiness rule, numbers use Python's
own parsers (checked against numpy's bounds for fixed-width types) and
dates/times use TOML date/time literals.
"""

from typing import Any, Optional

import numpy as np

from envcast.utilities.conversion.literal import parse_literal
from envcast.utilities.conversion.targets import (
    DATE_TIME_TYPES,
    TargetType,
    as_target,
    is_numpy_floating,
    is_numpy_integer,
)
from envcast.utilities.error_handling import ConversionError

TRUTHY_VALUES = (
    "true", "t", "1", "yes", "y", "ok", "enable", "enabled", "active", "on",
)


def to_bool(value: str) -> bool:
    """
    Interpret a string as a boolean. Never fails.

    Any value outside the truthy set, garbage included, is False.
    """
    return value.strip().lower() in TRUTHY_VALUES


def is_truthy(value: Optional[str]) -> bool:
    if not value:
        return False
    return to_bool(value)


def _parse_int(value: str, target: TargetType) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConversionError(value, target) from None


def _parse_float(value: str, target: TargetType) -> float:
    try:
        return float(value)
    except ValueError:
        raise ConversionError(value, target) from None


def _to_fixed_int(value: str, target: TargetType) -> Any:
    number = _parse_int(value, target)
    info = np.iinfo(target.python_type)
    if not info.min <= number <= info.max:
        raise ConversionError(value, target, f"out of range [{info.min}, {info.max}]")
    return target.python_type(number)


def _to_fixed_float(value: str, target: TargetType) -> Any:
    number = _parse_float(value, target)
    # Values beyond the width's range become inf
    with np.errstate(over='ignore'):
        return target.python_type(number)


def _to_date_time(value: str, target: TargetType) -> Any:
    try:
        parsed = parse_literal(value.strip())
    except ValueError:
        raise ConversionError(value, target, "expected a TOML date/time literal") from None
    if type(parsed) is not target.python_type:
        raise ConversionError(value, target, "expected a TOML date/time literal")
    return parsed


def convert_scalar(value: str, target: Any) -> Any:
    """
    Convert a raw string to a scalar target type.

    Parameters
    ----------
    value : str
        The raw text
    target : TargetType or type hint
        The scalar target

    Returns
    -------
    Any
        A value whose type is exactly ``target.python_type``

    Raises
    ------
    ConversionError
        If the text does not parse as the target type
    """
    target = as_target(target)
    python_type = target.python_type

    if target.is_collection:
        raise TypeError(f"{target.describe()} is not a scalar target")
    if python_type is str:
        return value
    if python_type is bool:
        return to_bool(value)
    if python_type is int:
        return _parse_int(value, target)
    if python_type is float:
        return _parse_float(value, target)
    if is_numpy_integer(python_type):
        return _to_fixed_int(value, target)
    if is_numpy_floating(python_type):
        return _to_fixed_float(value, target)
    if python_type in DATE_TIME_TYPES:
        return _to_date_time(value, target)

    raise TypeError(f"Unsupported scalar target: {target.describe()}")
