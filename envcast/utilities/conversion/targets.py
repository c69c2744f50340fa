"""
Target type tags.

A target tag describes the shape a conversion must produce. It is derived
from the default value handed to :func:`envcast.resolve`, or from an
explicit type hint when the default cannot express it (an empty list, a
fixed-width integer, ``None``).
"""

import datetime
import typing
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

DATE_TIME_TYPES = (datetime.datetime, datetime.date, datetime.time)
BUILTIN_SCALAR_TYPES = (str, bool, int, float) + DATE_TIME_TYPES

_ABSTRACT_NUMPY_TYPES = (
    np.number, np.integer, np.signedinteger, np.unsignedinteger,
    np.floating, np.inexact,
)

# Names accepted as ``as_type`` strings
WIDTH_ALIASES = {
    'str': str,
    'bool': bool,
    'int': int,
    'float': float,
    'i8': np.int8,
    'i16': np.int16,
    'i32': np.int32,
    'i64': np.int64,
    'isize': np.int64,
    'u8': np.uint8,
    'u16': np.uint16,
    'u32': np.uint32,
    'u64': np.uint64,
    'usize': np.uint64,
    'f32': np.float32,
    'f64': np.float64,
}


def is_numpy_integer(python_type: type) -> bool:
    return (isinstance(python_type, type)
            and issubclass(python_type, np.integer)
            and python_type not in _ABSTRACT_NUMPY_TYPES)


def is_numpy_floating(python_type: type) -> bool:
    return (isinstance(python_type, type)
            and issubclass(python_type, np.floating)
            and python_type not in _ABSTRACT_NUMPY_TYPES)


def is_scalar_type(python_type: Any) -> bool:
    """Check whether values of this type can be converted from a single string."""
    return (python_type in BUILTIN_SCALAR_TYPES
            or is_numpy_integer(python_type)
            or is_numpy_floating(python_type))


@dataclass(frozen=True)
class TargetType:
    """
    The type a conversion must produce.

    Parameters
    ----------
    python_type : type
        The result type: a scalar type, ``list`` or ``dict``
    item : TargetType, optional
        Element tag, required for ``list`` and ``dict`` targets
    """

    python_type: type
    item: Optional['TargetType'] = None

    def __post_init__(self):
        if self.python_type in (list, dict):
            if self.item is None:
                raise TypeError(f"{self.python_type.__name__} target needs an element type")
        elif not is_scalar_type(self.python_type):
            raise TypeError(f"Unsupported target type: {self.python_type!r}")
        elif self.item is not None:
            raise TypeError(f"Scalar target {self.python_type.__name__} takes no element type")

    @property
    def is_sequence(self) -> bool:
        return self.python_type is list

    @property
    def is_mapping(self) -> bool:
        return self.python_type is dict

    @property
    def is_collection(self) -> bool:
        return self.is_sequence or self.is_mapping

    def describe(self) -> str:
        """Readable name, e.g. ``list[int]`` or ``dict[str, uint8]``."""
        if self.is_sequence:
            return f"list[{self.item.describe()}]"
        if self.is_mapping:
            return f"dict[str, {self.item.describe()}]"
        return self.python_type.__name__

    def accepts(self, value: Any) -> bool:
        """Check that ``value`` is exactly of this shape, elements included."""
        if self.is_sequence:
            return type(value) is list and all(self.item.accepts(v) for v in value)
        if self.is_mapping:
            return type(value) is dict and all(
                type(k) is str and self.item.accepts(v) for k, v in value.items()
            )
        return type(value) is self.python_type


def as_target(hint: Any) -> TargetType:
    """
    Build a target tag from an explicit type hint.

    Parameters
    ----------
    hint : Any
        A ``TargetType``, a scalar type (``int``, ``numpy.uint8``), a
        generic alias (``list[int]``, ``typing.Dict[str, float]``) or a
        width alias string (``"u8"``, ``"f32"``)

    Returns
    -------
    TargetType
        The corresponding target tag
    """
    if isinstance(hint, TargetType):
        return hint

    if isinstance(hint, str):
        try:
            return TargetType(WIDTH_ALIASES[hint.strip().lower()])
        except KeyError:
            raise TypeError(f"Unknown type alias: {hint!r}") from None

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)
    if origin is list:
        if len(args) != 1:
            raise TypeError(f"List hint needs one element type: {hint!r}")
        return TargetType(list, as_target(args[0]))
    if origin is dict:
        if len(args) != 2 or args[0] is not str:
            raise TypeError(f"Mapping hint must be dict[str, T]: {hint!r}")
        return TargetType(dict, as_target(args[1]))

    if hint in (list, dict):
        raise TypeError(f"{hint.__name__} hint needs an element type, e.g. {hint.__name__}[int]")
    if not is_scalar_type(hint):
        raise TypeError(f"Unsupported type hint: {hint!r}")
    return TargetType(hint)


def infer_target(value: Any) -> TargetType:
    """
    Derive the target tag from a default value.

    Collections must be non-empty and homogeneous; mapping keys must be
    strings.
    """
    if value is None:
        raise TypeError("A None default needs an explicit as_type")

    if type(value) is list:
        if not value:
            raise TypeError("Cannot infer the element type of an empty list; pass as_type")
        return TargetType(list, _common_target(value, "list"))

    if type(value) is dict:
        if not value:
            raise TypeError("Cannot infer the value type of an empty dict; pass as_type")
        bad_keys = [k for k in value if type(k) is not str]
        if bad_keys:
            raise TypeError(f"Mapping keys must be strings, got {bad_keys!r}")
        return TargetType(dict, _common_target(value.values(), "dict"))

    if not is_scalar_type(type(value)):
        raise TypeError(f"Unsupported default type: {type(value).__name__}")
    return TargetType(type(value))


def _common_target(values, kind: str) -> TargetType:
    targets = {infer_target(v) for v in values}
    if len(targets) > 1:
        names = sorted(t.describe() for t in targets)
        raise TypeError(f"Mixed element types in {kind} default: {', '.join(names)}; pass as_type")
    return targets.pop()


def target_for(default: Any, as_type: Any = None) -> TargetType:
    """
    Resolve the target tag for a default value and optional type hint.

    Parameters
    ----------
    default : Any
        The caller's default value
    as_type : Any, optional
        Explicit type hint; see :func:`as_target`

    Returns
    -------
    TargetType
        Target tag for the conversion

    Raises
    ------
    TypeError
        If the type cannot be inferred, is unsupported, or the default
        does not match the hint
    """
    if as_type is None:
        return infer_target(default)

    target = as_target(as_type)
    if default is not None and not target.accepts(default):
        raise TypeError(f"Default {default!r} is not a {target.describe()}")
    return target
