"""
Typed convenience helpers over :func:`envcast.config.core.resolve`.

Each helper pins the target type in its name, so call sites read like
``env_int("WORKERS", 8)`` and a default of the wrong type is caught early.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from envcast.config.core import resolve
from envcast.utilities.conversion import TargetType, as_target, target_for


def _check_default(default: Any, expected: type, helper: str) -> None:
    if type(default) is not expected:
        raise TypeError(
            f"{helper} needs a {expected.__name__} default, got {type(default).__name__}"
        )


def env_str(key: str, default: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Read a string variable."""
    _check_default(default, str, "env_str")
    return resolve(key, default, environ=environ)


def env_bool(key: str, default: bool, environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Read a boolean variable.

    Values in the truthy set (``true``, ``yes``, ``on``, ``1`` ...) are
    True; any other value is False.
    """
    _check_default(default, bool, "env_bool")
    return resolve(key, default, environ=environ)


def env_int(key: str, default: int, environ: Optional[Mapping[str, str]] = None) -> int:
    """Read an integer variable."""
    _check_default(default, int, "env_int")
    return resolve(key, default, environ=environ)


def env_float(key: str, default: float, environ: Optional[Mapping[str, str]] = None) -> float:
    """Read a float variable."""
    _check_default(default, float, "env_float")
    return resolve(key, default, environ=environ)


def env_list(key: str, default: List[Any], item_type: Any = str,
             environ: Optional[Mapping[str, str]] = None) -> List[Any]:
    """
    Read a TOML array variable, e.g. ``PORTS='[8081, 8082]'``.

    Parameters
    ----------
    key : str
        Variable name
    default : list
        Value returned when the variable is not set
    item_type : type hint
        Element type
    environ : Mapping[str, str], optional
        Store to read from instead of ``os.environ``

    Returns
    -------
    list
        The parsed list or the default
    """
    target = target_for(default, TargetType(list, as_target(item_type)))
    return resolve(key, default, as_type=target, environ=environ)


def env_dict(key: str, default: Dict[str, Any], item_type: Any = str,
             environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Read a TOML inline table variable, e.g. ``TIMEOUTS='{ connect = 5.0 }'``.

    Parameters
    ----------
    key : str
        Variable name
    default : dict
        Value returned when the variable is not set
    item_type : type hint
        Value type
    environ : Mapping[str, str], optional
        Store to read from instead of ``os.environ``

    Returns
    -------
    dict
        The parsed mapping or the default
    """
    target = target_for(default, TargetType(dict, as_target(item_type)))
    return resolve(key, default, as_type=target, environ=environ)


def is_truthy_env(key: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when ``key`` is set to a truthy value; an unset variable is False."""
    return resolve(key, False, environ=environ)


def any_truthy_env(keys: Iterable[str], environ: Optional[Mapping[str, str]] = None) -> bool:
    """True when at least one of ``keys`` is set to a truthy value."""
    return any(is_truthy_env(k, environ=environ) for k in keys)
