"""
Re-evaluating accessors.

An accessor remembers a key and a default and re-reads the variable every
time it is called, so a long-lived object can follow changes to the
environment without being rebuilt. Nothing is cached.
"""

from typing import Any, Mapping, Optional

from envcast.config.core import convert_variable, read_raw
from envcast.utilities.conversion import target_for


class EnvAccessor:
    """
    Callable that looks a variable up again on every call.

    Only scalar targets are allowed, so every call hands out a value the
    caller cannot share by accident.

    Parameters
    ----------
    key : str
        Variable name
    default : Any
        Scalar default; its type is the result type
    as_type : Any, optional
        Explicit scalar type hint
    environ : Mapping[str, str], optional
        Store to read from instead of ``os.environ``
    """

    def __init__(self, key: str, default: Any, as_type: Any = None,
                 environ: Optional[Mapping[str, str]] = None):
        target = target_for(default, as_type)
        if target.is_collection:
            raise TypeError(
                f"Accessors support scalar types only, not {target.describe()}"
            )
        self.key = key
        self.default = default
        self.target = target
        self._environ = environ

    def __call__(self) -> Any:
        raw = read_raw(self.key, self._environ)
        if raw is None:
            return self.default
        return convert_variable(self.key, raw, self.target)

    def get(self) -> Any:
        """Read the current value; same as calling the accessor."""
        return self()

    def __repr__(self) -> str:
        return f"EnvAccessor({self.key!r}, {self.target.describe()}, default={self.default!r})"


def resolve_accessor(key: str, default: Any, as_type: Any = None,
                     environ: Optional[Mapping[str, str]] = None) -> EnvAccessor:
    """
    Build an accessor for ``key``.

    Returns
    -------
    EnvAccessor
        Zero-argument callable returning the current value of ``key``
        converted to the type of ``default``
    """
    return EnvAccessor(key, default, as_type=as_type, environ=environ)
