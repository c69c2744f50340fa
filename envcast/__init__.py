"""
envcast - typed access to environment variables.

The type of the default decides the type of the result::

    from envcast import resolve

    TIMEOUT = resolve("TIMEOUT", 10)
    PORTS = resolve("PORTS", [8081, 8082, 8083])        # PORTS='[81, 82]'
    LOGLEVELS = resolve("LOGLEVELS", {"root": "info"})  # '{ root = "warn" }'

Arrays and mappings are written as TOML arrays and inline tables.
"""

__version__ = "0.1.0"

from envcast.config import (  # noqa: E402
    EnvAccessor,
    any_truthy_env,
    env_bool,
    env_dict,
    env_float,
    env_int,
    env_list,
    env_str,
    is_truthy_env,
    resolve,
    resolve_accessor
)
from envcast.utilities.conversion import (  # noqa: E402
    TRUTHY_VALUES,
    TargetType,
    convert,
    is_truthy,
    parse_literal,
    target_for,
    to_bool,
    to_dict,
    to_list
)
from envcast.utilities.error_handling import (  # noqa: E402
    ConversionError,
    EnvVarError,
    abort_on_error
)


__all__ = [
    'resolve',
    'resolve_accessor',
    'EnvAccessor',
    'TargetType',
    'target_for',
    'convert',
    'to_bool',
    'is_truthy',
    'to_list',
    'to_dict',
    'parse_literal',
    'env_str',
    'env_bool',
    'env_int',
    'env_float',
    'env_list',
    'env_dict',
    'is_truthy_env',
    'any_truthy_env',
    'ConversionError',
    'EnvVarError',
    'abort_on_error',
    'TRUTHY_VALUES',
    '__version__'
]
