"""
Environment lookup with typed defaults.

This package reads environment variables and converts them to the type of
the caller's default value.
"""

from envcast.config.core import (
    convert_variable,
    read_raw,
    resolve
)
from envcast.config.accessor import (
    EnvAccessor,
    resolve_accessor
)
from envcast.config.config_utils import (
    any_truthy_env,
    env_bool,
    env_dict,
    env_float,
    env_int,
    env_list,
    env_str,
    is_truthy_env
)


__all__ = [
    'convert_variable',
    'read_raw',
    'resolve',
    'EnvAccessor',
    'resolve_accessor',
    'any_truthy_env',
    'env_bool',
    'env_dict',
    'env_float',
    'env_int',
    'env_list',
    'env_str',
    'is_truthy_env'
]
