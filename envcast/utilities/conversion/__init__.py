"""
Typed conversion of raw strings.

Dispatches on a target type tag: scalar conversions live in
``primitives``, arrays and inline tables in ``structured``.
"""

from envcast.utilities.conversion.literal import parse_literal
from envcast.utilities.conversion.targets import (
    TargetType,
    WIDTH_ALIASES,
    as_target,
    infer_target,
    target_for
)
from envcast.utilities.conversion.primitives import (
    TRUTHY_VALUES,
    convert_scalar,
    is_truthy,
    to_bool
)
from envcast.utilities.conversion.structured import (
    coerce_node,
    convert,
    render_scalar,
    to_dict,
    to_list
)


__all__ = [
    'parse_literal',
    'TargetType',
    'WIDTH_ALIASES',
    'as_target',
    'infer_target',
    'target_for',
    'TRUTHY_VALUES',
    'convert_scalar',
    'is_truthy',
    'to_bool',
    'coerce_node',
    'convert',
    'render_scalar',
    'to_dict',
    'to_list'
]
