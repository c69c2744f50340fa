"""
Structured conversions.

Sequences and string-keyed mappings are parsed from TOML literals and then
coerced element by element. Scalar elements are rendered back to text and
go through the same rules as top-level scalars, so ``[1, 2]`` becomes a
``list[float]`` as readily as a ``list[int]``. Quoted strings stay strings:
``["1"]`` is not a ``list[int]``.

Errors name the failing element by position and TOML type, never by its
text, so they are safe to log.
"""

from typing import Any

from envcast.utilities.conversion.literal import parse_literal
from envcast.utilities.conversion.primitives import convert_scalar
from envcast.utilities.conversion.targets import (
    DATE_TIME_TYPES,
    TargetType,
    as_target,
)
from envcast.utilities.error_handling import ConversionError


def render_scalar(node: Any) -> str:
    """Textual form of a parsed TOML scalar, as it would be written in a variable."""
    if isinstance(node, bool):
        return "true" if node else "false"
    if isinstance(node, str):
        return node
    if isinstance(node, (int, float)):
        return repr(node)
    if isinstance(node, DATE_TIME_TYPES):
        return node.isoformat()
    raise TypeError(f"Not a scalar: {node!r}")


def _node_kind(node: Any) -> str:
    """TOML name of a parsed node's type."""
    if isinstance(node, bool):
        return "boolean"
    if isinstance(node, str):
        return "string"
    if isinstance(node, int):
        return "integer"
    if isinstance(node, float):
        return "float"
    if isinstance(node, list):
        return "array"
    if isinstance(node, dict):
        return "inline table"
    return type(node).__name__


def _element_error(node: Any, target: TargetType, path: str, detail: str = "") -> ConversionError:
    # The reason names position and kind only; the element text stays in ``value``
    reason = f"element {path} ({_node_kind(node)}) is not a valid {target.describe()}"
    if detail:
        reason = f"{reason}: {detail}"
    text = str(node) if isinstance(node, (list, dict)) else render_scalar(node)
    return ConversionError(text, target, reason)


def coerce_node(node: Any, target: TargetType, path: str = "") -> Any:
    """
    Coerce one node of a parsed value tree to ``target``.

    Nested arrays and tables are only accepted where the target is itself
    a collection. Quoted strings only feed ``str`` and ``bool`` targets;
    ``["1"]`` is never read as a number.

    Parameters
    ----------
    node : Any
        Node of the ``tomli`` value tree
    target : TargetType
        Target tag for this node
    path : str
        Position of the node, e.g. ``[2]`` or ``web[0]``, used in errors
    """
    if target.is_sequence:
        if not isinstance(node, list):
            raise _element_error(node, target, path, "expected an array")
        return [coerce_node(item, target.item, f"{path}[{i}]") for i, item in enumerate(node)]

    if target.is_mapping:
        if not isinstance(node, dict):
            raise _element_error(node, target, path, "expected an inline table")
        return {
            key: coerce_node(item, target.item, f"{path}.{key}" if path else key)
            for key, item in node.items()
        }

    if isinstance(node, (list, dict)):
        raise _element_error(node, target, path, "nested values are not supported here")

    if isinstance(node, str) and target.python_type not in (str, bool):
        raise _element_error(node, target, path, "quoted strings are not converted")

    if target.python_type in DATE_TIME_TYPES:
        if type(node) is not target.python_type:
            raise _element_error(node, target, path, "expected a TOML date/time literal")
        return node

    try:
        return convert_scalar(render_scalar(node), target)
    except ConversionError as e:
        raise _element_error(node, target, path, e.reason) from e


def _convert_collection(value: str, target: TargetType, container: type, shape: str) -> Any:
    try:
        tree = parse_literal(value)
    except ValueError as e:
        raise ConversionError(value, target, f"invalid TOML literal ({e})") from e

    if not isinstance(tree, container):
        raise ConversionError(value, target, f"expected {shape}")

    try:
        return coerce_node(tree, target)
    except ConversionError as e:
        raise ConversionError(value, target, e.reason) from e


def to_list(value: str, item_type: Any = str) -> list:
    """
    Parse a TOML array into a list.

    Parameters
    ----------
    value : str
        Array literal, e.g. ``[8081, 8082]`` or ``["a.proxy.com:8000"]``
    item_type : type hint or TargetType
        Element type

    Returns
    -------
    list
        Elements in the order written, duplicates kept
    """
    target = TargetType(list, as_target(item_type))
    return _convert_collection(value, target, list, "an array such as [1, 2, 3]")


def to_dict(value: str, item_type: Any = str) -> dict:
    """
    Parse a TOML inline table into a dict with string keys.

    Parameters
    ----------
    value : str
        Inline table literal, e.g. ``{ connect = 5.0, request = 10.0 }``
    item_type : type hint or TargetType
        Value type

    Returns
    -------
    dict
        Keys as written; a repeated key is a conversion error
    """
    target = TargetType(dict, as_target(item_type))
    return _convert_collection(value, target, dict, "an inline table such as {a = 1}")


def convert(value: str, target: Any) -> Any:
    """
    Convert a raw string to any supported target.

    Parameters
    ----------
    value : str
        The raw text
    target : TargetType or type hint
        The target shape

    Returns
    -------
    Any
        The converted value

    Raises
    ------
    ConversionError
        If the text, or any element of it, does not convert
    """
    target = as_target(target)
    if target.is_sequence:
        return to_list(value, target.item)
    if target.is_mapping:
        return to_dict(value, target.item)
    return convert_scalar(value, target)
