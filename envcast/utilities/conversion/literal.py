"""
TOML literal parsing.

Structured values are written as TOML literals: arrays such as
``[8081, 8082]`` and inline tables such as ``{ root = "warn" }``. A raw
value is parsed as the right-hand side of a synthetic assignment, so any
value TOML accepts after ``=`` is understood.
"""

from typing import Any

import tomli

SYNTHETIC_KEY = "x"


def parse_literal(text: str) -> Any:
    """
    Parse a single TOML value.

    Parameters
    ----------
    text : str
        The literal, e.g. ``[1, 2, 3]`` or ``{a = 1, b = 2}``

    Returns
    -------
    Any
        The value tree: lists, dicts, str, int, float, bool and
        datetime/date/time values

    Raises
    ------
    ValueError
        If the text is not a single valid TOML value. Duplicate keys in
        an inline table are rejected here as well.
    """
    document = tomli.loads(f"{SYNTHETIC_KEY} = {text}")
    if list(document) != [SYNTHETIC_KEY]:
        raise ValueError("unexpected content after the value")
    return document[SYNTHETIC_KEY]
