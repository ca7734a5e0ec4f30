"""
Deterministic JSON serialization for rev-manifests.

Ensures that identical mappings produce identical manifest bytes
regardless of insertion order, so repeated builds diff cleanly.
"""

from __future__ import annotations

from typing import Any

import orjson


def canonical_json_dumps(obj: Any, *, indent: bool = False) -> str:
    """
    Serialize object to canonical JSON string.

    Guarantees:
    - Sorted dictionary keys
    - UTF-8 encoding
    - Normalized newlines

    Args:
        obj: Object to serialize.
        indent: If True, pretty-print with 2-space indentation.

    Returns:
        Canonical JSON string.

    Raises:
        TypeError: If ``obj`` contains values orjson cannot serialize.

    Examples:
        >>> canonical_json_dumps({"b.css": "b-2.css", "a.css": "a-1.css"})
        '{"a.css":"a-1.css","b.css":"b-2.css"}'
    """
    options = orjson.OPT_SORT_KEYS

    if indent:
        options |= orjson.OPT_INDENT_2

    result = orjson.dumps(obj, option=options)
    json_str = result.decode("utf-8")

    return json_str.replace("\r\n", "\n").replace("\r", "\n")


def canonical_json_loads(json_str: str | bytes) -> Any:
    """
    Parse JSON string.

    Raises:
        orjson.JSONDecodeError: If the input is not valid JSON.
    """
    return orjson.loads(json_str)
