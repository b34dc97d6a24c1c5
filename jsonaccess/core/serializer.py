"""
Conversion of JSONValue trees back to native data and JSON text.

Text output delegates to the standard json module; this module only maps the
value tree onto the plain Python types json understands.
"""

import json
import math
from typing import Any, TextIO

from .values import JSONValue, ValueKind

# Integral floats up to this magnitude are written without a fraction.
_EXACT_INT_LIMIT = 2 ** 53


def to_native(v: JSONValue) -> Any:
    """Convert ``v`` to dict/list/str/float/bool/None, recursively."""
    kind = v.kind
    if kind == ValueKind.OBJECT:
        return {key: to_native(member) for key, member in v.payload.items()}
    if kind == ValueKind.ARRAY:
        return [to_native(item) for item in v.payload]
    return v.payload


def _to_serializable(v: JSONValue) -> Any:
    kind = v.kind
    if kind == ValueKind.OBJECT:
        return {key: _to_serializable(member) for key, member in v.payload.items()}
    if kind == ValueKind.ARRAY:
        return [_to_serializable(item) for item in v.payload]
    if kind == ValueKind.NUMBER:
        number = v.payload
        if math.isfinite(number) and number.is_integer() and abs(number) <= _EXACT_INT_LIMIT:
            return int(number)
        return number
    return v.payload


def dumps(v: JSONValue, **kw: Any) -> str:
    """Serialize ``v`` to JSON text.

    Keyword arguments are passed through to json.dumps (indent, sort_keys...).
    Non-finite numbers raise ValueError unless ``allow_nan=True`` is given.
    """
    kw.setdefault("allow_nan", False)
    return json.dumps(_to_serializable(v), **kw)


def dump(v: JSONValue, fp: TextIO, **kw: Any) -> None:
    """Serialize ``v`` as JSON text to a file-like object."""
    kw.setdefault("allow_nan", False)
    json.dump(_to_serializable(v), fp, **kw)
