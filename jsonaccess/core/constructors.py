"""
Constructors building JSONValue nodes from native Python values.
"""

import math
from typing import Any, Iterable, Mapping, Optional

from .values import JS_NULL, JSONValue, ValueKind, make_object


def js_of_str(text: str) -> JSONValue:
    """Wrap a string."""
    return JSONValue(ValueKind.STRING, str(text))


def js_of_num(number: float) -> JSONValue:
    """Wrap a number; it is stored as a float.

    Raises:
        ValueError: for infinities and NaN, which JSON text cannot express
    """
    number = float(number)
    if not math.isfinite(number):
        raise ValueError(f"JSON numbers must be finite, got {number!r}")
    return JSONValue(ValueKind.NUMBER, number)


def js_of_bool(flag: bool) -> JSONValue:
    """Wrap a boolean."""
    return JSONValue(ValueKind.BOOLEAN, bool(flag))


def js_of_list(seq: Optional[Iterable[JSONValue]] = None) -> JSONValue:
    """Wrap a sequence of values as an array. ``None`` gives an empty array."""
    return JSONValue(ValueKind.ARRAY, tuple(seq) if seq is not None else ())


def js_of_obj(mapping: Mapping[str, JSONValue]) -> JSONValue:
    """Wrap a string-keyed mapping of values as an object.

    Raises:
        TypeError: for a non-string key
    """
    for key in mapping:
        if not isinstance(key, str):
            raise TypeError(f"object keys must be str, not {type(key).__name__}")
    return make_object(mapping)


def js_null() -> JSONValue:
    """Return the null value."""
    return JS_NULL


def from_native(obj: Any) -> JSONValue:
    """Build a value tree from plain Python data.

    Accepts None, bool, int, float, str, list/tuple and dicts with string
    keys, recursively.

    Raises:
        TypeError: for any other type or a non-string object key
        ValueError: for an infinite or NaN float
    """
    if obj is None:
        return JS_NULL
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return js_of_bool(obj)
    if isinstance(obj, (int, float)):
        return js_of_num(obj)
    if isinstance(obj, str):
        return js_of_str(obj)
    if isinstance(obj, JSONValue):
        return obj
    if isinstance(obj, (list, tuple)):
        return js_of_list(from_native(item) for item in obj)
    if isinstance(obj, dict):
        return js_of_obj({key: from_native(value) for key, value in obj.items()})
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON convertible")
