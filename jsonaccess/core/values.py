"""
Value model for jsonaccess.

A JSONValue is an immutable tagged variant: a ValueKind tag plus a payload
whose Python type is fixed by the tag.

    STRING  -> str
    NUMBER  -> float
    BOOLEAN -> bool
    OBJECT  -> read-only mapping of str to JSONValue
    ARRAY   -> tuple of JSONValue
    NULL    -> None

Values are built by the parser or by the constructors in
``jsonaccess.core.constructors``; nothing mutates them afterwards, so a tree
can be shared between threads once built.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple


class ValueKind(Enum):
    """Tags for the JSON value variants."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"


@dataclass(frozen=True)
class JSONValue:
    """An immutable JSON value.

    Use the constructors rather than instantiating this class directly; they
    normalize payloads to the immutable types listed in the module docstring.
    """

    kind: ValueKind
    payload: Any = None

    def __hash__(self) -> int:
        if self.kind == ValueKind.OBJECT:
            return hash((self.kind, frozenset(self.payload.items())))
        return hash((self.kind, self.payload))

    def __repr__(self) -> str:
        if self.kind == ValueKind.NULL:
            return "JSONValue(null)"
        if self.kind == ValueKind.OBJECT:
            return f"JSONValue(object, {dict(self.payload)!r})"
        return f"JSONValue({self.kind.value}, {self.payload!r})"


class Variant(NamedTuple):
    """Exhaustive projection of a JSONValue.

    ``value`` is the payload: str, float, bool, a read-only mapping, a tuple,
    or None for null.
    """

    kind: ValueKind
    value: Any


# The single null value; compare with ``is`` or js_is_null().
JS_NULL = JSONValue(ValueKind.NULL)


def make_object(mapping: Mapping[str, JSONValue]) -> JSONValue:
    """Wrap a copy of ``mapping`` as an object value."""
    return JSONValue(ValueKind.OBJECT, MappingProxyType(dict(mapping)))


def js_value(v: JSONValue) -> Variant:
    """Project ``v`` onto its variant without copying or mutating it."""
    kind = v.kind
    if kind == ValueKind.STRING:
        return Variant(ValueKind.STRING, v.payload)
    if kind == ValueKind.NUMBER:
        return Variant(ValueKind.NUMBER, v.payload)
    if kind == ValueKind.BOOLEAN:
        return Variant(ValueKind.BOOLEAN, v.payload)
    if kind == ValueKind.OBJECT:
        return Variant(ValueKind.OBJECT, v.payload)
    if kind == ValueKind.ARRAY:
        return Variant(ValueKind.ARRAY, v.payload)
    if kind == ValueKind.NULL:
        return Variant(ValueKind.NULL, None)
    raise AssertionError(f"unhandled value kind: {kind}")
