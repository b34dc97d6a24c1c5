"""
Typed, non-throwing readers over JSONValue trees.

A type mismatch is an ordinary outcome when walking data of unknown shape, so
none of these functions raise on one. Three states stay distinguishable:

- a real JSON null (``js_is_null`` is true),
- absent or wrong-typed (empty list, JS_NULL from ``js_get``,
  UNDEFINED_BOOL from ``js_true``, or the caller's default),
- a defined value of the requested type.
"""

from typing import Callable, TypeVar, Union

from .values import JS_NULL, JSONValue, ValueKind

T = TypeVar("T")


class UndefinedBoolean:
    """Result of js_true() for a non-boolean value.

    Falsy, but not ``False``: use is_defined() to tell the two apart.
    """

    _instance = None

    def __new__(cls) -> "UndefinedBoolean":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED_BOOL"


UNDEFINED_BOOL = UndefinedBoolean()


def is_defined(flag: object) -> bool:
    """True unless ``flag`` is the undefined-boolean sentinel."""
    return flag is not UNDEFINED_BOOL


def js_str(default: Callable[[JSONValue], T], v: JSONValue) -> Union[str, T]:
    """Return the string in ``v``, or ``default(v)`` if it holds something else."""
    if v.kind == ValueKind.STRING:
        return v.payload
    return default(v)


def js_num(default: Callable[[JSONValue], T], v: JSONValue) -> Union[float, T]:
    """Return the number in ``v``, or ``default(v)`` if it holds something else."""
    if v.kind == ValueKind.NUMBER:
        return v.payload
    return default(v)


def js_true(v: JSONValue) -> Union[bool, UndefinedBoolean]:
    """Return the boolean in ``v``, or UNDEFINED_BOOL."""
    if v.kind == ValueKind.BOOLEAN:
        return v.payload
    return UNDEFINED_BOOL


def js_list(v: JSONValue) -> tuple[JSONValue, ...]:
    # Empty rather than a sentinel so chained list operations become no-ops.
    if v.kind == ValueKind.ARRAY:
        return v.payload
    return ()


def js_get(field: str, v: JSONValue) -> JSONValue:
    """Return the member ``field`` of object ``v``, or JS_NULL."""
    if v.kind == ValueKind.OBJECT:
        return v.payload.get(field, JS_NULL)
    return JS_NULL


def js_keys(v: JSONValue) -> list[str]:
    """Return the field names of object ``v``, or an empty list."""
    if v.kind == ValueKind.OBJECT:
        return list(v.payload)
    return []


def js_is_null(v: JSONValue) -> bool:
    return v.kind == ValueKind.NULL
