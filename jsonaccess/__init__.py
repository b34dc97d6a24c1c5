"""
jsonaccess - JSON parsing into immutable values with failure-tolerant accessors.

jsonaccess turns JSON text into a tree of immutable JSONValue nodes and offers
typed readers that never raise on a type mismatch, so documents of unknown or
partially known shape can be walked without exception handling.

Quick Start:
    import jsonaccess as ja

    doc = ja.parse('{"name": "ada", "tags": ["x", "y"], "admin": false}')
    name = ja.js_str(lambda v: "anonymous", ja.js_get("name", doc))
    tags = [ja.js_str(lambda v: "", t) for t in ja.js_list(ja.js_get("tags", doc))]
    admin = ja.js_true(ja.js_get("admin", doc))   # False
    ja.is_defined(ja.js_true(ja.js_get("missing", doc)))   # False

    # Programmatic construction
    value = ja.js_of_obj({"n": ja.js_of_num(1), "ok": ja.js_of_bool(True)})
    text = ja.dumps(value)

Errors:
    Malformed input raises InvalidJSONError (a ValueError) with a message such as
    "Unexpected end of JSON data" or "Garbage after JSON data (x)".
"""

from .core.accessors import (
    UNDEFINED_BOOL, UndefinedBoolean, is_defined, js_get, js_is_null, js_keys,
    js_list, js_num, js_str, js_true,
)
from .core.constructors import (
    from_native, js_null, js_of_bool, js_of_list, js_of_num, js_of_obj, js_of_str,
)
from .core.engine import load, loads, parse
from .core.serializer import dump, dumps, to_native
from .core.values import JS_NULL, JSONValue, ValueKind, Variant, js_value
from .security.exceptions import InvalidJSONError, JsonAccessError, SecurityError
from .utils.config import ParseConfig, ParseLimits, SizeLimits, StructureLimits

__version__ = "0.1.0"
__author__ = "jsonaccess contributors"

__all__ = [
    # Parsing and serialization
    "parse", "loads", "load", "dumps", "dump",
    # Value model
    "JSONValue", "ValueKind", "Variant", "JS_NULL", "js_value",
    # Accessors
    "js_str", "js_num", "js_true", "js_list", "js_get", "js_keys", "js_is_null",
    "is_defined", "UNDEFINED_BOOL", "UndefinedBoolean",
    # Constructors and conversion
    "js_of_str", "js_of_num", "js_of_bool", "js_of_list", "js_of_obj", "js_null",
    "from_native", "to_native",
    # Configuration
    "ParseConfig", "ParseLimits", "SizeLimits", "StructureLimits",
    # Exception classes
    "JsonAccessError", "InvalidJSONError", "SecurityError",
]
