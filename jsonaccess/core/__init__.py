"""
jsonaccess Core Parsing Engine.

This module provides tokenizing, parsing and the JSON value model.
"""

from .engine import Parser, TokenCursor, parse
from .tokenizer import Lexer, Position, Token, TokenType
from .values import JS_NULL, JSONValue, ValueKind, Variant, js_value

__all__ = [
    'parse', 'Parser', 'TokenCursor',
    'Lexer', 'Token', 'TokenType', 'Position',
    'JSONValue', 'ValueKind', 'Variant', 'JS_NULL', 'js_value',
]
