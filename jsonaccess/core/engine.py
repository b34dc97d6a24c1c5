"""
Parser for jsonaccess - converts tokens into JSONValue trees.

Recursive descent over an eagerly built token list, one token of lookahead,
no backtracking:

    value   := object | array | string | number | "true" | "false" | "null"
    object  := "{" ( member ("," member)* )? "}"
    member  := string ":" value
    array   := "[" ( value ("," value)* )? "]"
"""

import math
from typing import NoReturn, Optional, TextIO, Union

import regex

from ..security.exceptions import InvalidJSONError, SecurityError
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig, ParseLimits
from .constants import ESCAPE_PATTERN, JSON_ESCAPE_MAP, STRING_BODY_PATTERN
from .constructors import js_of_bool, js_of_list, js_of_num, js_of_str
from .serializer import dumps
from .tokenizer import Lexer, Position, Token, TokenType
from .values import JS_NULL, JSONValue, ValueKind, make_object

_STRING_BODY_RE = regex.compile(STRING_BODY_PATTERN)
_ESCAPE_RE = regex.compile(ESCAPE_PATTERN, regex.DOTALL)


def _decode_escape(match: "regex.Match[str]") -> str:
    high, low, code, char = match.groups()
    if high is not None:
        return chr(0x10000 + ((int(high, 16) - 0xD800) << 10) + (int(low, 16) - 0xDC00))
    if code is not None:
        return chr(int(code, 16))
    return JSON_ESCAPE_MAP.get(char, char)


def unescape_string(lexeme: str) -> str:
    """Strip the quotes from a string lexeme and decode its escapes."""
    match = _STRING_BODY_RE.match(lexeme)
    body = match.group(1) if match else lexeme.strip('"')
    if "\\" not in body:
        return body
    return _ESCAPE_RE.sub(_decode_escape, body)


class TokenCursor:
    """Single-owner forward cursor over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[Token]:
        """Return the current token without consuming it, or None at the end."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        """Consume and return the current token, or None at the end."""
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def exhausted(self) -> bool:
        return self.pos >= len(self.tokens)


class Parser:
    """JSON parser that converts tokens into JSONValue trees."""

    def __init__(
        self,
        tokens: list[Token],
        validator: Optional[LimitValidator] = None,
    ):
        self._cursor = TokenCursor(tokens)
        self.validator = validator

    def _next_token(self) -> Token:
        token = self._cursor.advance()
        if token is None:
            raise InvalidJSONError.unexpected_end()
        if token.type == TokenType.INVALID:
            raise InvalidJSONError.unmatched_lexeme(token.value, token.position)
        return token

    def _raise_unexpected(self, token: Token) -> NoReturn:
        raise InvalidJSONError.unexpected_token(token.value, token.position)

    def parse_value(self) -> JSONValue:
        """Parse one value starting at the current token."""
        token = self._next_token()

        if token.type == TokenType.LBRACE:
            return self.parse_object(token.position)
        if token.type == TokenType.LBRACKET:
            return self.parse_array(token.position)
        if token.type == TokenType.STRING:
            text = unescape_string(token.value)
            if self.validator:
                self.validator.check_string(text, token.position)
            return js_of_str(text)
        if token.type == TokenType.NUMBER:
            number = float(token.value)
            # Overflowing literals such as 1e999 have no finite value
            if not math.isfinite(number):
                self._raise_unexpected(token)
            return js_of_num(number)
        if token.type == TokenType.BOOLEAN:
            return js_of_bool(token.value == "true")
        if token.type == TokenType.NULL:
            return JS_NULL

        self._raise_unexpected(token)

    def _parse_member_key(self) -> str:
        key_token = self._cursor.peek()
        key = self.parse_value()
        if key.kind != ValueKind.STRING:
            raise InvalidJSONError.invalid_field_name(
                dumps(key), key_token.position if key_token else None
            )
        return key.payload

    def _expect_colon(self) -> None:
        token = self._cursor.advance()
        if token is not None and token.type == TokenType.INVALID:
            raise InvalidJSONError.unmatched_lexeme(token.value, token.position)
        if token is None or token.type != TokenType.COLON:
            raise InvalidJSONError.missing_colon(token.position if token else None)

    def _should_continue(self, closer: TokenType) -> bool:
        """Consume the separator after a member or element."""
        token = self._next_token()
        if token.type == TokenType.COMMA:
            return True
        if token.type == closer:
            return False
        self._raise_unexpected(token)

    def _enter_structure(self, start: Optional[Position]) -> None:
        if self.validator:
            self.validator.enter_structure(start)

    def _exit_structure(self) -> None:
        if self.validator:
            self.validator.exit_structure()

    def parse_object(self, start: Optional[Position] = None) -> JSONValue:
        """Parse object members; the opening brace is already consumed."""
        self._enter_structure(start)
        members: dict[str, JSONValue] = {}

        next_token = self._cursor.peek()
        if next_token is not None and next_token.type == TokenType.RBRACE:
            self._cursor.advance()
        else:
            while True:
                key = self._parse_member_key()
                self._expect_colon()
                # Duplicate keys: last one wins
                members[key] = self.parse_value()
                if self.validator:
                    self.validator.check_members(len(members), start)
                if not self._should_continue(TokenType.RBRACE):
                    break

        self._exit_structure()
        return make_object(members)

    def parse_array(self, start: Optional[Position] = None) -> JSONValue:
        """Parse array elements; the opening bracket is already consumed."""
        self._enter_structure(start)
        items: list[JSONValue] = []

        next_token = self._cursor.peek()
        if next_token is not None and next_token.type == TokenType.RBRACKET:
            self._cursor.advance()
        else:
            while True:
                items.append(self.parse_value())
                if self.validator:
                    self.validator.check_items(len(items), start)
                if not self._should_continue(TokenType.RBRACKET):
                    break

        self._exit_structure()
        return js_of_list(items)

    def parse(self) -> JSONValue:
        """Parse a complete document: one value and nothing after it."""
        value = self.parse_value()
        leftover = self._cursor.advance()
        if leftover is not None:
            raise InvalidJSONError.trailing_garbage(leftover.value, leftover.position)
        return value


def parse(text: Union[str, bytes, bytearray], config: Optional[ParseConfig] = None) -> JSONValue:
    """
    Parse JSON text into a JSONValue.

    Args:
        text: JSON text; bytes are decoded as UTF-8
        config: Optional ParseConfig for resource limits and logging

    Returns:
        The parsed value tree

    Raises:
        InvalidJSONError: If the text is not valid JSON
        SecurityError: If a resource limit is exceeded, or the nesting is
            deeper than the interpreter's recursion limit allows
    """
    config = config or ParseConfig()
    log = config.get_logger(__name__)

    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")

    validator = LimitValidator(config.limits or ParseLimits())
    validator.check_input(text)

    try:
        tokens = Lexer(text, validator, stop_at_invalid=True).get_all_tokens()
        log.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
        result = Parser(tokens, validator).parse()
    except InvalidJSONError as e:
        log.debug("Parse failed: %s", e)
        raise
    except RecursionError:
        log.debug("Parse failed: recursion limit reached at depth %d", validator.nesting_depth)
        raise SecurityError(
            f"Nesting depth {validator.nesting_depth} exceeds the interpreter recursion limit"
        ) from None

    log.debug("Parsed %s value", result.kind.value)
    return result


def loads(s: Union[str, bytes, bytearray], config: Optional[ParseConfig] = None) -> JSONValue:
    """Alias of parse() mirroring the json module's name."""
    return parse(s, config)


def load(fp: TextIO, config: Optional[ParseConfig] = None) -> JSONValue:
    """Parse the full contents of a file-like object."""
    return parse(fp.read(), config)
