"""
Lexer for jsonaccess - tokenizes input strings for parsing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple, Optional

import regex

from ..security.exceptions import InvalidJSONError
from ..security.limits import LimitValidator
from .constants import STRUCTURAL_CHARS, TOKEN_PATTERN


class TokenType(Enum):
    """Token types for JSON parsing."""

    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    COLON = "COLON"
    COMMA = "COMMA"

    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"

    # Unmatched remainder of the input
    INVALID = "INVALID"


STRUCTURAL_TOKEN_MAP = dict(
    zip(
        STRUCTURAL_CHARS,
        (
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.LBRACKET,
            TokenType.RBRACKET,
            TokenType.COLON,
            TokenType.COMMA,
        ),
    )
)

KEYWORD_TOKEN_MAP = {
    "true": TokenType.BOOLEAN,
    "false": TokenType.BOOLEAN,
    "null": TokenType.NULL,
}

_TOKEN_RE = regex.compile(TOKEN_PATTERN)


@dataclass(frozen=True)
class Position:
    """Position in source text (line, column and character offset)."""

    line: int
    column: int
    offset: int = 0


class Token(NamedTuple):
    """Token with type, raw lexeme and position information.

    String tokens keep their surrounding quotes and escapes undecoded.
    """

    type: TokenType
    value: str
    position: Position


class Lexer:
    """Lexical analyzer for JSON input.

    Matches one lexeme at a time against a single compiled alternation;
    whitespace matches are consumed without producing a token. With
    ``stop_at_invalid`` an unmatched remainder ends the stream as one INVALID
    token instead of raising, leaving the parser to report it in context.
    """

    def __init__(
        self,
        text: str,
        validator: Optional[LimitValidator] = None,
        stop_at_invalid: bool = False,
    ) -> None:
        self.text = text
        self.stop_at_invalid = stop_at_invalid
        self.pos = 0
        self.line = 1
        self.column = 1
        self.validator = validator

    def current_position(self) -> Position:
        """Get current position in the text."""
        return Position(self.line, self.column, self.pos)

    def _advance_over(self, lexeme: str) -> None:
        """Move past a matched lexeme, tracking line and column."""
        self.pos += len(lexeme)
        newlines = lexeme.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(lexeme) - lexeme.rfind("\n")
        else:
            self.column += len(lexeme)

    def _classify(self, kind: str, lexeme: str) -> TokenType:
        if kind == "structural":
            return STRUCTURAL_TOKEN_MAP[lexeme]
        if kind == "string":
            return TokenType.STRING
        if kind == "number":
            return TokenType.NUMBER
        return KEYWORD_TOKEN_MAP[lexeme]

    def _check_limits(self, token_type: TokenType, lexeme: str, pos: Position) -> None:
        # String length is checked on the decoded value by the parser
        if self.validator is not None and token_type == TokenType.NUMBER:
            self.validator.check_number(lexeme, pos)

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the input text into a sequence of tokens."""
        while self.pos < len(self.text):
            match = _TOKEN_RE.match(self.text, self.pos)
            if match is None:
                remainder = self.text[self.pos :]
                if self.stop_at_invalid:
                    yield Token(TokenType.INVALID, remainder, self.current_position())
                    return
                raise InvalidJSONError.unmatched_lexeme(
                    remainder, self.current_position()
                )

            kind = match.lastgroup
            lexeme = match.group()
            pos = self.current_position()
            self._advance_over(lexeme)

            if kind == "whitespace":
                continue

            token_type = self._classify(kind, lexeme)
            self._check_limits(token_type, lexeme, pos)
            yield Token(token_type, lexeme, pos)

    def get_all_tokens(self) -> list[Token]:
        """Get all tokens as a list."""
        return list(self.tokenize())


def tokenize(text: str, validator: Optional[LimitValidator] = None) -> list[Token]:
    """Tokenize ``text`` eagerly, raising InvalidJSONError on the first unmatched lexeme."""
    return Lexer(text, validator).get_all_tokens()
