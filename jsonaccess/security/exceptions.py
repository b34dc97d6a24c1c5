"""
Exception types raised by jsonaccess.

Parsing has exactly one failure kind, InvalidJSONError. Its message follows a
fixed pattern per failure condition so callers can match on message content;
position details live in attributes and never change the message text.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.tokenizer import Position


class JsonAccessError(Exception):
    """Base class for all jsonaccess errors."""


class InvalidJSONError(JsonAccessError, ValueError):
    """Raised by the tokenizer or parser when input is not valid JSON."""

    def __init__(
        self,
        message: str,
        fragment: str = "",
        position: Optional["Position"] = None,
    ):
        super().__init__(message)
        self.message = message
        self.fragment = fragment
        self.position = position

    @property
    def lineno(self) -> Optional[int]:
        """Line of the offending fragment, when known."""
        return self.position.line if self.position else None

    @property
    def colno(self) -> Optional[int]:
        """Column of the offending fragment, when known."""
        return self.position.column if self.position else None

    @classmethod
    def unmatched_lexeme(
        cls, remainder: str, position: Optional["Position"] = None
    ) -> "InvalidJSONError":
        return cls(f"Invalid JSON: {remainder}", remainder, position)

    @classmethod
    def invalid_field_name(
        cls, key_text: str, position: Optional["Position"] = None
    ) -> "InvalidJSONError":
        return cls(f"Invalid JSON field name ({key_text})", key_text, position)

    @classmethod
    def missing_colon(
        cls, position: Optional["Position"] = None
    ) -> "InvalidJSONError":
        return cls("JSON expecting : after object field name", "", position)

    @classmethod
    def unexpected_token(
        cls, token_text: str, position: Optional["Position"] = None
    ) -> "InvalidJSONError":
        return cls(f"Invalid JSON: {token_text}", token_text, position)

    @classmethod
    def unexpected_end(cls) -> "InvalidJSONError":
        return cls("Unexpected end of JSON data")

    @classmethod
    def trailing_garbage(
        cls, token_text: str, position: Optional["Position"] = None
    ) -> "InvalidJSONError":
        return cls(f"Garbage after JSON data ({token_text})", token_text, position)


class SecurityError(JsonAccessError):
    """Raised when input exceeds a configured resource limit."""

    def __init__(self, message: str, position: Optional["Position"] = None):
        super().__init__(message)
        self.message = message
        self.position = position
