"""
Resource limits applied while jsonaccess reads a document.

Every check raises SecurityError naming the measured quantity and the limit,
plus the source position of the offending construct when one is known.
"""

from typing import TYPE_CHECKING, Optional

from ..utils.config import ParseLimits
from .exceptions import SecurityError

if TYPE_CHECKING:
    from ..core.tokenizer import Position


class LimitValidator:
    """Checks one document against a ParseLimits instance.

    The validator tracks the nesting depth of the document being read, so
    each parse uses a fresh instance.
    """

    def __init__(self, limits: ParseLimits):
        self.limits = limits
        self.nesting_depth = 0

    def _check(
        self,
        quantity: str,
        actual: int,
        limit: int,
        position: Optional["Position"] = None,
    ) -> None:
        if actual <= limit:
            return
        where = f" at line {position.line}, column {position.column}" if position else ""
        raise SecurityError(f"{quantity} {actual} exceeds limit {limit}{where}", position)

    def check_input(self, text: str) -> None:
        self._check("Input size", len(text), self.limits.max_input_size)

    def check_string(self, value: str, position: Optional["Position"] = None) -> None:
        """Check a decoded string value (object keys included)."""
        self._check("String length", len(value), self.limits.max_string_length, position)

    def check_number(self, lexeme: str, position: Optional["Position"] = None) -> None:
        """Check the source text of a number before it is converted."""
        self._check("Number length", len(lexeme), self.limits.max_number_length, position)

    def enter_structure(self, position: Optional["Position"] = None) -> None:
        self.nesting_depth += 1
        self._check(
            "Nesting depth", self.nesting_depth, self.limits.max_nesting_depth, position
        )

    def exit_structure(self) -> None:
        self.nesting_depth -= 1

    def check_members(self, count: int, position: Optional["Position"] = None) -> None:
        self._check("Object key count", count, self.limits.max_object_keys, position)

    def check_items(self, count: int, position: Optional["Position"] = None) -> None:
        self._check("Array item count", count, self.limits.max_array_items, position)
