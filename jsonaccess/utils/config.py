"""
Configuration and limits for jsonaccess parsing.

This module defines the resource limits and the parse configuration.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000


@dataclass
class ParseLimits:
    """Resource limits applied while tokenizing and parsing."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __post_init__(self) -> None:
        if self.size_limits is None:
            self.size_limits = SizeLimits()
        if self.structure_limits is None:
            self.structure_limits = StructureLimits()

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual string lexemes."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum length for number lexemes."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for objects and arrays."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of keys in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items


@dataclass
class ParseConfig:
    """Configuration options for jsonaccess parsing.

    ``limits`` defaults to ParseLimits(). ``logger`` replaces the engine's
    module logger when given.
    """

    limits: Optional[ParseLimits] = None
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        self.limits = self.limits or ParseLimits()

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger or the named module logger."""
        return self.logger or logging.getLogger(name)
