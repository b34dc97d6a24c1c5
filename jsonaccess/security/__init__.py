"""
jsonaccess error types and resource limits.
"""

from .exceptions import InvalidJSONError, JsonAccessError, SecurityError
from .limits import LimitValidator

__all__ = ['InvalidJSONError', 'JsonAccessError', 'SecurityError', 'LimitValidator']
