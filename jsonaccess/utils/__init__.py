"""
jsonaccess configuration utilities.
"""

from .config import ParseConfig, ParseLimits, SizeLimits, StructureLimits

__all__ = ['ParseConfig', 'ParseLimits', 'SizeLimits', 'StructureLimits']
