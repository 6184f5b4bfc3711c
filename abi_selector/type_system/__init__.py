"""
Types module for the signature parser.

This module provides integer width rules and layout classification.
"""

from .mappings import (
    is_dynamic,
    is_valid_int_size,
    DEFAULT_INT_SIZE,
    INT_SIZES,
    MAX_DIGITS,
)

__all__ = [
    'is_dynamic',
    'is_valid_int_size',
    'DEFAULT_INT_SIZE',
    'INT_SIZES',
    'MAX_DIGITS',
]
