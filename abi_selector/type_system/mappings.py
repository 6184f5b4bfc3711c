"""
Type constants and layout classification.

This module contains the integer width rules used while parsing and the
dynamic/static classification that binary encoders rely on.
"""

from ..parser.type_nodes import (
    Type,
    Bytes,
    String,
    Array,
    FixedArray,
    Tuple,
)


# =============================================================================
# INTEGER WIDTHS
# =============================================================================

# Width used when a signature writes bare ``uint`` or ``int``
DEFAULT_INT_SIZE = 256

# Every width accepted for uint<N>/int<N>
INT_SIZES = frozenset(range(8, 257, 8))

# Longest digit run accepted for a width or length (2**256 has 78 digits)
MAX_DIGITS = 78


def is_valid_int_size(size: int) -> bool:
    """Check that size is a positive multiple of 8 no larger than 256."""
    return size in INT_SIZES


# =============================================================================
# LAYOUT CLASSIFICATION
# =============================================================================

def is_dynamic(type_: Type) -> bool:
    """
    Check whether a type is encoded with an offset/length indirection.

    Arrays (fixed-length ones included) and tuples always count as dynamic,
    regardless of their members. Only ``bytes`` without a length is dynamic
    among the byte types.
    """
    if isinstance(type_, (String, Array, FixedArray, Tuple)):
        return True
    if isinstance(type_, Bytes):
        return type_.size is None
    return False
