"""
Parser module for signature strings.

This module provides the type node definitions and the parser implementation.
"""

from .type_nodes import (
    # Base
    Type,
    # Primitives
    UInt,
    Int,
    Bool,
    Address,
    String,
    Bytes,
    # Composites
    Array,
    FixedArray,
    Tuple,
    # Selector
    FunctionSelector,
    TYPE_VARIANTS,
)
from .parser import Parser

__all__ = [
    'Type',
    'UInt',
    'Int',
    'Bool',
    'Address',
    'String',
    'Bytes',
    'Array',
    'FixedArray',
    'Tuple',
    'FunctionSelector',
    'TYPE_VARIANTS',
    'Parser',
]
