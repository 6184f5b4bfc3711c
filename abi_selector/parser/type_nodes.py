"""
Type node definitions for parsed signatures.

This module contains the closed set of dataclasses that make up a parsed
type tree, plus the FunctionSelector that owns an ordered parameter list.
All nodes are frozen, so a parsed tree can be shared and hashed freely.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence


# =============================================================================
# BASE NODE
# =============================================================================

@dataclass(frozen=True)
class Type:
    """Base class for all type nodes."""
    pass


# =============================================================================
# PRIMITIVE TYPES
# =============================================================================

@dataclass(frozen=True)
class UInt(Type):
    """Unsigned integer of the given bit width (e.g., uint256)."""
    size: int = 256


@dataclass(frozen=True)
class Int(Type):
    """Signed integer of the given bit width (e.g., int128)."""
    size: int = 256


@dataclass(frozen=True)
class Bool(Type):
    pass


@dataclass(frozen=True)
class Address(Type):
    pass


@dataclass(frozen=True)
class String(Type):
    pass


@dataclass(frozen=True)
class Bytes(Type):
    """Byte sequence; size None is dynamic ``bytes``, otherwise ``bytesN``."""
    size: Optional[int] = None


# =============================================================================
# COMPOSITE TYPES
# =============================================================================

@dataclass(frozen=True)
class Array(Type):
    """Dynamic-length array (e.g., address[])."""
    element: Type


@dataclass(frozen=True)
class FixedArray(Type):
    """Fixed-length array (e.g., string[3])."""
    element: Type
    length: int


@dataclass(frozen=True)
class Tuple(Type):
    """Parenthesized list of component types (e.g., (uint256,bool))."""
    types: Sequence[Type] = ()

    def __post_init__(self):
        object.__setattr__(self, 'types', tuple(self.types))


# =============================================================================
# SELECTOR
# =============================================================================

@dataclass(frozen=True)
class FunctionSelector:
    """
    A parsed function signature.

    ``types`` is positional and matches encoding order. ``returns`` is never
    set by the parser since the one-line signature form has no return syntax.
    """
    function: str
    types: Sequence[Type] = field(default_factory=tuple)
    returns: Optional[Type] = None

    def __post_init__(self):
        object.__setattr__(self, 'types', tuple(self.types))


# Every concrete variant of the closed Type set
TYPE_VARIANTS = (UInt, Int, Bool, Address, String, Bytes, Array, FixedArray, Tuple)
