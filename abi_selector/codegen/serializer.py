"""
Canonical signature rendering.

Turns Type trees and FunctionSelectors back into the fully qualified text
form, e.g. ``bark(uint256,bool,string[],(uint256,bool))``. Widths are
always written out, so a bare ``uint`` in the input comes back as ``uint256``.
Numbers are written without leading zeros, so ``uint08`` and ``bytes04``
come back as ``uint8`` and ``bytes4``.
"""

from typing import Iterable

from ..parser.type_nodes import (
    Type,
    UInt,
    Int,
    Bool,
    Address,
    String,
    Bytes,
    Array,
    FixedArray,
    Tuple,
    FunctionSelector,
)


def encode_type(type_: Type) -> str:
    """
    Render a single type in canonical form.

    Raises:
        TypeError: If type_ is not one of the known type nodes.
    """
    if isinstance(type_, UInt):
        return f'uint{type_.size}'
    if isinstance(type_, Int):
        return f'int{type_.size}'
    if isinstance(type_, Bool):
        return 'bool'
    if isinstance(type_, Address):
        return 'address'
    if isinstance(type_, String):
        return 'string'
    if isinstance(type_, Bytes):
        return 'bytes' if type_.size is None else f'bytes{type_.size}'
    if isinstance(type_, Array):
        return f'{encode_type(type_.element)}[]'
    if isinstance(type_, FixedArray):
        return f'{encode_type(type_.element)}[{type_.length}]'
    if isinstance(type_, Tuple):
        return f'({encode_types(type_.types)})'
    raise TypeError(f'Unsupported type: {type_!r}')


def encode_types(types: Iterable[Type]) -> str:
    """Render a comma separated type list without surrounding parentheses."""
    return ','.join(encode_type(t) for t in types)


def encode(selector: FunctionSelector) -> str:
    """
    Render a FunctionSelector as ``name(type1,type2,...)``.

    The output is canonical, so it only matches the decoded text when that
    text was canonical too: ``growl(uint,uint08)`` renders as
    ``growl(uint256,uint8)``.
    """
    return f'{selector.function}({encode_types(selector.types)})'
