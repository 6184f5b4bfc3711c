"""
Contract call signature parser

This package parses signatures of the form ``name(type1,type2,...)`` into
typed trees and renders those trees back to canonical text.

Module Structure:
- lexer/: Tokenization (TokenType, Token, Lexer)
- parser/: Type nodes and parsing (Parser, Type variants, FunctionSelector)
- type_system/: Integer width rules and layout classification (is_dynamic)
- codegen/: Canonical rendering (encode, encode_type) and diagnostics
- selector.py: decode/decode_raw/decode_type entry points

Usage:
    from abi_selector import decode, encode, is_dynamic

    selector = decode("growl(uint,address,string[])")
    encode(selector)  # 'growl(uint256,address,string[])'
"""

# Re-export main entry points for convenience
from .selector import decode, decode_raw, decode_type
from .codegen import encode, encode_type, SelectorDiagnostics
from .config import ParserConfig
from .errors import ParseError
from .parser import (
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
from .type_system import is_dynamic

__all__ = [
    'decode',
    'decode_raw',
    'decode_type',
    'encode',
    'encode_type',
    'is_dynamic',
    'SelectorDiagnostics',
    'ParserConfig',
    'ParseError',
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
]
