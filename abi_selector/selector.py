"""
Signature decoding entry points.

Ties the lexer, parser and serializer together:

    >>> decode("bark(uint256,bool)")
    FunctionSelector(function='bark', types=(UInt(size=256), Bool()), returns=None)
    >>> decode_type("address[][3]")
    FixedArray(element=Array(element=Address()), length=3)
    >>> encode(decode("paw(string[2])"))
    'paw(string[2])'
"""

from typing import List, Optional

from .config import ParserConfig
from .lexer import Lexer
from .parser import Parser, Type, FunctionSelector
from .codegen import encode, encode_type, encode_types, SelectorDiagnostics


def _parser_for(source: str, config: Optional[ParserConfig], diagnostics) -> Parser:
    if not isinstance(source, str):
        raise TypeError(f'Expected a str, got {type(source).__name__}')
    tokens = Lexer(source, config, diagnostics).tokenize()
    return Parser(tokens, config, diagnostics)


def decode(
    signature: str,
    config: Optional[ParserConfig] = None,
    diagnostics: Optional[SelectorDiagnostics] = None,
) -> FunctionSelector:
    """
    Decode a function signature such as ``growl(uint,address,string[])``.

    Raises:
        ParseError: If the signature does not match the grammar.
    """
    selector = _parser_for(signature, config, diagnostics).parse_selector()
    if diagnostics is not None:
        canonical = encode(selector)
        if canonical != signature:
            diagnostics.warn_non_canonical(signature, canonical)
    return selector


def decode_raw(
    type_string: str,
    config: Optional[ParserConfig] = None,
    diagnostics: Optional[SelectorDiagnostics] = None,
) -> List[Type]:
    """
    Decode a bare type list such as ``string,uint256``.

    Behaves like decoding ``"(" + type_string + ")"`` as a tuple and
    returning its members, so an empty string gives an empty list.
    """
    types = _parser_for(type_string, config, diagnostics).parse_raw_types()
    if diagnostics is not None:
        canonical = encode_types(types)
        if canonical != type_string:
            diagnostics.warn_non_canonical(type_string, canonical)
    return types


def decode_type(
    type_string: str,
    config: Optional[ParserConfig] = None,
    diagnostics: Optional[SelectorDiagnostics] = None,
) -> Type:
    """Decode exactly one type such as ``(bool,address)`` or ``uint8[4]``."""
    type_ = _parser_for(type_string, config, diagnostics).parse_single_type()
    if diagnostics is not None:
        canonical = encode_type(type_)
        if canonical != type_string:
            diagnostics.warn_non_canonical(type_string, canonical)
    return type_
