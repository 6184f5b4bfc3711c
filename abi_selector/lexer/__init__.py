"""
Lexer module for the signature parser.

This module provides tokenization of signature strings.
"""

from .tokens import TokenType, Token, KEYWORDS, SIZED_KEYWORDS, DELIMITERS, TYPE_KEYWORDS
from .lexer import Lexer, classify_word

__all__ = [
    'TokenType',
    'Token',
    'KEYWORDS',
    'SIZED_KEYWORDS',
    'DELIMITERS',
    'TYPE_KEYWORDS',
    'Lexer',
    'classify_word',
]
