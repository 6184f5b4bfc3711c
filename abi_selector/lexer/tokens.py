"""
Token definitions for the signature lexer.

This module contains the TokenType enum, Token dataclass, and
constant mappings for type keywords and delimiters.
"""

import string
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the signature lexer."""

    # Types
    UINT = auto()
    INT = auto()
    BOOL = auto()
    ADDRESS = auto()
    STRING = auto()
    BYTES = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    COMMA = auto()

    # Literals
    NUMBER = auto()
    IDENTIFIER = auto()

    # Special
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    position: int


# Exact-match type keywords
KEYWORDS = {
    'bool': TokenType.BOOL,
    'address': TokenType.ADDRESS,
    'string': TokenType.STRING,
}

# Type keywords that may carry a trailing width/length (uint256, bytes32, ...)
SIZED_KEYWORDS = {
    'uint': TokenType.UINT,
    'int': TokenType.INT,
    'bytes': TokenType.BYTES,
}

# Single-character delimiters
DELIMITERS = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ',': TokenType.COMMA,
}

# Token types that may start a type production
TYPE_KEYWORDS = frozenset(KEYWORDS.values()) | frozenset(SIZED_KEYWORDS.values())

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
WORD_CHARS = LETTERS | DIGITS | {'_'}
WHITESPACE = frozenset(' \t\r\n')
