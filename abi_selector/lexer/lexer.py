"""
Lexer implementation for signature strings.

The Lexer tokenizes a signature such as ``bark(uint256,bool[])`` into a
stream of tokens that can be consumed by the parser.
"""

from typing import List, Optional

from ..config import DEFAULT_CONFIG, ParserConfig
from ..errors import ParseError
from .tokens import (
    Token,
    TokenType,
    KEYWORDS,
    SIZED_KEYWORDS,
    DELIMITERS,
    DIGITS,
    LETTERS,
    WORD_CHARS,
    WHITESPACE,
)


def classify_word(word: str) -> TokenType:
    """
    Classify a word as a type keyword or a plain identifier.

    Sized keywords only match when everything after the prefix is a
    decimal digit, so ``uint256`` is UINT but ``uintx`` is an identifier.
    """
    if word in KEYWORDS:
        return KEYWORDS[word]
    for prefix, token_type in SIZED_KEYWORDS.items():
        if word.startswith(prefix) and all(ch in DIGITS for ch in word[len(prefix):]):
            return token_type
    return TokenType.IDENTIFIER


class Lexer:
    """
    Lexer for signature strings.

    Converts source text into a list of tokens for parsing. Unlike a
    source-code lexer there is nothing to skip: any character outside the
    grammar is a hard failure.
    """

    def __init__(self, source: str, config: Optional[ParserConfig] = None, diagnostics=None):
        self.source = source
        self.config = config or DEFAULT_CONFIG
        self.diagnostics = diagnostics
        self.pos = 0
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        return ch

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters, or fail if whitespace is disallowed."""
        start = self.pos
        while self.peek() and self.peek() in WHITESPACE:
            if not self.config.allow_whitespace:
                raise ParseError('Whitespace is not allowed', self.peek(), self.pos)
            self.advance()
        if self.pos > start and self.diagnostics is not None:
            self.diagnostics.info_whitespace_skipped(start)

    def read_number(self) -> str:
        """Read a run of decimal digits."""
        result = ''
        while self.peek() and self.peek() in DIGITS:
            result += self.advance()
        return result

    def read_word(self) -> str:
        """Read an identifier or type keyword."""
        result = ''
        while self.peek() and self.peek() in WORD_CHARS:
            result += self.advance()
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.

        Raises:
            ParseError: If the source contains a character outside the grammar.
        """
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            start = self.pos
            ch = self.peek()

            # Numbers (array lengths)
            if ch in DIGITS:
                value = self.read_number()
                self.tokens.append(Token(TokenType.NUMBER, value, start))
                continue

            # Identifiers and type keywords
            if ch in LETTERS or ch == '_':
                value = self.read_word()
                self.tokens.append(Token(classify_word(value), value, start))
                continue

            if ch in DELIMITERS:
                self.advance()
                self.tokens.append(Token(DELIMITERS[ch], ch, start))
                continue

            raise ParseError(f'Unexpected character {ch!r}', ch, start)

        self.tokens.append(Token(TokenType.EOF, '', len(self.source)))
        return self.tokens
