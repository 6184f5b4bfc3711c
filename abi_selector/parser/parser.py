"""
Signature parser implementation.

The Parser converts a stream of tokens from the Lexer into a
FunctionSelector or a single Type tree.
"""

from typing import List, Optional

from ..config import DEFAULT_CONFIG, ParserConfig
from ..errors import ParseError
from ..lexer import Token, TokenType, TYPE_KEYWORDS
from ..lexer.tokens import LETTERS
from ..type_system.mappings import DEFAULT_INT_SIZE, MAX_DIGITS, is_valid_int_size
from .type_nodes import (
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


class Parser:
    """
    Recursive descent parser for signature strings.

    Parses a stream of tokens with one token of lookahead. Every entry
    point consumes the whole stream; leftover tokens are an error.
    """

    def __init__(
        self,
        tokens: List[Token],
        config: Optional[ParserConfig] = None,
        diagnostics=None,
    ):
        self.tokens = tokens
        self.config = config or DEFAULT_CONFIG
        self.diagnostics = diagnostics
        self.pos = 0
        self.depth = 0

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def current(self) -> Token:
        """Return the current token."""
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def error(self, message: str, token: Optional[Token] = None) -> ParseError:
        """Build a ParseError pointing at token (the current token by default)."""
        token = token or self.current()
        return ParseError(message, token.value, token.position)

    def expect(self, token_type: TokenType, message: str = '') -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            detail = f': {message}' if message else ''
            raise self.error(
                f'Expected {token_type.name} but got {self.current().type.name}{detail}'
            )
        return self.advance()

    # =========================================================================
    # ENTRY POINTS
    # =========================================================================

    def parse_selector(self) -> FunctionSelector:
        """Parse ``identifier "(" type_list ")"`` followed by end of input."""
        name_token = self.current()
        if not (self.match(TokenType.IDENTIFIER) or self.match(*TYPE_KEYWORDS)):
            raise self.error('Expected function name')
        if name_token.value[0] not in LETTERS:
            raise self.error(f'Invalid function name {name_token.value!r}', name_token)
        self.advance()

        self.expect(TokenType.LPAREN, 'after function name')
        types = self.parse_type_list()
        self.expect(TokenType.RPAREN, 'to close parameter list')
        self.expect(TokenType.EOF, 'trailing input after signature')
        return FunctionSelector(function=name_token.value, types=types)

    def parse_single_type(self) -> Type:
        """Parse exactly one type followed by end of input."""
        type_ = self.parse_type()
        self.expect(TokenType.EOF, 'trailing input after type')
        return type_

    def parse_raw_types(self) -> List[Type]:
        """
        Parse a bare comma separated type list followed by end of input.

        Accepts exactly what ``"(" + source + ")"`` would accept as a tuple,
        including the empty list.
        """
        types = self.parse_type_list()
        self.expect(TokenType.EOF, 'trailing input after type list')
        return types

    # =========================================================================
    # TYPE PARSING
    # =========================================================================
    #
    # The nested helpers return (type, height), where height counts the tuple
    # and array levels inside the returned node. A node's enclosing
    # tuples plus its height may not exceed max_depth.

    def parse_type_list(self) -> List[Type]:
        """Parse zero or more comma separated types, stopping before ')' or EOF."""
        return self.parse_nested_type_list()[0]

    def parse_type(self) -> Type:
        """Parse a base type followed by any number of array suffixes."""
        return self.parse_nested_type()[0]

    def parse_nested_type_list(self):
        types: List[Type] = []
        height = 0
        if self.match(TokenType.RPAREN, TokenType.EOF):
            return types, height

        while True:
            type_, type_height = self.parse_nested_type()
            types.append(type_)
            height = max(height, type_height)
            if not self.match(TokenType.COMMA):
                return types, height
            self.advance()

    def parse_nested_type(self):
        type_, height = self.parse_base_type()

        # Suffixes wrap left to right: T[][3] is FixedArray(Array(T), 3)
        while self.match(TokenType.LBRACKET):
            open_token = self.advance()
            height += 1
            self.check_depth(self.depth + height, 'Array', open_token)
            if self.match(TokenType.NUMBER):
                number = self.advance()
                type_ = FixedArray(type_, self.parse_digits(number, number.value))
            else:
                type_ = Array(type_)
            self.expect(TokenType.RBRACKET, 'to close array suffix')
        return type_, height

    def parse_base_type(self):
        """Parse a primitive type keyword or a parenthesized tuple."""
        token = self.current()

        if self.match(TokenType.LPAREN):
            return self.parse_tuple()
        if self.match(TokenType.UINT):
            self.advance()
            return UInt(self.parse_int_size(token)), 0
        if self.match(TokenType.INT):
            self.advance()
            return Int(self.parse_int_size(token)), 0
        if self.match(TokenType.BYTES):
            self.advance()
            digits = token.value[len('bytes'):]
            return Bytes(self.parse_digits(token, digits) if digits else None), 0
        if self.match(TokenType.BOOL):
            self.advance()
            return Bool(), 0
        if self.match(TokenType.ADDRESS):
            self.advance()
            return Address(), 0
        if self.match(TokenType.STRING):
            self.advance()
            return String(), 0
        if self.match(TokenType.IDENTIFIER):
            raise self.error(f'Unknown type {token.value!r}')
        if self.match(TokenType.EOF):
            raise self.error('Expected a type but reached end of input')
        raise self.error(f'Expected a type but got {token.type.name}')

    def parse_tuple(self):
        """Parse ``"(" type_list ")"``."""
        open_token = self.expect(TokenType.LPAREN)
        self.depth += 1
        self.check_depth(self.depth, 'Tuple', open_token)
        types, height = self.parse_nested_type_list()
        self.expect(TokenType.RPAREN, 'to close tuple')
        self.depth -= 1
        return Tuple(types), height + 1

    def check_depth(self, depth: int, kind: str, token: Token) -> None:
        if depth > self.config.max_depth:
            raise self.error(
                f'{kind} nesting exceeds maximum depth of {self.config.max_depth}',
                token,
            )

    def parse_digits(self, token: Token, digits: str) -> int:
        """Convert a digit run taken from token to an int."""
        if len(digits) > MAX_DIGITS:
            raise self.error(f'Number {digits[:16]}... is too long', token)
        try:
            return int(digits)
        except ValueError:
            raise self.error(f'Invalid number {digits!r}', token) from None

    def parse_int_size(self, token: Token) -> int:
        """Resolve the bit width written after uint/int, defaulting to 256."""
        prefix = 'uint' if token.type == TokenType.UINT else 'int'
        digits = token.value[len(prefix):]
        if not digits:
            if self.diagnostics is not None:
                self.diagnostics.info_width_defaulted(prefix, DEFAULT_INT_SIZE, token.position)
            return DEFAULT_INT_SIZE

        size = self.parse_digits(token, digits)
        if self.config.strict_widths and not is_valid_int_size(size):
            raise self.error(
                f'Invalid width {size} for {prefix}; expected a multiple of 8 from 8 to 256',
                token,
            )
        return size
