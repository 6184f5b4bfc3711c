"""
Error types raised while decoding signatures.
"""

from typing import Optional


class ParseError(SyntaxError):
    """
    Raised when a signature or type string does not match the grammar.

    Attributes:
        message: Human readable description of the failure
        fragment: The offending token text ('' at end of input)
        position: 0-based character offset into the input, if known
    """

    def __init__(self, message: str, fragment: str = '', position: Optional[int] = None):
        self.message = message
        self.fragment = fragment
        self.position = position
        super().__init__(self._format())

    def _format(self) -> str:
        if self.position is None:
            return self.message
        near = repr(self.fragment) if self.fragment else 'end of input'
        return f'{self.message} at position {self.position} (near {near})'

    def shifted(self, offset: int) -> 'ParseError':
        """Return a copy with the position moved by offset."""
        position = None if self.position is None else max(self.position + offset, 0)
        return ParseError(self.message, self.fragment, position)
