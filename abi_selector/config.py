"""
Parser configuration.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class ParserConfig:
    """
    Options controlling how strictly signatures are parsed.

    Attributes:
        max_depth: Maximum nesting of tuples and array suffixes before parsing is aborted
        strict_widths: Reject uint/int widths that are not multiples of 8 in 8..256
        allow_whitespace: Skip spaces and tabs between tokens instead of failing

    Whitespace is not part of the signature grammar, but it is skipped by
    default because hand-written signatures such as
    ``my_function(uint64, string[])`` commonly contain it. Set
    allow_whitespace=False to require the exact canonical form.
    """
    max_depth: int = 64
    strict_widths: bool = True
    allow_whitespace: bool = True

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f'max_depth must be positive, got {self.max_depth}')

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ParserConfig':
        """Build a config from a mapping (e.g. a parsed JSON object)."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f'Unknown parser config keys: {", ".join(unknown)}')
        return cls(**dict(data))


DEFAULT_CONFIG = ParserConfig()
