"""
Code generation module for the signature parser.

This module renders parsed types back to canonical text and collects
diagnostics raised while decoding.
"""

from .serializer import encode, encode_type, encode_types
from .diagnostics import SelectorDiagnostics, Diagnostic, DiagnosticSeverity

__all__ = [
    'encode',
    'encode_type',
    'encode_types',
    'SelectorDiagnostics',
    'Diagnostic',
    'DiagnosticSeverity',
]
