"""
Diagnostic system for signature decoding.

Collects notes about input that was accepted but normalized on the way in
(defaulted widths, skipped whitespace) and warns when a decoded signature
would not serialize back to the exact input text.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for decoding diagnostics."""
    WARNING = 'warning'
    INFO = 'info'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    position: Optional[int] = None
    construct: str = ''  # e.g., 'width', 'whitespace', 'canonical'

    def __str__(self) -> str:
        if self.position is not None:
            return f'[{self.severity.value}] position {self.position}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class SelectorDiagnostics:
    """
    Collects diagnostics while decoding signatures.

    Usage:
        diag = SelectorDiagnostics()
        decode("growl(uint,address)", diagnostics=diag)
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        """Get only warning-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

    @property
    def infos(self) -> List[Diagnostic]:
        """Get only info-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.INFO]

    @property
    def count(self) -> int:
        """Get total diagnostic count."""
        return len(self._diagnostics)

    def clear(self) -> None:
        """Clear all diagnostics."""
        self._diagnostics.clear()

    # =========================================================================
    # SPECIFIC DIAGNOSTIC METHODS
    # =========================================================================

    def warn_non_canonical(self, source: str, canonical: str) -> None:
        """Warn that the input text differs from its canonical rendering."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'Signature "{source}" is not canonical; '
                    f'it serializes as "{canonical}".',
            construct='canonical',
        ))

    def info_width_defaulted(self, keyword: str, size: int, position: Optional[int] = None) -> None:
        """Note that a bare uint/int was expanded to its default width."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I001',
            message=f'"{keyword}" has no width; using {keyword}{size}.',
            position=position,
            construct='width',
        ))

    def info_whitespace_skipped(self, position: Optional[int] = None) -> None:
        """Note that whitespace between tokens was skipped."""
        self._diagnostics.append(Diagnostic(
            severity=DiagnosticSeverity.INFO,
            code='I002',
            message='Whitespace was skipped.',
            position=position,
            construct='whitespace',
        ))

    # =========================================================================
    # REPORTING
    # =========================================================================

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        warnings = self.warnings
        infos = self.infos

        if warnings:
            print(f'\nSignature warnings ({len(warnings)}):', file=file)
            for w in warnings:
                print(f'  {w}', file=file)

        if infos and self._verbose:
            print(f'\nSignature info ({len(infos)}):', file=file)
            # Group by construct type
            by_construct: Dict[str, List[Diagnostic]] = {}
            for d in infos:
                by_construct.setdefault(d.construct or 'other', []).append(d)
            for construct, diags in sorted(by_construct.items()):
                print(f'  {construct}: {len(diags)} occurrence(s)', file=file)
                for d in diags:
                    print(f'    {d}', file=file)

    def get_summary(self) -> str:
        """Get a summary string of all diagnostics."""
        if not self._diagnostics:
            return 'No signature diagnostics.'

        by_construct: Dict[str, int] = {}
        for d in self._diagnostics:
            key = d.construct or 'other'
            by_construct[key] = by_construct.get(key, 0) + 1

        parts = [f'{count} {construct}' for construct, count in sorted(by_construct.items())]
        return f'Signature diagnostics: {", ".join(parts)}'
