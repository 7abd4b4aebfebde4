"""Unquoted atom scanner mixin."""

from __future__ import annotations

from parenscan.errors import ScanErrorKind
from parenscan.lexer.charsets import ATOM_TERMINATORS, SYMBOL_MAX, SYMBOL_MIN
from parenscan.lexer.state import ScanState
from parenscan.tokens import Token


class AtomScannerMixin:
    """Mixin providing unquoted atom scanning.

    An atom runs until `(`, `)`, ASCII whitespace, or the end of the
    buffer. The terminating byte is left for the next scan.

    """

    _source: bytes
    _source_len: int
    _validate_symbols: bool

    def _make_str(self, state: ScanState, start: int, end: int) -> Token | None:
        """Create STR token over source[start:end]. Implemented by Lexer."""
        raise NotImplementedError

    def _fail(self, state: ScanState, kind: ScanErrorKind, offset: int) -> None:
        """Record a scan failure. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_atom(self, state: ScanState, start: int) -> Token | None:
        """Scan an atom beginning at start.

        Returns:
            STR token over the atom, or None if symbol validation is on
            and a byte outside 0x21-0x7E was found (INVALID_SYMBOL_CHAR is
            recorded and the partial atom is dropped).
        """
        source = self._source
        source_len = self._source_len
        validate = self._validate_symbols
        pos = start
        while pos < source_len:
            byte = source[pos]
            if byte in ATOM_TERMINATORS:
                break
            if validate and not SYMBOL_MIN <= byte <= SYMBOL_MAX:
                self._fail(state, ScanErrorKind.INVALID_SYMBOL_CHAR, pos)
                return None
            pos += 1
        state.offset = pos
        return self._make_str(state, start, pos)
