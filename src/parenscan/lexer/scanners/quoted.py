"""Quoted string scanner mixin."""

from __future__ import annotations

from parenscan.errors import ScanErrorKind
from parenscan.lexer.state import ScanState
from parenscan.tokens import Token


class QuotedScannerMixin:
    """Mixin providing quoted string scanning.

    Bytes between the opening quote and the matching closing quote are
    taken verbatim. A backslash skips the byte after it, so an escaped
    delimiter does not end the string. Escapes are not interpreted.

    """

    # These will be set by the Lexer class
    _source: bytes
    _source_len: int

    def _make_str(self, state: ScanState, start: int, end: int) -> Token | None:
        """Create STR token over source[start:end]. Implemented by Lexer."""
        raise NotImplementedError

    def _fail(self, state: ScanState, kind: ScanErrorKind, offset: int) -> None:
        """Record a scan failure. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_quoted(self, state: ScanState, quote_pos: int) -> Token | None:
        """Scan a quoted string whose opening quote is at quote_pos.

        Uses bytes.find to jump between candidate delimiters instead of
        stepping byte by byte.

        Returns:
            STR token over the interior bytes, or None if the buffer ends
            before the closing quote (UNTERMINATED_QUOTE is recorded).
        """
        source = self._source
        delim = source[quote_pos : quote_pos + 1]
        start = quote_pos + 1
        pos = start
        while True:
            close = source.find(delim, pos)
            if close == -1:
                self._fail(state, ScanErrorKind.UNTERMINATED_QUOTE, quote_pos)
                return None
            escape = source.find(b"\\", pos, close)
            if escape == -1:
                state.offset = close + 1
                return self._make_str(state, start, close)
            # Skip the backslash and whatever byte follows it
            pos = escape + 2
