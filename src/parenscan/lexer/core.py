"""State-machine lexer over an in-memory byte buffer.

The lexer itself holds no position. Every call to ``scan`` reads and
advances a ScanState, so many cursors can share one position while the
lexer stays a plain function of (buffer, state).

No regex in the hot path. STR values are memoryview slices of the buffer
unless text decoding is enabled.

Thread Safety:
Lexer instances are immutable after construction and can be shared.
ScanState is mutable and belongs to a single scan tree.

"""

from __future__ import annotations

from collections.abc import Iterator

from parenscan.config import ScanConfig, get_scan_config
from parenscan.errors import ScanError, ScanErrorKind
from parenscan.lexer.charsets import CLOSE, COMMENT, OPEN, QUOTES, WHITESPACE
from parenscan.lexer.scanners import (
    AtomScannerMixin,
    CommentScannerMixin,
    QuotedScannerMixin,
)
from parenscan.lexer.state import ScanState
from parenscan.location import locate
from parenscan.tokens import Token, TokenType
from parenscan.utils.logger import get_logger

logger = get_logger(__name__)

Buffer = bytes | bytearray | memoryview | str


def coerce_buffer(data: Buffer) -> bytes:
    """Return an immutable bytes buffer for data.

    bytes are used as-is; str is encoded as UTF-8; mutable buffers are
    snapshotted once so later mutation cannot move tokens underneath.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes-like or str buffer, got {type(data).__name__}")


class Lexer(
    QuotedScannerMixin,
    CommentScannerMixin,
    AtomScannerMixin,
):
    """Token scanner for parenthesized notation.

    At each step, in priority order: skip whitespace, emit BEGIN for `(`
    and END for `)`, scan a quoted string, skip a `;` comment, or scan an
    atom.

    Usage:
            >>> lexer = Lexer(b'(key "value")')
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(BEGIN, @0)
        Token(STR, b'key', @1)
        Token(STR, b'value', @6)
        Token(END, @12)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_view",
        "_source_file",
        "_validate_symbols",
        "_decode_text",
        "config",
    )

    def __init__(
        self,
        source: Buffer,
        *,
        config: ScanConfig | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer with a source buffer.

        Args:
            source: Buffer to scan (str is encoded as UTF-8)
            config: Scan configuration (defaults to the active context config)
            source_file: Optional source file path for error messages
        """
        self.config = config if config is not None else get_scan_config()
        self._source = coerce_buffer(source)
        self._source_len = len(self._source)
        self._view = memoryview(self._source)
        self._source_file = source_file
        self._validate_symbols = self.config.validate_symbols
        self._decode_text = self.config.decode_text

    @property
    def source(self) -> bytes:
        """The scanned buffer."""
        return self._source

    def scan(self, state: ScanState) -> Token | None:
        """Advance state past the next token and return it.

        Returns:
            The next token, or None at end of buffer or once the scan has
            failed. A failure is recorded in ``state.failure``; after that
            every call returns None.
        """
        if state.failure is not None:
            return None

        source = self._source
        source_len = self._source_len
        pos = state.offset
        while pos < source_len:
            byte = source[pos]
            if byte in WHITESPACE:
                pos += 1
            elif byte == OPEN:
                state.offset = pos + 1
                state.token_count += 1
                return self._make_delim(TokenType.BEGIN, pos)
            elif byte == CLOSE:
                state.offset = pos + 1
                state.token_count += 1
                return self._make_delim(TokenType.END, pos)
            elif byte in QUOTES:
                return self._scan_quoted(state, pos)
            elif byte == COMMENT:
                pos = self._skip_comment(pos)
            else:
                return self._scan_atom(state, pos)

        state.offset = pos
        return None

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the whole buffer into a flat token stream.

        Yields:
            Token objects one at a time

        Raises:
            ScanError: On the first lexical error. The stream is exhausted
                afterwards.
        """
        state = ScanState()
        while True:
            token = self.scan(state)
            if token is None:
                break
            yield token
        if state.failure is not None:
            raise state.failure

    # =========================================================================
    # Token construction
    # =========================================================================

    def _make_delim(self, token_type: TokenType, pos: int) -> Token:
        return Token(
            type=token_type,
            value=None,
            _start_offset=pos,
            _end_offset=pos + 1,
            _source=self._source,
            _source_file=self._source_file,
        )

    def _make_str(self, state: ScanState, start: int, end: int) -> Token | None:
        """Create a STR token over source[start:end].

        The caller has already advanced state past the token. With text
        decoding on, the span is validated as UTF-8 here, for quoted and
        unquoted spans alike.
        """
        value: memoryview | str = self._view[start:end]
        if self._decode_text:
            try:
                value = str(value, "utf-8")
            except UnicodeDecodeError as exc:
                self._fail(state, ScanErrorKind.INVALID_UTF8, start + exc.start)
                return None
        state.token_count += 1
        return Token(
            type=TokenType.STR,
            value=value,
            _start_offset=start,
            _end_offset=end,
            _source=self._source,
            _source_file=self._source_file,
        )

    def _fail(self, state: ScanState, kind: ScanErrorKind, offset: int) -> None:
        """Record a lexical failure at offset and stop the scan."""
        loc = locate(self._source, offset, source_file=self._source_file)
        error = ScanError(
            kind,
            offset,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=self._source_file,
        )
        logger.debug("scan failed: %s", error)
        state.fail(error)
