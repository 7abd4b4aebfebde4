"""Lazy group cursors over the lexer's flat token stream.

A Document owns the buffer and one ScanState. Its root cursor walks the
top level; every BEGIN token surfaces as a nested GroupCursor sharing the
same ScanState, and every END token closes the cursor that reads it. No
tree is built and no region is scanned twice.

Tree order:
    Only the deepest live cursor may advance the shared position. Reading
    an outer cursor while a nested one is still live drains the nested one
    first (it has been abandoned), or raises CursorOrderError when
    ``ScanConfig.strict_order`` is set.

Errors:
    A lexical error is recorded in the ScanState. Every live cursor then
    reports exhaustion; the error itself is read back from the Document
    with ``finish()`` or ``error``.

Usage:
    >>> with Document(b"(pci (1af4 vendor))") as doc:
    ...     root = doc.cursor()
    ...     group = root.next_group()
    ...     bytes(group.next_text())
    b'pci'

"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto
from types import TracebackType

from parenscan.config import ScanConfig, get_scan_config
from parenscan.errors import CursorOrderError, ScanError
from parenscan.lexer import Buffer, Lexer, ScanState
from parenscan.profiling import get_scan_accumulator
from parenscan.tokens import Token, TokenType
from parenscan.utils.logger import get_logger

logger = get_logger(__name__)


class CursorState(Enum):
    """Lifecycle of a cursor. CLOSED and ERRORED are terminal."""

    LIVE = auto()
    CLOSED = auto()  # read its END, drained, or hit end of buffer
    ERRORED = auto()  # the shared scan failed


class GroupCursor:
    """Iteration handle over one nesting level of a Document.

    Items are STR values (memoryview slices, or str when text decoding is
    on) and nested GroupCursor objects. Once a cursor reports exhaustion it
    keeps doing so.

    """

    __slots__ = ("_document", "_lexer", "_scan", "_depth", "_status")

    def __init__(self, document: Document, depth: int) -> None:
        self._document = document
        self._lexer = document._lexer
        self._scan = document._state
        self._depth = depth
        self._status = CursorState.LIVE

    @property
    def depth(self) -> int:
        """Nesting depth; the root cursor is 0."""
        return self._depth

    @property
    def state(self) -> CursorState:
        return self._status

    @property
    def exhausted(self) -> bool:
        return self._status is not CursorState.LIVE

    def __repr__(self) -> str:
        return f"GroupCursor(depth={self._depth}, state={self._status.name})"

    # =========================================================================
    # Reading
    # =========================================================================

    def next_item(self) -> memoryview | str | GroupCursor | None:
        """Return the next item at this level, or None when exhausted.

        Raises:
            CursorOrderError: In strict order mode, if a nested cursor of
                this one is still live.
        """
        if not self._ready():
            return None

        token = self._advance()
        if token is None:
            self._stop()
            return None
        if token.type is TokenType.STR:
            return token.value
        if token.type is TokenType.BEGIN:
            child = GroupCursor(self._document, self._depth + 1)
            self._scan.live.append(child)
            return child
        self._close_self()
        return None

    def next_text(self) -> memoryview | str | None:
        """Return the next item if it is text, else None.

        A nested group found in its place is closed (drained) and dropped.
        """
        item = self.next_item()
        if isinstance(item, GroupCursor):
            item.close()
            return None
        return item

    def next_group(self) -> GroupCursor | None:
        """Return the next item if it is a nested group, else None."""
        item = self.next_item()
        if isinstance(item, GroupCursor):
            return item
        return None

    def __iter__(self) -> Iterator[memoryview | str | GroupCursor]:
        return self

    def __next__(self) -> memoryview | str | GroupCursor:
        item = self.next_item()
        if item is None:
            raise StopIteration
        return item

    # =========================================================================
    # Disposal
    # =========================================================================

    def close(self) -> None:
        """Skip everything left at this level, including its END.

        Live nested cursors are drained first, innermost outward, so the
        shared position lands just past this level's closing `)`. Safe to
        call more than once; never raises.
        """
        if self._status is not CursorState.LIVE:
            return
        self._document._dispose_above(self)
        if self._status is not CursorState.LIVE:
            return

        scan = self._scan
        if scan.failure is not None:
            self._document._fail_all()
            return

        logger.debug("draining cursor at depth %d from byte %d", self._depth, scan.offset)
        level = 0
        while True:
            token = self._advance()
            if token is None:
                break
            scan.drained_tokens += 1
            if token.type is TokenType.BEGIN:
                level += 1
            elif token.type is TokenType.END:
                if level == 0:
                    self._close_self()
                    return
                level -= 1
        self._stop()

    def __enter__(self) -> GroupCursor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # =========================================================================
    # Internals
    # =========================================================================

    def _ready(self) -> bool:
        """Check this cursor may advance, disposing abandoned descendants."""
        if self._status is not CursorState.LIVE:
            return False
        scan = self._scan
        if scan.failure is not None:
            self._document._fail_all()
            return False
        top = scan.live[-1]
        if top is not self:
            if self._document.config.strict_order:
                raise CursorOrderError(self._depth, top._depth)
            self._document._dispose_above(self)
        return self._status is CursorState.LIVE

    def _advance(self) -> Token | None:
        scan = self._scan
        token = self._lexer.scan(scan)
        if token is not None:
            if token.type is TokenType.BEGIN:
                scan.open_groups += 1
                scan.group_count += 1
            elif token.type is TokenType.END and scan.open_groups:
                scan.open_groups -= 1
        return token

    def _close_self(self) -> None:
        self._status = CursorState.CLOSED
        live = self._scan.live
        if live and live[-1] is self:
            live.pop()

    def _stop(self) -> None:
        """Handle a None from the lexer: end of buffer or failure."""
        if self._scan.failure is not None:
            self._document._fail_all()
        else:
            self._close_self()


class Document:
    """Root of a scan tree: owns the buffer and the shared ScanState.

    Usage:
        >>> doc = Document(b'(a "b" (c))')
        >>> root = doc.cursor()
        >>> group = root.next_group()
        >>> [bytes(group.next_text()), bytes(group.next_text())]
        [b'a', b'b']
        >>> doc.finish() is None
        True

    """

    __slots__ = ("config", "_lexer", "_state", "_root", "_finished")

    def __init__(
        self,
        source: Buffer,
        *,
        config: ScanConfig | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize a document over source.

        Args:
            source: Buffer to scan (str is encoded as UTF-8)
            config: Scan configuration (defaults to the active context config)
            source_file: Optional source file path for error messages
        """
        self.config = config if config is not None else get_scan_config()
        self._lexer = Lexer(source, config=self.config, source_file=source_file)
        self._state = ScanState()
        self._root: GroupCursor | None = None
        self._finished = False

    @property
    def source(self) -> bytes:
        return self._lexer.source

    @property
    def position(self) -> int:
        """Current byte offset of the shared position."""
        return self._state.offset

    @property
    def error(self) -> ScanError | None:
        """The scan error recorded so far, without draining anything."""
        return self._state.decode()

    @property
    def unclosed_depth(self) -> int:
        """Groups opened but not closed by the time scanning stopped.

        Running out of buffer inside a group is not a scan error; callers
        that need balanced input can check this after ``finish()``.
        """
        return self._state.open_groups

    def cursor(self) -> GroupCursor:
        """Return the root cursor (created on first call)."""
        if self._root is None:
            self._root = GroupCursor(self, 0)
            self._state.live.append(self._root)
        return self._root

    def finish(self) -> ScanError | None:
        """Drain the whole tree and return the scan error, if any.

        After this every cursor of the document is exhausted. Calling it
        again returns the same result.
        """
        if not self._finished:
            self._finished = True
            self.cursor().close()
            self._record()
        return self._state.decode()

    def raise_for_error(self) -> None:
        """Finish the document and raise its ScanError, if any."""
        error = self.finish()
        if error is not None:
            raise error

    def __enter__(self) -> Document:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.finish()

    def _dispose_above(self, cursor: GroupCursor) -> None:
        """Close every live cursor nested inside cursor, innermost first."""
        live = self._state.live
        while live and live[-1] is not cursor:
            live[-1].close()

    def _fail_all(self) -> None:
        live = self._state.live
        for cursor in live:
            cursor._status = CursorState.ERRORED
        live.clear()

    def _record(self) -> None:
        acc = get_scan_accumulator()
        if acc is None:
            return
        state = self._state
        acc.record_scan(
            bytes_scanned=state.offset,
            token_count=state.token_count,
            group_count=state.group_count,
            drained_tokens=state.drained_tokens,
            failed=state.failure is not None,
        )
