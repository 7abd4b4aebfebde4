"""Exception classes for Parenscan.

Provides standardized exceptions for error handling throughout Parenscan.
"""

from __future__ import annotations

from enum import Enum


class ParenscanError(Exception):
    """Base exception for all Parenscan errors.

    Subclass this for specific error categories.
    """

    pass


class ScanErrorKind(Enum):
    """Lexical failures. All of them end the scan permanently."""

    UNTERMINATED_QUOTE = "unterminated quoted string"
    INVALID_SYMBOL_CHAR = "invalid character in atom"
    INVALID_UTF8 = "invalid UTF-8 in token"


class ScanError(ParenscanError):
    """Lexical error raised (or recorded) when scanning stops.

    Carries the byte offset where the offending token started, and
    optionally the line/column it maps to.
    """

    def __init__(
        self,
        kind: ScanErrorKind,
        offset: int,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            kind: Which lexical rule was broken
            offset: Byte offset of the offending token
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.kind = kind
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{kind.value} (byte {offset})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScanError):
            return NotImplemented
        return self.kind is other.kind and self.offset == other.offset

    def __hash__(self) -> int:
        return hash((self.kind, self.offset))


class CursorOrderError(ParenscanError):
    """A cursor was read while one of its nested cursors is still live.

    Only raised when ``ScanConfig.strict_order`` is enabled; otherwise the
    nested cursors are drained before the read proceeds.
    """

    def __init__(self, depth: int, live_depth: int) -> None:
        """Initialize cursor order error.

        Args:
            depth: Depth of the cursor that was read
            live_depth: Depth of the deepest still-live cursor
        """
        self.depth = depth
        self.live_depth = live_depth
        super().__init__(
            f"cursor at depth {depth} read while nested cursor at depth "
            f"{live_depth} is still open"
        )
