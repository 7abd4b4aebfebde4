"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in a byte buffer.
Locations are computed on demand from byte offsets, so scanning itself
never pays for line/column bookkeeping.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    All line/column positions are 1-indexed. Columns count bytes, not
    characters.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in the buffer
        end_offset: Absolute end offset in the buffer
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=3)
            >>> str(loc)
            '2:3'

            >>> loc = SourceLocation(1, 1, source_file="drivers.conf")
            >>> str(loc)
            'drivers.conf:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.conf:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"


def locate(
    buffer: bytes,
    offset: int,
    end_offset: int | None = None,
    source_file: str | None = None,
) -> SourceLocation:
    """Map a byte offset in buffer to a SourceLocation.

    Args:
        buffer: The scanned buffer
        offset: Byte offset (clamped to the buffer length)
        end_offset: Optional end of the located span
        source_file: Optional source path for messages

    Returns:
        SourceLocation for the offset.
    """
    offset = max(0, min(offset, len(buffer)))
    lineno = buffer.count(b"\n", 0, offset) + 1
    line_start = buffer.rfind(b"\n", 0, offset) + 1
    return SourceLocation(
        lineno=lineno,
        col_offset=offset - line_start + 1,
        offset=offset,
        end_offset=end_offset if end_offset is not None else offset,
        source_file=source_file,
    )
