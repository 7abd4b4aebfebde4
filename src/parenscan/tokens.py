"""Token and TokenType definitions for the Parenscan lexer.

The lexer produces a flat stream of Token objects; the cursor layer turns
that stream into a lazily walked tree.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
STR token values are memoryview slices into the scanned buffer (or str
when text decoding is enabled). Line/column locations are computed lazily
from the byte offsets, only when `.location` is accessed.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parenscan.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    BEGIN = auto()  # (
    END = auto()  # )
    STR = auto()  # atom or quoted string


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Interior text for STR tokens (memoryview or str), None for
            BEGIN and END
        _start_offset: Absolute start position of the value in the buffer
        _end_offset: Absolute end position of the value in the buffer
        _source: The scanned buffer, for lazy location lookup
        _source_file: Optional source file path

    """

    type: TokenType
    value: memoryview | str | None
    _start_offset: int
    _end_offset: int
    _source: bytes = field(default=b"", repr=False, compare=False, hash=False)
    _source_file: str | None = field(default=None, repr=False, compare=False, hash=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from parenscan.location import locate

        loc = locate(
            self._source,
            self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def as_text(self) -> memoryview | str | None:
        """Return the STR value, or None for delimiters."""
        if self.type is TokenType.STR:
            return self.value
        return None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is not TokenType.STR:
            return f"Token({self.type.name}, @{self._start_offset})"
        val = self.value
        if isinstance(val, memoryview):
            val = val.tobytes()
        if len(val) > 20:
            val = val[:17] + (b"..." if isinstance(val, bytes) else "...")
        return f"Token(STR, {val!r}, @{self._start_offset})"
