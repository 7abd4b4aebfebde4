"""Shared scan position register.

One ScanState exists per scan tree. The lexer advances it; every cursor
in the tree reads and writes the same instance, so there is exactly one
current position for the whole walk.

The register is tagged: it is either scanning at ``offset`` or failed
with a ScanError. Failure is sticky and is observed by every cursor on
its next read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parenscan.errors import ScanError

if TYPE_CHECKING:
    from parenscan.cursor import GroupCursor


class ScanState:
    """Mutable position shared by a lexer and the cursors built on it.

    Attributes:
        offset: Next byte to scan
        failure: The ScanError that stopped the scan, if any
        live: Stack of cursors that can still produce items, root first
        open_groups: BEGIN tokens not yet matched by an END
        token_count: Tokens produced so far
        group_count: BEGIN tokens seen so far
        drained_tokens: Tokens skipped while draining abandoned cursors

    """

    __slots__ = (
        "offset",
        "failure",
        "live",
        "open_groups",
        "token_count",
        "group_count",
        "drained_tokens",
    )

    def __init__(self, offset: int = 0) -> None:
        self.offset = offset
        self.failure: ScanError | None = None
        self.live: list[GroupCursor] = []
        self.open_groups = 0
        self.token_count = 0
        self.group_count = 0
        self.drained_tokens = 0

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def fail(self, error: ScanError) -> None:
        """Record a lexical failure. The first failure wins."""
        if self.failure is None:
            self.failure = error

    def decode(self) -> ScanError | None:
        """Return the recorded failure, or None while scanning cleanly."""
        return self.failure

    def __repr__(self) -> str:
        if self.failure is not None:
            return f"ScanState(failed={self.failure.kind.name})"
        return f"ScanState(offset={self.offset})"
