"""Parenscan ScanAccumulator — opt-in profiling for document scans.

This module provides accumulated metrics during scanning:
- Bytes scanned
- Tokens produced, groups entered
- Tokens skipped while draining abandoned groups

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from parenscan import open_document
    from parenscan.profiling import profiled_scan

    with profiled_scan() as metrics:
        with open_document(data) as doc:
            for item in doc.cursor():
                ...

    print(metrics.summary())
    # {"total_ms": 0.4, "bytes_scanned": 120, "token_count": 31, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during document scanning.

    Attributes:
        start_time: Profiling start timestamp.
        bytes_scanned: Bytes the shared position advanced over.
        token_count: Tokens produced by the lexer.
        group_count: Groups opened (BEGIN tokens).
        drained_tokens: Tokens consumed by draining abandoned cursors.
        scan_calls: Number of finished documents recorded.
        errors: Number of documents that ended in a scan error.

    """

    start_time: float = field(default_factory=perf_counter)
    bytes_scanned: int = 0
    token_count: int = 0
    group_count: int = 0
    drained_tokens: int = 0
    scan_calls: int = 0
    errors: int = 0

    def record_scan(
        self,
        bytes_scanned: int,
        token_count: int,
        group_count: int,
        drained_tokens: int,
        *,
        failed: bool = False,
    ) -> None:
        """Record one finished document walk."""
        self.scan_calls += 1
        self.bytes_scanned += bytes_scanned
        self.token_count += token_count
        self.group_count += group_count
        self.drained_tokens += drained_tokens
        if failed:
            self.errors += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "bytes_scanned": self.bytes_scanned,
            "token_count": self.token_count,
            "group_count": self.group_count,
            "drained_tokens": self.drained_tokens,
            "scan_calls": self.scan_calls,
            "errors": self.errors,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator populated as documents finish.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
