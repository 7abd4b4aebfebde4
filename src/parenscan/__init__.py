"""
Parenscan — zero-copy lexer and lazy cursors for parenthesized notation

Scans S-expression style configuration data (atoms, quoted strings,
`;` comments, nested `( )` groups) straight out of a byte buffer. Nothing
is copied and no tree is built: nested groups are walked with cursors that
share a single scan position.

Quick Start:
    >>> from parenscan import open_document
    >>> with open_document(b'(pci-drivers (1af4 (1000 "virtio/net")))') as doc:
    ...     top = doc.cursor().next_group()
    ...     bytes(top.next_text())
    b'pci-drivers'

    >>> # Flat token stream
    >>> from parenscan import tokenize
    >>> [t.type.name for t in tokenize(b"(a b)")]
    ['BEGIN', 'STR', 'STR', 'END']

Variants:
    >>> from parenscan import ScanConfig
    >>> doc = open_document(b"(caf\\xc3\\xa9)", config=ScanConfig(decode_text=True))
    >>> doc.cursor().next_group().next_text()
    'café'
"""

from collections.abc import Iterator

from parenscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from parenscan.cursor import CursorState, Document, GroupCursor
from parenscan.errors import CursorOrderError, ParenscanError, ScanError, ScanErrorKind
from parenscan.lexer import Buffer, Lexer, ScanState
from parenscan.location import SourceLocation, locate
from parenscan.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from parenscan.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: Buffer,
    *,
    config: ScanConfig | None = None,
    source_file: str | None = None,
) -> Iterator[Token]:
    """Tokenize source into a flat BEGIN/END/STR stream.

    Args:
        source: Buffer to scan (str is encoded as UTF-8)
        config: Scan configuration (uses the active context config if None)
        source_file: Optional source file path for error messages

    Raises:
        ScanError: On the first lexical error, while iterating.
    """
    return Lexer(source, config=config, source_file=source_file).tokenize()


def open_document(
    source: Buffer,
    *,
    config: ScanConfig | None = None,
    source_file: str | None = None,
) -> Document:
    """Create a Document over source for lazy cursor walking.

    Use it as a context manager so the tree is drained on every exit path;
    ``doc.error`` (or the return value of ``doc.finish()``) then reports
    any lexical error.
    """
    return Document(source, config=config, source_file=source_file)


__all__ = [
    # API
    "open_document",
    "tokenize",
    # Cursor layer
    "CursorState",
    "Document",
    "GroupCursor",
    # Lexer
    "Buffer",
    "Lexer",
    "ScanState",
    "Token",
    "TokenType",
    # Config
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "CursorOrderError",
    "ParenscanError",
    "ScanError",
    "ScanErrorKind",
    # Location
    "SourceLocation",
    "locate",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
