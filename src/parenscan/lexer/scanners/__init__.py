"""Scanner mixins for the Lexer.

Each mixin handles one token shape:
- QuotedScannerMixin: "..." and '...' strings
- CommentScannerMixin: ; line comments
- AtomScannerMixin: unquoted atoms
"""

from parenscan.lexer.scanners.atom import AtomScannerMixin
from parenscan.lexer.scanners.comment import CommentScannerMixin
from parenscan.lexer.scanners.quoted import QuotedScannerMixin

__all__ = [
    "AtomScannerMixin",
    "CommentScannerMixin",
    "QuotedScannerMixin",
]
