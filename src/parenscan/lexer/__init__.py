"""State-machine lexer for Parenscan.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ScanState
├── core.py              # Lexer class (mixin composition + dispatch)
├── charsets.py          # Byte classes
├── state.py             # ScanState, the shared position register
└── scanners/            # Token-shape scanners
    ├── quoted.py        # "..." and '...'
    ├── comment.py       # ; to end of line
    └── atom.py          # unquoted atoms

Usage:
    >>> from parenscan.lexer import Lexer
    >>> [t.type.name for t in Lexer(b"(a)").tokenize()]
    ['BEGIN', 'STR', 'END']

"""

from parenscan.lexer.core import Buffer, Lexer, coerce_buffer
from parenscan.lexer.state import ScanState

__all__ = ["Buffer", "Lexer", "ScanState", "coerce_buffer"]
