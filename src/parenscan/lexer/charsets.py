"""Byte classes used by the lexer.

Whitespace follows ASCII whitespace as space, tab, LF, FF and CR
(vertical tab is an ordinary byte).
"""

from __future__ import annotations

WHITESPACE = frozenset(b" \t\n\x0c\r")

OPEN = ord("(")
CLOSE = ord(")")
COMMENT = ord(";")
ESCAPE = ord("\\")
QUOTES = frozenset(b"\"'")

# Bytes that end an unquoted atom (not consumed)
ATOM_TERMINATORS = WHITESPACE | {OPEN, CLOSE}

# Printable ASCII accepted inside atoms when symbols are validated
SYMBOL_MIN = 0x21
SYMBOL_MAX = 0x7E
