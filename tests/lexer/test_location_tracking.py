"""Tests for source location tracking.

Locations are computed lazily from byte offsets. These tests verify that
line numbers, column offsets and byte offsets line up with the buffer.
"""

import pytest

from parenscan import ScanConfig, ScanError, tokenize
from parenscan.location import SourceLocation, locate
from parenscan.tokens import TokenType


class TestTokenLocations:
    def test_first_token(self) -> None:
        begin = next(tokenize(b"(a)"))
        assert begin.location.lineno == 1
        assert begin.location.col_offset == 1
        assert begin.location.offset == 0
        assert begin.location.end_offset == 1

    def test_second_line(self) -> None:
        tokens = list(tokenize(b"(a\n  bc)"))
        atom = tokens[2]
        assert atom.as_text() == b"bc"
        assert atom.location.lineno == 2
        assert atom.location.col_offset == 3

    def test_quoted_location_is_interior(self) -> None:
        token = next(tokenize(b'  "xy"'))
        assert token.location.offset == 3
        assert token.location.end_offset == 5

    def test_location_cached(self) -> None:
        token = next(tokenize(b"a"))
        assert token.location is token.location

    def test_location_with_source_file(self) -> None:
        token = next(tokenize(b"\n\na", source_file="drivers.conf"))
        assert str(token.location) == "drivers.conf:3:1"

    def test_after_comment(self) -> None:
        tokens = list(tokenize(b"; header\n(x)"))
        assert tokens[0].type is TokenType.BEGIN
        assert tokens[0].location.lineno == 2


class TestErrorLocations:
    def test_unterminated_quote_location(self) -> None:
        with pytest.raises(ScanError) as excinfo:
            list(tokenize(b'(a\n  "open'))
        err = excinfo.value
        assert (err.lineno, err.col_offset, err.offset) == (2, 3, 5)
        assert "2:3" in str(err)

    def test_invalid_symbol_location(self) -> None:
        with pytest.raises(ScanError) as excinfo:
            list(tokenize(b"(ok\nba\x01d)", config=ScanConfig(validate_symbols=True)))
        err = excinfo.value
        assert (err.lineno, err.col_offset) == (2, 3)

    def test_error_source_file(self) -> None:
        with pytest.raises(ScanError) as excinfo:
            list(tokenize(b'"', source_file="pci.conf"))
        assert str(excinfo.value).startswith("pci.conf:1:1 ")


class TestLocate:
    def test_start_of_buffer(self) -> None:
        assert locate(b"abc", 0) == SourceLocation(lineno=1, col_offset=1)

    def test_offset_on_newline(self) -> None:
        loc = locate(b"ab\ncd", 2)
        assert (loc.lineno, loc.col_offset) == (1, 3)

    def test_offset_after_newline(self) -> None:
        loc = locate(b"ab\ncd", 3)
        assert (loc.lineno, loc.col_offset) == (2, 1)

    def test_offset_clamped(self) -> None:
        loc = locate(b"ab", 10)
        assert loc.offset == 2
        assert loc.col_offset == 3

    def test_str_without_file(self) -> None:
        assert str(SourceLocation(4, 2)) == "4:2"
