"""Error-path and malformed input tests.

Tests exception construction and formatting, and how lexical failures
surface through each public entry point.
"""

import pytest

from parenscan import Document, open_document, tokenize
from parenscan.errors import CursorOrderError, ParenscanError, ScanError, ScanErrorKind
from parenscan.lexer import ScanState

# =========================================================================
# ScanError construction and formatting
# =========================================================================


class TestScanErrorFormatting:
    """Verify ScanError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ScanError(ScanErrorKind.UNTERMINATED_QUOTE, 7)
        assert str(err) == "unterminated quoted string (byte 7)"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_number(self) -> None:
        err = ScanError(ScanErrorKind.INVALID_SYMBOL_CHAR, 3, lineno=42)
        assert str(err).startswith("42 ")
        assert "invalid character in atom" in str(err)

    def test_with_line_and_column(self) -> None:
        err = ScanError(ScanErrorKind.INVALID_UTF8, 3, lineno=10, col_offset=5)
        assert "10:5" in str(err)

    def test_with_source_file(self) -> None:
        err = ScanError(
            ScanErrorKind.INVALID_UTF8, 0, lineno=1, col_offset=1, source_file="x.conf"
        )
        assert str(err).startswith("x.conf:1:1 ")

    def test_is_parenscan_error(self) -> None:
        assert isinstance(ScanError(ScanErrorKind.INVALID_UTF8, 0), ParenscanError)

    def test_equality_by_kind_and_offset(self) -> None:
        a = ScanError(ScanErrorKind.UNTERMINATED_QUOTE, 1, lineno=1)
        b = ScanError(ScanErrorKind.UNTERMINATED_QUOTE, 1)
        c = ScanError(ScanErrorKind.UNTERMINATED_QUOTE, 2)
        assert a == b
        assert a != c
        assert hash(a) == hash(b)


class TestCursorOrderError:
    def test_format(self) -> None:
        err = CursorOrderError(1, 3)
        assert "depth 1" in str(err)
        assert "depth 3" in str(err)

    def test_is_parenscan_error(self) -> None:
        assert isinstance(CursorOrderError(0, 1), ParenscanError)


# =========================================================================
# ScanState register
# =========================================================================


class TestScanState:
    def test_fresh_state_decodes_to_none(self) -> None:
        state = ScanState()
        assert state.decode() is None
        assert not state.failed

    def test_first_failure_wins(self) -> None:
        state = ScanState()
        first = ScanError(ScanErrorKind.UNTERMINATED_QUOTE, 0)
        state.fail(first)
        state.fail(ScanError(ScanErrorKind.INVALID_UTF8, 5))
        assert state.decode() is first
        assert state.failed

    @pytest.mark.parametrize("kind", list(ScanErrorKind))
    def test_each_kind_decodes_to_itself(self, kind: ScanErrorKind) -> None:
        state = ScanState()
        state.fail(ScanError(kind, 0))
        assert state.decode().kind is kind

    def test_repr(self) -> None:
        state = ScanState(4)
        assert repr(state) == "ScanState(offset=4)"
        state.fail(ScanError(ScanErrorKind.INVALID_UTF8, 4))
        assert repr(state) == "ScanState(failed=INVALID_UTF8)"


# =========================================================================
# Malformed input through the public API
# =========================================================================


class TestMalformedInput:
    @pytest.mark.parametrize(
        "source",
        [b'"', b"'", b'(a "b', b"(a 'b\\')", b'((("deep']
    )
    def test_unterminated_everywhere(self, source: bytes) -> None:
        with pytest.raises(ScanError):
            list(tokenize(source))
        assert Document(source).finish().kind is ScanErrorKind.UNTERMINATED_QUOTE

    def test_error_not_raised_from_cursor_reads(self) -> None:
        with open_document(b'(a "b') as doc:
            group = doc.cursor().next_group()
            assert list(group) == [b"a"]
        assert doc.error.kind is ScanErrorKind.UNTERMINATED_QUOTE

    def test_unbalanced_is_not_an_error(self) -> None:
        with open_document(b"((a") as doc:
            pass
        assert doc.error is None
        assert doc.unclosed_depth == 2

    def test_too_many_closers_is_not_an_error(self) -> None:
        with open_document(b"(a))") as doc:
            pass
        assert doc.error is None
        assert doc.unclosed_depth == 0
