"""Tests for utility modules."""

import logging

from parenscan import Document, ScanConfig


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from parenscan.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "parenscan.mymodule"

    def test_logger_with_prefix(self) -> None:
        from parenscan.utils.logger import get_logger

        logger = get_logger("parenscan.cursor")
        assert logger.name == "parenscan.cursor"

    def test_logger_name_starting_with_parenscan_not_submodule(self) -> None:
        from parenscan.utils.logger import get_logger

        logger = get_logger("parenscan_other")
        assert logger.name == "parenscan.parenscan_other"

    def test_logger_exact_name(self) -> None:
        from parenscan.utils.logger import get_logger

        assert get_logger("parenscan").name == "parenscan"


class TestScanLogging:
    def test_failure_logged_at_debug(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="parenscan")
        Document(b'("open').finish()
        records = [r for r in caplog.records if r.name == "parenscan.lexer.core"]
        assert len(records) == 1
        assert "unterminated quoted string" in records[0].getMessage()

    def test_drain_logged_at_debug(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="parenscan")
        doc = Document(b"((b) c)", config=ScanConfig())
        doc.cursor().next_group().next_group()
        doc.finish()
        messages = [r.getMessage() for r in caplog.records if r.name == "parenscan.cursor"]
        assert any("depth 2" in m for m in messages)

    def test_silent_by_default(self, caplog) -> None:
        caplog.set_level(logging.WARNING, logger="parenscan")
        Document(b'("open').finish()
        assert not [r for r in caplog.records if r.name.startswith("parenscan")]
