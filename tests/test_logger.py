"""
linetok — Structured Logger Tests
=================================
Run with: python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from linetok.core.logger import StructuredLogger


class TestStructuredLogger:
    def test_log_records_entry(self):
        logger = StructuredLogger(name="test")
        entry = logger.log("capture", token_type="email")
        assert entry["logger"] == "test"
        assert entry["level"] == "INFO"
        assert entry["operation"] == "capture"
        assert entry["token_type"] == "email"
        assert logger.get_entries() == [entry]

    def test_filters(self):
        logger = StructuredLogger()
        logger.log("match")
        logger.warn("line_too_long")
        logger.error("register_failed")
        assert len(logger.get_entries(operation="match")) == 1
        assert len(logger.get_entries(level="ERROR")) == 1

    def test_min_level_drops_debug(self):
        logger = StructuredLogger(min_level="INFO")
        assert logger.debug("match") is None
        assert len(logger) == 0

    def test_unknown_min_level(self):
        with pytest.raises(ValueError):
            StructuredLogger(min_level="LOUD")

    def test_cap_trims_oldest(self):
        logger = StructuredLogger(max_entries=4)
        for i in range(5):
            logger.log("op", i=i)
        assert [e["i"] for e in logger.get_entries()] == [2, 3, 4]

    def test_console_prints_to_stderr(self, capsys):
        logger = StructuredLogger(name="finder", console=True)
        logger.log("capture", token_type="number")
        err = capsys.readouterr().err
        assert "[finder] capture" in err
        assert '"token_type": "number"' in err

    def test_clear(self):
        logger = StructuredLogger()
        logger.log("op")
        logger.clear()
        assert logger.get_entries() == []

    def test_empty_logger_is_truthy(self):
        logger = StructuredLogger()
        assert len(logger) == 0
        assert bool(logger) is True
