"""Tests for CLI logging setup."""

import logging

import pytest

from logs.logging_utils import setup_logging, verbosity_to_level


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [(-1, logging.WARNING), (0, logging.WARNING), (1, logging.INFO), (5, logging.DEBUG)],
)
def test_verbosity_to_level(verbosity, level) -> None:
    assert verbosity_to_level(verbosity) == level


def test_log_file_receives_records(tmp_path) -> None:
    log_file = tmp_path / "medovik.log"
    try:
        assert setup_logging(1, str(log_file)) == logging.INFO
        logging.getLogger("interface.persistence").info("Saved recipe %r", "كعكة")
        logging.getLogger("analysis").debug("hidden")
        for handler in logging.getLogger().handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "I interface.persistence: Saved recipe 'كعكة'" in text
        assert "hidden" not in text
    finally:
        setup_logging(0)
