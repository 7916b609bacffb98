# File: tests/test_logger.py
import logging
import sys

from link_scout.logger import LOGGER_NAME, configure, logger


def test_configure_replaces_and_closes_handlers(tmp_path):
    first = configure(level="DEBUG", log_file=tmp_path / "first.log")
    file_handler = first.handlers[1]

    second = configure(level="WARNING")

    assert second is logger is logging.getLogger(LOGGER_NAME)
    assert len(second.handlers) == 1
    assert second.handlers[0].stream is sys.stderr
    assert second.level == logging.WARNING
    assert file_handler.stream is None


def test_log_file_receives_timestamped_records(tmp_path):
    log_file = tmp_path / "run.log"
    configure(level="INFO", log_file=log_file)
    logger.debug("hidden")
    logger.info("Total URLs found: %d", 3)
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Total URLs found: 3" in text
    assert "| INFO" in text
    assert "hidden" not in text
    configure()


def test_records_do_not_reach_root_logger():
    configure()
    assert logger.propagate is False
