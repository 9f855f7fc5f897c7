"""Tests for logging configuration."""

import logging

from record_table.utils.logging_config import get_logger, setup_logging


def test_log_file_receives_child_logger_records(tmp_path):
    log_file = tmp_path / "logs" / "record_table.log"
    logger = setup_logging("DEBUG", log_file=log_file, log_to_console=False)
    try:
        get_logger("view_service").debug("view page 1/1")
        for handler in logger.handlers:
            handler.flush()
        assert "record_table.view_service | view page 1/1" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


def test_unknown_level_falls_back_to_info():
    logger = setup_logging("chatty", log_to_console=False)
    assert logger.level == logging.INFO
    assert get_logger() is logger
