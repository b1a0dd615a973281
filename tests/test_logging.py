import logging

from allergen_scanner.config import CFG
from allergen_scanner.core.logging import LOGGER_NAME, get_logger


def test_single_named_logger():
    assert get_logger() is logging.getLogger(LOGGER_NAME)
    assert get_logger() is get_logger()


def test_records_reach_log_file():
    log = get_logger()
    log.warning("records reach the log file")
    for handler in log.handlers:
        handler.flush()

    path = CFG.logs_dir / CFG.log_filename
    assert "records reach the log file" in path.read_text(encoding="utf-8")
