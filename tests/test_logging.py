import logging

from rich.logging import RichHandler

from not_found_error import NotFoundError, Result, locate
from not_found_error.utils.logging import enable_rich_logging, get


def test_logger_levels():
    logger = get("debug")
    assert logger.level == 10  # DEBUG
    logger = get("error")
    assert logger.level == 40  # ERROR


def test_rich_handler_installed_once():
    logger = enable_rich_logging("info")
    enable_rich_logging("info")
    assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1


def test_debug_record_on_miss(caplog):
    get("debug")
    with caplog.at_level(logging.DEBUG, logger="not_found_error"):
        assert locate([], lambda n: True) == Result.failure(NotFoundError())
    assert any("no element matched" in r.getMessage() for r in caplog.records)
