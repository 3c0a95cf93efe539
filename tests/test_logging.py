"""Tests for badgeup.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from badgeup.logging import configure_logging, get_logger


def test_get_logger_nests_under_badgeup() -> None:
    assert get_logger("locator").name == "badgeup.locator"
    assert get_logger().name == "badgeup"


def test_console_is_quiet_unless_verbose() -> None:
    logger = configure_logging()
    assert [handler.level for handler in logger.handlers] == [logging.WARNING]
    assert logger.level == logging.WARNING

    logger = configure_logging(verbose=True)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_log_file_records_debug_while_console_stays_quiet(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = configure_logging(log_file=log_file)

    get_logger("manifest").debug("package %s", "foo")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert "badgeup.manifest: package foo" in log_file.read_text(encoding="utf-8")
    configure_logging()
