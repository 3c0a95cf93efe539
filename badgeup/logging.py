"""Logger setup for badgeup.

Every module logs under the ``badgeup`` hierarchy. The console stays quiet on a
successful run; ``--verbose`` lowers it to DEBUG, and ``--log-file`` keeps a full
DEBUG trace of the run regardless of the console level.
"""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "badgeup"
_CONSOLE_FORMAT = "[badgeup] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``badgeup.<name>``, or the root badgeup logger."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install the console handler and, if requested, the debug file sink.

    Raises ``OSError`` when ``log_file`` cannot be opened.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING
    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    handlers.append(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(sink)

    logger = logging.getLogger(_ROOT)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)
    # The logger passes everything its most verbose handler wants.
    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = False
    return logger


__all__ = ["configure_logging", "get_logger"]
