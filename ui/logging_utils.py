"""Logging setup shared by the CLI, API and web entry points."""
from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure console logging and, when ``REPOQA_LOG_FILE`` is set, a log file.

    An explicit ``level`` overrides ``REPOQA_LOG_LEVEL``. Calling this again
    after handlers exist only adjusts the level.
    """
    root_logger = logging.getLogger()
    level_name = (level or os.getenv("REPOQA_LOG_LEVEL", "INFO")).upper()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    if root_logger.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    log_file = os.getenv("REPOQA_LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # urllib3 logs every connection at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = ["setup_logging", "LOG_FORMAT"]
