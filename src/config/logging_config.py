# src/config/logging_config.py

"""Per-run timestamped logging configuration for smartshop.

Each launch writes a dedicated log file inside ``logs/`` named after the
run mode and launch time (e.g. ``logs/api_20260214_153045.log`` for the
proxy server, ``logs/tui_...`` for the terminal frontend).

All ``smartshop.*`` loggers share the file handler. When the proxy
server runs, uvicorn's own loggers are attached to the same handlers so
access lines and upstream failures end up in one file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(mode: str = "run", console_level: int = logging.WARNING) -> Path:
    """Initialise the ``smartshop`` logger for the current run.

    Args:
        mode: Prefix for the log file name (``api``, ``tui``, ``cli``).
        console_level: Threshold for the stderr handler. The TUI keeps
            the default so log lines do not paint over the screen.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"{mode}_{timestamp}.log"

    root_logger = logging.getLogger("smartshop")
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls (tests, reloads) keep the first set of handlers
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    if mode == "api":
        for name in _UVICORN_LOGGERS:
            logging.getLogger(name).addHandler(file_handler)

    root_logger.info(
        "Logging initialised (%s, server=%s) - log file: %s",
        mode,
        Settings.SERVER_NAME,
        log_file,
    )

    return log_file
