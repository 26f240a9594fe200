"""Logging for calculator sessions.

A session can span several processes (every restart resumes the slot), so
the log file is appended to and each record carries the process id. That
keeps the records of one interrupted session together and tells the runs
apart. Standard output belongs to the console transport; diagnostics only
ever go to the log file and stderr.
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "checkpoint_calc"
LOG_FORMAT = "%(asctime)s - pid %(process)d - %(levelname)s - %(message)s"


def setup_logging(
    log_file: Optional[str],
    *,
    quiet: bool = False,
    debug: bool = False,
) -> logging.Logger:
    """Configure and return the shared `checkpoint_calc` logger.

    Checkpoint records are DEBUG, resume and session boundaries INFO, fatal
    input or storage errors CRITICAL. Without ``debug`` the file gets INFO and
    up while stderr only shows warnings, so an interactive terminal is not
    interleaved with bookkeeping.
    """
    logger = logging.getLogger(LOGGER_NAME)
    # Keep propagation enabled so pytest caplog can capture records even when
    # stderr output is suppressed.
    logger.propagate = True

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as exc:
            print(
                f"[logging] Could not open log file '{log_file}': {exc}",
                file=sys.stderr,
            )

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level if debug else logging.WARNING)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.debug("Logging configured for pid %d", os.getpid())
    return logger
