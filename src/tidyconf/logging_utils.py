"""Logging setup for the tidyconf command line tool.

Configuration diagnostics are logged by ``tidyconf.diagnostics`` as they are
recorded. Their text already opens with ``Warning:`` (bad arguments, unknown
options) or ``Config:`` (unreadable files), so on the console they are shown
without the level name that other records get.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

DIAGNOSTICS_LOGGER = "tidyconf.diagnostics"

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class DiagnosticFormatter(logging.Formatter):
    """Formatter that prints configuration diagnostics as bare messages."""

    def format(self, record: logging.LogRecord) -> str:
        if record.name == DIAGNOSTICS_LOGGER:
            return record.getMessage()
        return super().format(record)


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name such as ``"info"`` into its numeric value.

    Raises
    ------
    ValueError
        If ``log_level`` is a string that names no logging level.

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install console (and optionally file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or its name (e.g., "WARNING").
    log_file : str, optional
        Path of a file that receives a copy of every record.
    trace_mode : bool, default False
        Prefix every record, diagnostics included, with a timestamp and
        logger name.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter: logging.Formatter
    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = DiagnosticFormatter(PLAIN_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            # files always get the full trace layout
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT))
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)

    return root_logger
