"""
Module: common.run_log

Purpose:
    Shared run log sink. A logging handler that writes timestamped lines to
    a single file, truncated when the handler is created, with section
    banners marking the start and end of a run.

Key Classes:
    - RunLogHandler: File handler with exclusive per-entry locking
    - RunLogFormatter: Timestamped lines and section banners

Key Functions:
    - configure_run_log(): Attach a RunLogHandler to the package logger
    - detach_run_log(): Remove and close it again
    - log_section(): Emit a section banner

Dependencies:
    - logging (std)
    - common.file_locking: portalocker-backed stream locking

Used By:
    - xml_compiler.cli: Sets up the log for a run
    - batch.pipeline: Section banners around a run
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .file_locking import locked_stream, truncate_file

PACKAGE_LOGGER = "xml_compiler"
DEFAULT_LOG_FILE = "processing.log"

SECTION_RULE = "─" * 44
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class RunLogFormatter(logging.Formatter):
    """
    Formats records as ``[YYYY-MM-DD HH:MM:SS]  message``.

    Records logged with ``extra={"section": True}`` are rendered as a
    banner instead: a blank line, a rule, the title, and a rule.
    """

    def __init__(self):
        super().__init__("[%(asctime)s]  %(message)s", datefmt=TIMESTAMP_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "section", False):
            return f"\n{SECTION_RULE}\n{record.getMessage()}\n{SECTION_RULE}"
        return super().format(record)


class RunLogHandler(logging.Handler):
    """
    A logging handler that appends entries to the run log file.

    The file is truncated when the handler is created. Each entry is
    written while holding both the handler lock (threads) and an exclusive
    file lock (processes), so entries never interleave.
    """

    def __init__(self, path: Path, level: int = logging.INFO, encoding: str = "utf-8"):
        super().__init__(level)
        self.path = Path(path)
        truncate_file(self.path, encoding=encoding)
        self._stream = open(self.path, "a", encoding=encoding)
        self.setFormatter(RunLogFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if self._stream is None:
                return
            with locked_stream(self._stream) as f:
                f.write(message + "\n")
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            if self._stream is not None:
                self._stream.close()
                self._stream = None
        finally:
            self.release()
        super().close()


def configure_run_log(
    path: Path = Path(DEFAULT_LOG_FILE),
    level: int = logging.INFO,
    logger_name: Optional[str] = PACKAGE_LOGGER,
) -> RunLogHandler:
    """
    Attach a RunLogHandler to the specified logger (package logger by default).

    Args:
        path: Log file location. Truncated immediately.
        level: Minimum level written to the file.
        logger_name: Name of logger to attach to. None = root logger.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = RunLogHandler(path, level=level)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler


def detach_run_log(handler: RunLogHandler, logger_name: Optional[str] = PACKAGE_LOGGER) -> None:
    """Remove a RunLogHandler from the logger and close its file."""
    logging.getLogger(logger_name).removeHandler(handler)
    handler.close()


def log_section(title: str, logger: Optional[logging.Logger] = None) -> None:
    """Write a section banner to the run log."""
    (logger or logging.getLogger(PACKAGE_LOGGER)).info(title, extra={"section": True})
