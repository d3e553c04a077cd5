"""Common utilities shared across the compiler."""

from __future__ import annotations

from .run_log import (
    DEFAULT_LOG_FILE,
    PACKAGE_LOGGER,
    RunLogFormatter,
    RunLogHandler,
    configure_run_log,
    detach_run_log,
    log_section,
)
from .timing import TimingLog, timed_phase

__all__ = [
    # run_log
    "DEFAULT_LOG_FILE",
    "PACKAGE_LOGGER",
    "RunLogFormatter",
    "RunLogHandler",
    "configure_run_log",
    "detach_run_log",
    "log_section",
    # timing
    "TimingLog",
    "timed_phase",
]
