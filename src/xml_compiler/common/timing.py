"""
Module: common.timing

Purpose:
    Timing instrumentation for compile runs, to spot documents whose
    include trees are slow to expand.

Key Classes:
    - TimingLog: Collects per-file durations

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - batch.pipeline: Per-file compile timings
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator, List, Tuple


@dataclass
class TimingLog:
    """
    Timing metrics for a compile run.

    Safe to record into from several worker threads.

    Attributes:
        file_timings: Dict of file key -> duration_seconds

    Example:
        >>> log = TimingLog()
        >>> log.record("sub/1_index.xml", 0.012)
        >>> print(log.summary())
    """
    file_timings: Dict[str, float] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, key: str, duration: float) -> None:
        """Record the duration for one file."""
        with self._lock:
            self.file_timings[key] = duration

    @property
    def total(self) -> float:
        """Sum of all recorded durations."""
        return sum(self.file_timings.values())

    def get_slowest(self, n: int = 3) -> List[Tuple[str, float]]:
        """Get the N slowest files with their durations."""
        ranked = sorted(self.file_timings.items(), key=lambda x: x[1], reverse=True)
        return ranked[:n]

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        if not self.file_timings:
            return "Timing: no files compiled"

        count = len(self.file_timings)
        lines = [f"Timing: {count} file(s), {self.total:.3f}s total, {self.total / count:.3f}s average"]
        for key, duration in self.get_slowest(3):
            lines.append(f"  {key}: {duration:.3f}s")
        return "\n".join(lines)


@contextmanager
def timed_phase(log: TimingLog, key: str) -> Generator[None, None, None]:
    """
    Context manager for timing a code block.

    The duration is recorded even if the block raises.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "sub/1_index.xml"):
        ...     text = expand_includes(path)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        log.record(key, time.perf_counter() - start)
