"""
Module: common.file_locking

Purpose:
    Cross-platform file locking for the shared run log. Uses portalocker
    for Mac, Windows, and Linux compatibility.

Key Functions:
    - locked_stream: Context manager holding an exclusive lock on an open file
    - truncate_file: Create or empty a file under lock

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - common.run_log: Serialised log line writes
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, TextIO

import portalocker


@contextmanager
def locked_stream(
    stream: TextIO,
    lock_type: int = portalocker.LOCK_EX,
) -> Generator[TextIO, None, None]:
    """
    Hold a lock on an already open file for the duration of the block.

    The stream is flushed before the lock is released so another writer
    never sees a partial entry.

    Args:
        stream: Open file handle.
        lock_type: Lock type (LOCK_EX for exclusive, LOCK_SH for shared).

    Yields:
        The same stream with the lock held.

    Example:
        >>> with locked_stream(handle) as f:
        ...     f.write("entry\\n")
    """
    portalocker.lock(stream, lock_type)
    try:
        yield stream
        stream.flush()
    finally:
        portalocker.unlock(stream)


def truncate_file(path: Path, encoding: str = "utf-8") -> None:
    """Create ``path`` (and its parents) or empty it if it already exists."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding=encoding) as f:
        with locked_stream(f):
            f.truncate(0)
