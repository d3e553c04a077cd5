"""
Module: batch.writer

Purpose:
    Atomic output writing. A compiled document is written to a temporary
    file beside its destination and moved into place, so a failed write
    never leaves partial output behind.

Key Functions:
    - write_output(): Write text atomically

Used By:
    - batch.pipeline: Persists each compiled document
"""

from __future__ import annotations

import tempfile
from pathlib import Path


def write_output(text: str, path: Path, encoding: str = "utf-8") -> Path:
    """
    Atomically write ``text`` to ``path``.

    Line endings are written exactly as they appear in ``text``.

    Args:
        text: Compiled document text.
        path: Destination file. Its parent directory is created if needed.
        encoding: Text encoding.

    Returns:
        The destination path.

    Raises:
        OSError: If the temporary file cannot be written or moved into place.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=encoding,
            newline="",
            suffix=".tmp",
            dir=path.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(text)
        temp_path.replace(path)
    except BaseException:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise
    return path
