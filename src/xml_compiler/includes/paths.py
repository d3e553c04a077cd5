"""Include reference resolution.

Turns the raw path captured from an include directive into a candidate
location relative to the directory of the including document.
"""

from __future__ import annotations

import os
from pathlib import Path


def normalize_include_path(base_dir: Path, include: str, *, sep: str = os.sep) -> Path:
    """Join an include reference onto the including document's directory.

    On platforms whose native separator is a backslash the reference is used
    as written. Everywhere else backslashes are converted to forward slashes
    first, so ``parts\\header.xml`` and ``parts/header.xml`` resolve to the
    same file.

    The result is a candidate only. Existence is checked by the caller.

    Args:
        base_dir: Directory containing the including document.
        include: Reference exactly as captured from the directive.
        sep: Native path separator (overridable for tests).

    Returns:
        Candidate path for the referenced file.

    Examples:
        >>> normalize_include_path(Path("/data/sub"), "parts\\\\a.xml", sep="/")
        PosixPath('/data/sub/parts/a.xml')
    """
    normalized = include if sep == "\\" else include.replace("\\", "/")
    return base_dir / normalized
