"""Input file discovery.

Finds the documents a compile run processes: files exactly one
subdirectory below the input root whose names match the configured pattern.
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)


def discover_input_files(
    root: Path,
    pattern: re.Pattern,
    *,
    exclude: Iterable[Path] = (),
) -> List[Path]:
    """Find ``<root>/<subdir>/<file>`` entries whose filename matches ``pattern``.

    Files directly in ``root`` or nested deeper than one subdirectory are
    never selected. Names that do not match are silently ignored. Symlinked
    subdirectories and symlinked files are not followed. A subdirectory that
    cannot be listed is logged and skipped.

    Args:
        root: Input root directory.
        pattern: Regex matched against the bare filename.
        exclude: Subdirectories of ``root`` to skip (e.g. the output directory).

    Returns:
        Matching files sorted by path.

    Examples:
        >>> discover_input_files(Path("site"), re.compile(r"^\\d_.*\\.xml$"))
        [PosixPath('site/pages/1_index.xml'), PosixPath('site/pages/2_about.xml')]
    """
    excluded = {p.resolve() for p in exclude}
    files: List[Path] = []

    for subdir in root.iterdir():
        if subdir.is_symlink() or not subdir.is_dir() or subdir.resolve() in excluded:
            continue
        try:
            entries = list(subdir.iterdir())
        except OSError as e:
            logger.warning(f"Skipping unreadable directory {subdir}: {e}")
            continue
        for entry in entries:
            if entry.is_symlink() or not entry.is_file():
                continue
            if pattern.match(entry.name):
                files.append(entry)

    files.sort()
    logger.debug(f"Discovered {len(files)} input file(s) under {root}")
    return files


def find_name_collisions(files: Iterable[Path]) -> Dict[str, List[Path]]:
    """Group files by filename, keeping only names that occur more than once.

    Output is written flat, so each of these groups ends up as a single file.
    """
    by_name: Dict[str, List[Path]] = defaultdict(list)
    for path in files:
        by_name[path.name].append(path)
    return {name: paths for name, paths in by_name.items() if len(paths) > 1}
