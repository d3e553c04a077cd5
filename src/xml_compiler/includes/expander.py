"""
Module: includes.expander

Purpose:
    Recursive include expansion. Reads a document, replaces every include
    directive with the (recursively expanded) content of the referenced file,
    and cleans up nested content before splicing it into its parent.

Key Functions:
    - expand_includes(): Main entry point for a single document

Key Classes:
    - IncludeError: Base class for expansion limits being hit
    - IncludeDepthError: Nesting deeper than ExpansionConfig.max_depth
    - IncludeCycleError: File already being expanded in the same chain

Dependencies:
    - includes.patterns: Directive matching and text cleanup
    - includes.paths: Include reference resolution

Used By:
    - batch.pipeline: Expands every discovered root document
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional, Tuple

from .config import ExpansionConfig
from .paths import normalize_include_path
from .patterns import INCLUDE_PATTERN, clean_nested, flatten_whitespace

logger = logging.getLogger(__name__)


class IncludeError(Exception):
    """Error raised when an include cannot be expanded."""
    pass


class IncludeDepthError(IncludeError):
    """Include nesting exceeded the configured maximum depth."""
    pass


class IncludeCycleError(IncludeError):
    """Include refers back to a file that is still being expanded."""
    pass


def missing_include_marker(include_path: Path) -> str:
    """Comment left in place of a directive whose target does not exist."""
    return f"<!-- Include not found: {include_path} -->"


def include_error_marker(include_path: Path, error: Exception) -> str:
    """Comment left in place of a directive whose target failed to expand."""
    return f"<!-- Include error: {include_path}: {error} -->"


def expand_includes(
    path: Path,
    is_root: bool = True,
    *,
    config: Optional[ExpansionConfig] = None,
    encoding: str = "utf-8",
) -> str:
    """
    Expand every include directive in a document.

    Directives are matched in a single pass over the document's own text.
    Each one is resolved relative to the document's directory and then:

    - missing target: replaced by ``<!-- Include not found: <path> -->``
    - target expands: replaced by its expanded text with placeholders
      unwrapped, comments stripped and whitespace flattened to one line
    - target fails: replaced by ``<!-- Include error: <path>: <error> -->``

    Text introduced by a substitution is never re-scanned at the same level.
    A root document is returned as spliced. A nested document additionally
    has its own leftover placeholders unwrapped and comments stripped.

    Args:
        path: Document to expand.
        is_root: True when the document was requested directly rather than
            reached through an include.
        config: Recursion limits. Defaults to ExpansionConfig().
        encoding: Text encoding for every file read.

    Returns:
        Expanded document text.

    Raises:
        OSError: If the document itself cannot be read.
        UnicodeDecodeError: If the document is not valid text in ``encoding``.

    Example:
        >>> text = expand_includes(Path("pages/1_index.xml"))
    """
    config = config or ExpansionConfig()
    return _expand(path, is_root, config, encoding, depth=0, active=())


def _expand(
    path: Path,
    is_root: bool,
    config: ExpansionConfig,
    encoding: str,
    *,
    depth: int,
    active: Tuple[Path, ...],
) -> str:
    if depth > config.max_depth:
        raise IncludeDepthError(
            f"Include depth {depth} exceeds maximum of {config.max_depth}"
        )

    chain = active
    if config.detect_cycles:
        key = path.resolve()
        if key in active:
            raise IncludeCycleError(f"Include cycle detected at {path}")
        chain = active + (key,)

    # newline="" keeps CRLF line endings intact
    with open(path, "r", encoding=encoding, newline="") as f:
        content = f.read()
    base_dir = path.parent

    def _replace(match: re.Match) -> str:
        include_path = normalize_include_path(base_dir, match.group(1).strip())

        if not include_path.exists():
            logger.warning(f"Missing include: {include_path}")
            return missing_include_marker(include_path)

        try:
            included = _expand(
                include_path,
                False,
                config,
                encoding,
                depth=depth + 1,
                active=chain,
            )
        except (OSError, UnicodeDecodeError, IncludeError) as e:
            logger.error(f"Error reading include {include_path}: {e}")
            return include_error_marker(include_path, e)

        logger.info(f"Included: {include_path}")
        return flatten_whitespace(clean_nested(included))

    expanded = INCLUDE_PATTERN.sub(_replace, content)

    if is_root:
        return expanded
    return clean_nested(expanded)
