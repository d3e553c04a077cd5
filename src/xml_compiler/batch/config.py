"""
Module: batch.config

Purpose:
    Configuration dataclass for compiling a directory tree. Immutable
    configuration with validation on construction.

Key Classes:
    - CompilerConfig: Main configuration for a compile run

Dependencies:
    - dataclasses (std)
    - includes.config: ExpansionConfig

Used By:
    - batch.pipeline: Run settings
    - xml_compiler.cli: Built from command-line flags
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from xml_compiler.includes.config import ExpansionConfig

DEFAULT_FILE_PATTERN = r"^\d_.*\.xml$"


@dataclass(frozen=True)
class CompilerConfig:
    """
    Configuration for compiling a directory (immutable).

    Attributes:
        output_dir_name: Output directory created inside the input root.
        file_pattern: Regex a filename must match to be compiled.
        max_workers: Parallel worker threads. None uses the CPU count.
        wrap_cdata: Wrap placeholder blocks left in root output in CDATA.
        strict_collisions: Abort the run when two inputs share a filename
            instead of letting one overwrite the other.
        encoding: Text encoding for reading and writing documents.
        expansion: Include recursion limits.

    Example:
        >>> config = CompilerConfig(max_workers=4, wrap_cdata=True)
    """
    output_dir_name: str = "compiled"
    file_pattern: str = DEFAULT_FILE_PATTERN
    max_workers: Optional[int] = None
    wrap_cdata: bool = False
    strict_collisions: bool = False
    encoding: str = "utf-8"
    expansion: ExpansionConfig = field(default_factory=ExpansionConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.output_dir_name or self.output_dir_name in (".", ".."):
            raise ValueError(f"output_dir_name must name a directory: {self.output_dir_name!r}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive: {self.max_workers}")
        try:
            re.compile(self.file_pattern)
        except re.error as e:
            raise ValueError(f"file_pattern is not a valid regex: {e}") from e

    @property
    def file_regex(self) -> re.Pattern:
        """Compiled file_pattern."""
        return re.compile(self.file_pattern)
