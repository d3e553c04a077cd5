"""
Module: batch

Purpose:
    Directory compilation. Finds root documents one subdirectory below an
    input root, expands their includes in parallel, and writes the results
    flat into an output directory.

Key Functions:
    - compile_directory(): Main entry point for a compile run
    - compile_document(): Expand a single root document
    - expand_files(): Expand documents without writing
    - discover_input_files(): Find root documents

Key Classes:
    - CompilerConfig: Run configuration
    - CompileResult: Run output
    - CompileError: Base error for run-level failures

Used By:
    - xml_compiler.cli: Command-line interface
"""

from .config import CompilerConfig, DEFAULT_FILE_PATTERN
from .discovery import discover_input_files, find_name_collisions
from .pipeline import (
    CompileError,
    CompileResult,
    FilenameCollisionError,
    RootDirectoryError,
    compile_directory,
    compile_document,
    expand_files,
)
from .writer import write_output

__all__ = [
    # Config
    "CompilerConfig",
    "DEFAULT_FILE_PATTERN",
    # Discovery
    "discover_input_files",
    "find_name_collisions",
    # Pipeline
    "compile_directory",
    "compile_document",
    "expand_files",
    "CompileResult",
    "CompileError",
    "FilenameCollisionError",
    "RootDirectoryError",
    # Output
    "write_output",
]
