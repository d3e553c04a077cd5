"""
Module: batch.pipeline

Purpose:
    Main orchestrator for compiling a directory tree. Discovers root
    documents, expands each one on a thread pool, and writes every result
    flat into the output directory.

Key Functions:
    - compile_directory(): Main entry point for a compile run
    - compile_document(): Expand a single root document
    - expand_files(): Expand a list of documents without writing

Key Classes:
    - CompileResult: Container for run output
    - CompileError: Base error for run-level failures

Dependencies:
    - concurrent.futures: Thread pool execution
    - xml_compiler.includes: Include expansion
    - batch.discovery / batch.writer: Input and output

Used By:
    - xml_compiler.cli: Command-line compilation
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from xml_compiler.common.run_log import log_section
from xml_compiler.common.timing import TimingLog, timed_phase
from xml_compiler.includes.expander import expand_includes
from xml_compiler.includes.patterns import wrap_placeholders_in_cdata

from .config import CompilerConfig
from .discovery import discover_input_files, find_name_collisions
from .writer import write_output

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CompileError(Exception):
    """Error that aborts a whole compile run."""
    pass


class RootDirectoryError(CompileError):
    """Input root directory does not exist."""
    pass


class FilenameCollisionError(CompileError):
    """Two input files would be written to the same output file."""

    def __init__(self, message: str, collisions: Dict[str, List[Path]]):
        super().__init__(message)
        self.collisions = collisions


@dataclass
class CompileResult:
    """
    Result of compiling a directory.

    Attributes:
        root: Input root directory.
        output_dir: Directory where compiled documents were written.
        outputs: Input path -> output path for every successful file.
        failures: Input path -> error text for every failed file.
        timings: Per-file durations.
    """
    root: Path
    output_dir: Path
    outputs: Dict[Path, Path] = field(default_factory=dict)
    failures: Dict[Path, str] = field(default_factory=dict)
    timings: TimingLog = field(default_factory=TimingLog)

    @property
    def processed_count(self) -> int:
        return len(self.outputs)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


def compile_document(path: Path, config: Optional[CompilerConfig] = None) -> str:
    """
    Expand a root document and apply the output-boundary transforms.

    Args:
        path: Root document.
        config: Run configuration. Defaults to CompilerConfig().

    Returns:
        Final document text.

    Raises:
        OSError: If the document cannot be read.
        UnicodeDecodeError: If the document is not valid text.
    """
    config = config or CompilerConfig()
    text = expand_includes(
        path,
        is_root=True,
        config=config.expansion,
        encoding=config.encoding,
    )
    if config.wrap_cdata:
        text = wrap_placeholders_in_cdata(text)
    return text


def expand_files(
    paths: Sequence[Path],
    config: Optional[CompilerConfig] = None,
) -> Dict[Path, str]:
    """
    Compile several root documents in parallel without writing them.

    Files that fail are logged and left out of the result.

    Returns:
        Input path -> final document text.
    """
    config = config or CompilerConfig()

    def _expand_one(path: Path) -> str:
        try:
            return compile_document(path, config)
        except Exception as e:
            logger.error(f"Error processing {path}: {e}")
            raise

    results, _ = _run_parallel(paths, _expand_one, config.max_workers)
    return results


def compile_directory(
    root: Path,
    config: Optional[CompilerConfig] = None,
) -> CompileResult:
    """
    Compile every matching document under ``root``.

    Pipeline:
    1. Create ``<root>/<output_dir_name>`` (idempotent)
    2. Discover ``<root>/<subdir>/<file>`` entries matching the file pattern
    3. Warn about filenames that occur in more than one subdirectory
    4. Expand and write each file on a thread pool; failures are logged and
       never affect other files

    Args:
        root: Input root directory.
        config: Run configuration. Defaults to CompilerConfig().

    Returns:
        CompileResult with per-file outputs, failures and timings.

    Raises:
        RootDirectoryError: If ``root`` is not an existing directory.
        FilenameCollisionError: If ``config.strict_collisions`` is set and two
            inputs share a filename. Raised before anything is written.

    Example:
        >>> result = compile_directory(Path("site"))
        >>> print(f"Compiled {result.processed_count} documents")
        Compiled 4 documents
    """
    config = config or CompilerConfig()
    if not root.is_dir():
        raise RootDirectoryError(f"Specified directory does not exist: {root}")

    output_dir = root / config.output_dir_name
    result = CompileResult(root=root, output_dir=output_dir)

    log_section(f"Starting processing in {root}")

    output_dir.mkdir(parents=True, exist_ok=True)
    files = discover_input_files(root, config.file_regex, exclude=[output_dir])

    if not files:
        logger.warning("No XML files found to process.")
    else:
        _check_collisions(files, config)
        logger.info(f"Found {len(files)} file(s) to process")

        def _compile_one(path: Path) -> Path:
            with timed_phase(result.timings, str(path)):
                return _compile_and_write(path, output_dir, config)

        result.outputs, result.failures = _run_parallel(
            files, _compile_one, config.max_workers
        )
        logger.info(result.timings.summary())

    log_section(f"Processing complete. Compiled XMLs saved in {output_dir}")
    return result


def _compile_and_write(path: Path, output_dir: Path, config: CompilerConfig) -> Path:
    """Compile one root document and write it flat into ``output_dir``."""
    try:
        text = compile_document(path, config)
    except Exception as e:
        logger.error(f"Error processing {path}: {e}")
        raise

    out_path = output_dir / path.name
    try:
        write_output(text, out_path, encoding=config.encoding)
    except Exception as e:
        logger.error(f"Error writing {out_path}: {e}")
        raise

    logger.info(f"Processed: {path}")
    return out_path


def _check_collisions(files: Sequence[Path], config: CompilerConfig) -> None:
    collisions = find_name_collisions(files)
    for name, paths in collisions.items():
        sources = ", ".join(str(p) for p in paths)
        logger.warning(f"Filename collision: {name} found at {sources}; only one output will survive")

    if collisions and config.strict_collisions:
        names = ", ".join(sorted(collisions))
        logger.error(f"Aborting: output filename collision for {names}")
        raise FilenameCollisionError(f"Output filename collision: {names}", collisions)


def _run_parallel(
    paths: Sequence[Path],
    work: Callable[[Path], T],
    max_workers: Optional[int],
) -> Tuple[Dict[Path, T], Dict[Path, str]]:
    """Run ``work`` for every path on a thread pool.

    ``work`` is responsible for logging its own failures.

    Returns:
        (successes, failures) keyed by input path.
    """
    successes: Dict[Path, T] = {}
    failures: Dict[Path, str] = {}
    if not paths:
        return successes, failures

    workers = min(len(paths), max_workers or os.cpu_count() or 1)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(work, path): path for path in paths}
        for future in as_completed(futures):
            path = futures[future]
            try:
                successes[path] = future.result()
            except Exception as e:
                failures[path] = str(e)
    return successes, failures
