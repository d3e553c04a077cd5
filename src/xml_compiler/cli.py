"""
Command-line entry point.

Usage:
    xml-compiler [ROOT] [--log-file PATH] [--workers N] [--wrap-cdata]
                 [--max-depth N] [--detect-cycles] [--strict-collisions]
                 [--verbose]

ROOT defaults to the current working directory. Compiled documents are
written to ROOT/compiled/ and the run log to processing.log in the working
directory. Individual file failures are logged and do not change the exit
status; only a missing ROOT or an aborted run exits non-zero.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from xml_compiler import __version__
from xml_compiler.batch import CompileError, CompilerConfig, compile_directory
from xml_compiler.common.run_log import DEFAULT_LOG_FILE, configure_run_log, detach_run_log
from xml_compiler.includes.config import ExpansionConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xml-compiler",
        description="Resolve #include directives in XML documents and write compiled copies.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to process (default: current directory)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=Path(DEFAULT_LOG_FILE),
        help=f"Run log location, truncated at start (default: {DEFAULT_LOG_FILE})",
    )
    parser.add_argument("--workers", type=int, default=None, help="Parallel workers (default: CPU count)")
    parser.add_argument(
        "--wrap-cdata",
        action="store_true",
        help="Wrap placeholder blocks left in compiled output in CDATA sections",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=ExpansionConfig.max_depth,
        help=f"Maximum include nesting depth (default: {ExpansionConfig.max_depth})",
    )
    parser.add_argument(
        "--detect-cycles",
        action="store_true",
        help="Replace includes that loop back on themselves with an error marker",
    )
    parser.add_argument(
        "--strict-collisions",
        action="store_true",
        help="Abort if two input files share a filename instead of overwriting",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Echo the run log to the console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    root = args.root if args.root is not None else Path.cwd()
    if not root.is_dir():
        parser.error(f"Specified directory does not exist: {root}")

    try:
        config = CompilerConfig(
            max_workers=args.workers,
            wrap_cdata=args.wrap_cdata,
            strict_collisions=args.strict_collisions,
            expansion=ExpansionConfig(
                max_depth=args.max_depth,
                detect_cycles=args.detect_cycles,
            ),
        )
    except ValueError as e:
        parser.error(str(e))

    console = logging.StreamHandler()
    console.setLevel(logging.INFO if args.verbose else logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger = logging.getLogger()
    root_logger.addHandler(console)

    run_log = configure_run_log(args.log_file)
    try:
        result = compile_directory(root, config)
    except CompileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        detach_run_log(run_log)
        root_logger.removeHandler(console)

    print(f"Compiled {result.processed_count} file(s) into {result.output_dir}")
    if result.failed_count:
        print(f"{result.failed_count} file(s) failed, see {args.log_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
