"""
Module: includes.config

Purpose:
    Settings for recursive include expansion.

Key Classes:
    - ExpansionConfig: Recursion bounds and cycle detection

Used By:
    - includes.expander: Reads limits during recursion
    - batch.config: Nested inside CompilerConfig
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExpansionConfig:
    """
    Configuration for include expansion (immutable).

    Attributes:
        max_depth: Maximum include nesting below a root document. An include
            that would go deeper is replaced with an error marker.
        detect_cycles: Reject an include whose file is already being expanded
            higher up the same chain. Off by default: without it a cycle is
            only stopped by max_depth.
    """
    max_depth: int = 32
    detect_cycles: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1: {self.max_depth}")
