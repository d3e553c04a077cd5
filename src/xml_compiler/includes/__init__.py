"""
Module: includes

Purpose:
    Include directive expansion for XML-like documents. Resolves
    ``<!-- #include file="..." -->`` directives recursively and flattens
    nested content before splicing it into the including document.

Key Functions:
    - expand_includes(): Expand a single document
    - normalize_include_path(): Resolve an include reference

Key Classes:
    - ExpansionConfig: Recursion limits
    - IncludeError: Base error for expansion limits

Used By:
    - xml_compiler.batch: Directory compilation
"""

from .config import ExpansionConfig
from .expander import (
    IncludeCycleError,
    IncludeDepthError,
    IncludeError,
    expand_includes,
    include_error_marker,
    missing_include_marker,
)
from .paths import normalize_include_path

__all__ = [
    "ExpansionConfig",
    "expand_includes",
    "include_error_marker",
    "missing_include_marker",
    "normalize_include_path",
    "IncludeError",
    "IncludeDepthError",
    "IncludeCycleError",
]
