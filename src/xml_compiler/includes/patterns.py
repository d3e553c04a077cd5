"""
Module: includes.patterns

Purpose:
    Stateless text rewriting rules used by the include expander. Each
    function takes a complete text buffer and returns a rewritten buffer.

Key Functions:
    - unwrap_placeholders(): Drop <placeholder> tags, keep their content
    - strip_comments(): Delete every <!-- ... --> span
    - flatten_whitespace(): Collapse whitespace runs and drop line breaks
    - wrap_placeholders_in_cdata(): Replace placeholder blocks with CDATA

Dependencies:
    - re (std)

Used By:
    - includes.expander: Nested include post-processing
    - batch.pipeline: Optional CDATA wrapping of root output
"""

from __future__ import annotations

import re

# <!-- #include file="relative/path" -->
INCLUDE_PATTERN = re.compile(r'<!--\s*#include\s+file="(.*?)"\s*-->')

# Opening tag may carry attributes; tag name is case-insensitive
PLACEHOLDER_PATTERN = re.compile(
    r"<placeholder\b[^>]*>(.*?)</placeholder\s*>",
    re.IGNORECASE | re.DOTALL,
)

COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)

WHITESPACE_RUN_PATTERN = re.compile(r"\s{2,}")

CDATA_PATTERN = re.compile(r"<!\[CDATA\[(.*?)\]\]>", re.DOTALL)


def unwrap_placeholders(text: str) -> str:
    """
    Remove placeholder tags while keeping their inner content.

    Example:
        >>> unwrap_placeholders('<Placeholder id="x"><b>hi</b></placeholder>')
        '<b>hi</b>'
    """
    return PLACEHOLDER_PATTERN.sub(r"\1", text)


def strip_comments(text: str) -> str:
    """Delete every comment span, including multi-line ones."""
    return COMMENT_PATTERN.sub("", text)


def flatten_whitespace(text: str) -> str:
    """
    Flatten text to a single line.

    Runs of two or more whitespace characters become one space, then any
    remaining carriage returns and newlines are removed.

    Example:
        >>> flatten_whitespace("<a>\\n    <b/>\\n</a>\\n")
        '<a> <b/></a>'
    """
    collapsed = WHITESPACE_RUN_PATTERN.sub(" ", text)
    return collapsed.replace("\r", "").replace("\n", "")


def clean_nested(text: str) -> str:
    """Unwrap placeholders then strip comments (non-root cleanup)."""
    return strip_comments(unwrap_placeholders(text))


def wrap_placeholders_in_cdata(text: str) -> str:
    """
    Replace each placeholder block with a CDATA section.

    The block content is trimmed and any CDATA sections already inside it
    are unwrapped first, since CDATA sections cannot nest.

    Example:
        >>> wrap_placeholders_in_cdata("<x><placeholder> a<b </placeholder></x>")
        '<x>\\n<![CDATA[\\na<b\\n]]></x>'
    """
    def _wrap(match: re.Match) -> str:
        inner = CDATA_PATTERN.sub(r"\1", match.group(1).strip())
        return f"\n<![CDATA[\n{inner}\n]]>"

    return PLACEHOLDER_PATTERN.sub(_wrap, text)
