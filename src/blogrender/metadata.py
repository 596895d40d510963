#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/metadata.py
"""Front matter extraction.

Documents carry their metadata in an HTML comment at the very top::

    <!--
    title: Hello world
    date: 2024-01-01
    -->

The comment is invisible when the Markdown is viewed elsewhere, which is why
the blog uses it instead of YAML front matter.

"""

from __future__ import annotations

from blogrender.constants import COMMENT_CLOSE, COMMENT_OPEN


def parse_metadata_line(line: str, metadata: dict[str, str]) -> None:
    """Parse one ``key: value`` line into ``metadata``; lines without a colon are ignored."""
    key, sep, value = line.partition(":")
    if not sep:
        return
    metadata[key.strip().lower()] = value.strip()


def extract_metadata(markdown: str) -> dict[str, str]:
    """Extract ``key: value`` pairs from leading HTML comment blocks.

    Scanning starts at the first line and stops at the first non-blank line
    outside a comment, so front matter must be contiguous at the top of the
    document. This function never raises; missing or malformed front matter
    yields an empty or partial mapping.

    Parameters
    ----------
    markdown : str
        Raw document text

    Returns
    -------
    dict[str, str]
        Lowercased, trimmed keys mapped to trimmed values, in document order

    Examples
    --------
    >>> extract_metadata("<!-- Title: Hi -->\\n# Heading")
    {'title': 'Hi'}

    """
    metadata: dict[str, str] = {}
    in_comment_block = False

    for line in markdown.splitlines():
        trimmed = line.strip()

        if trimmed.startswith(COMMENT_OPEN) and not in_comment_block:
            in_comment_block = True
            if trimmed.endswith(COMMENT_CLOSE) and len(trimmed) >= len(COMMENT_OPEN) + len(COMMENT_CLOSE):
                parse_metadata_line(trimmed[len(COMMENT_OPEN) : -len(COMMENT_CLOSE)], metadata)
                in_comment_block = False
            continue

        if in_comment_block and trimmed.endswith(COMMENT_CLOSE):
            in_comment_block = False
            continue

        if in_comment_block:
            parse_metadata_line(trimmed, metadata)
            continue

        if trimmed:
            break

    return metadata
