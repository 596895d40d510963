#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/lists.py
"""Line-oriented list extraction.

The grammar splits soft-wrapped list items in ways that do not render well,
so list items are taken from a plain text scan instead of from the tree. The
scan knows nothing about nesting, block quotes or fenced code; it only groups
consecutive item lines and their indented continuations.

"""

from __future__ import annotations

import re

ListTable = dict[str, list[str]]

BULLET_MARKERS = ("- ", "* ")
ORDERED_MARKER_RE = re.compile(r"^\d+\. ")


def strip_list_marker(trimmed: str) -> str | None:
    """Return the item text if ``trimmed`` opens a list item, else None."""
    if trimmed.startswith(BULLET_MARKERS):
        return trimmed[2:].strip()
    match = ORDERED_MARKER_RE.match(trimmed)
    if match:
        return trimmed[match.end() :].strip()
    return None


def extract_lists(markdown: str) -> ListTable:
    """Scan raw text for list blocks.

    Parameters
    ----------
    markdown : str
        Raw document text

    Returns
    -------
    ListTable
        Item texts of each list, keyed by the zero-based line index (as a
        string) of the list's first item

    Examples
    --------
    >>> extract_lists("- a\\n- b\\n  wrapped\\n\\n1. one")
    {'0': ['a', 'b wrapped'], '4': ['one']}

    """
    lists: ListTable = {}
    current_key: str | None = None
    items: list[str] = []

    def close() -> None:
        nonlocal current_key, items
        if current_key is not None and items:
            lists[current_key] = items
        current_key = None
        items = []

    for index, line in enumerate(markdown.splitlines()):
        trimmed = line.strip()
        item = strip_list_marker(trimmed)

        if item is not None:
            if current_key is None:
                current_key = str(index)
            items.append(item)
            continue

        if current_key is None:
            continue

        if not trimmed:
            close()
        elif line[:1].isspace() and items:
            items[-1] = f"{items[-1]} {trimmed}"
        else:
            close()

    close()
    return lists
