#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/references.py
"""Collect reference-style link definitions from a syntax tree."""

from __future__ import annotations

from typing import NamedTuple

from blogrender.syntax import SyntaxNode


class LinkReference(NamedTuple):
    """Destination and title for one ``[label]: destination "title"`` definition."""

    destination: str
    title: str


LinkReferenceTable = dict[str, LinkReference]


def strip_label(label: str) -> str:
    """Remove the square brackets around a link label."""
    return label.lstrip("[").rstrip("]")


def strip_title(title: str) -> str:
    """Remove the quote delimiters around a link title."""
    return title.strip('"').strip("'")


def extract_link_references(root: SyntaxNode, source: bytes) -> LinkReferenceTable:
    """Walk the whole tree and collect link reference definitions.

    Labels are matched case-insensitively, so they are stored lowercased. A
    later definition for the same label replaces an earlier one. Definitions
    with an empty label or destination are skipped.

    Parameters
    ----------
    root : SyntaxNode
        Root of the tree to search, normally the ``document`` node
    source : bytes
        Encoded document the node ranges refer to

    Returns
    -------
    LinkReferenceTable
        Mapping of lowercase label to ``LinkReference``

    """
    references: LinkReferenceTable = {}

    for node in root.walk():
        if node.kind != "link_reference_definition":
            continue

        label = destination = title = ""
        for child in node.children:
            text = child.text(source)
            if text is None:
                continue
            if child.kind == "link_label":
                label = strip_label(text)
            elif child.kind == "link_destination":
                destination = text
            elif child.kind == "link_title":
                title = strip_title(text)

        if label and destination:
            references[label.lower()] = LinkReference(destination, title)

    return references
