#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/template.py
"""Placeholder substitution into the page template.

Substitution is plain string replacement, not a template language. Because
metadata values are substituted before the content, a value that itself
contains ``{someKey}`` can be replaced again by a later key.

"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from blogrender.constants import CONTENT_PLACEHOLDER, DEFAULT_TITLE, TITLE_PLACEHOLDER
from blogrender.exceptions import FileReadError


def apply_template(
    template: str,
    content_html: str,
    metadata: Mapping[str, str],
    default_title: str = DEFAULT_TITLE,
) -> str:
    """Fill ``{title}``, ``{<metadata key>}`` and ``{content}`` placeholders.

    Parameters
    ----------
    template : str
        Template text
    content_html : str
        Rendered document body
    metadata : Mapping[str, str]
        Front matter; ``title`` falls back to ``default_title`` when absent
    default_title : str, default "Blog Post"
        Title used when the metadata has none

    Returns
    -------
    str
        The final page

    Examples
    --------
    >>> apply_template("<title>{title}</title>{content}", "<p>x</p>", {"title": "Hi"})
    '<title>Hi</title><p>x</p>'

    """
    result = template.replace(TITLE_PLACEHOLDER, metadata.get("title", default_title))

    for key, value in metadata.items():
        result = result.replace(f"{{{key}}}", value)

    return result.replace(CONTENT_PLACEHOLDER, content_html)


def load_template(template_path: str | Path) -> str:
    """Read a template file.

    Raises
    ------
    FileReadError
        If the template cannot be read

    """
    path = Path(template_path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(str(path), original_error=e) from e
