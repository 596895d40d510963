#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/images.py
"""Image rendering with attributes carried by a preceding HTML comment.

Markdown has no syntax for image sizes or classes, so the blog places them
in a comment directly in front of the image::

    <!-- preset="avatar" width="128" -->
    ![Me](/static/me.png "Portrait")

Recognised keys are ``width``, ``height``, ``class`` (appended to the default
classes), ``style`` and ``preset`` (replaces the classes with a fixed set).

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from blogrender.constants import COMMENT_CLOSE, COMMENT_OPEN, DEFAULT_IMAGE_CLASSES, IMAGE_PRESETS

logger = logging.getLogger(__name__)


@dataclass
class ImageAttributes:
    """Presentation attributes applied to a rendered ``<img>`` tag."""

    classes: str = DEFAULT_IMAGE_CLASSES
    width: str | None = None
    height: str | None = None
    style: str = ""


@dataclass
class ImageSource:
    """Source, alt text and title pulled from an image's raw Markdown."""

    src: str = ""
    alt: str = ""
    title: str = ""
    attributes: ImageAttributes = field(default_factory=ImageAttributes)


def parse_image_markdown(raw: str) -> ImageSource:
    """Pull ``src``, ``alt`` and ``title`` out of raw image text.

    The destination is the first whitespace-separated token inside the first
    ``(...)``, the alt text is the content of the first ``[...]``, and the
    title is whatever sits between the last pair of double quotes.
    """
    image = ImageSource()

    paren_start = raw.find("(")
    if paren_start != -1:
        paren_end = raw.find(")", paren_start)
        if paren_end != -1:
            destination = raw[paren_start + 1 : paren_end].split()
            if destination:
                image.src = destination[0].strip("<>")

    bracket_start = raw.find("[")
    if bracket_start != -1:
        bracket_end = raw.find("]", bracket_start)
        if bracket_end != -1:
            image.alt = raw[bracket_start + 1 : bracket_end].strip()

    title_end = raw.rfind('"')
    if title_end != -1:
        title_start = raw.rfind('"', 0, title_end)
        if title_start != -1:
            image.title = raw[title_start + 1 : title_end].strip()

    return image


def split_attributes(attrs: str) -> list[str]:
    """Split on spaces, keeping double-quoted spans (and their quotes) intact."""
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in attrs:
        if char == '"':
            current.append(char)
            in_quotes = not in_quotes
        elif char == " " and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))
    return tokens


def parse_image_attributes(attrs: str) -> ImageAttributes:
    """Interpret ``key="value"`` tokens from an attribute comment."""
    attributes = ImageAttributes()

    for token in split_attributes(attrs):
        key, sep, value = token.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        unquoted = value.strip('"')

        if key == "width":
            attributes.width = unquoted
        elif key == "height":
            attributes.height = unquoted
        elif key == "class":
            attributes.classes = f"{attributes.classes} {unquoted}"
        elif key == "style":
            if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                attributes.style = value[1:-1]
            else:
                attributes.style = value
        elif key == "preset":
            attributes.classes = IMAGE_PRESETS.get(unquoted, attributes.classes)
        else:
            logger.debug("Unknown image attribute: %s=%s", key, value)

    return attributes


def find_attribute_comment(preceding: str) -> str | None:
    """Return the body of an HTML comment that ends ``preceding``.

    Only whitespace may separate the comment from the image, so a comment
    further up the document (front matter, say) never leaks onto an image.
    """
    comment_start = preceding.rfind(COMMENT_OPEN)
    if comment_start == -1:
        return None
    comment_end = preceding.find(COMMENT_CLOSE, comment_start)
    if comment_end == -1:
        return None
    if preceding[comment_end + len(COMMENT_CLOSE) :].strip():
        return None
    return preceding[comment_start + len(COMMENT_OPEN) : comment_end].strip()


def render_image(raw: str, preceding: str) -> str:
    """Render an ``<img>`` tag from raw image text and the text before it.

    Values are inserted as written by the author, without escaping.

    Parameters
    ----------
    raw : str
        Raw Markdown of the image, e.g. ``![alt](src "title")``
    preceding : str
        Document text before the image's first byte

    Returns
    -------
    str
        The ``<img>`` tag

    """
    image = parse_image_markdown(raw)
    comment = find_attribute_comment(preceding)
    if comment is not None:
        image.attributes = parse_image_attributes(comment)

    attributes = image.attributes
    tag = f'<img src="{image.src}" alt="{image.alt}" title="{image.title}" class="{attributes.classes}"'
    if attributes.width is not None:
        tag += f' width="{attributes.width}"'
    if attributes.height is not None:
        tag += f' height="{attributes.height}"'
    if attributes.style:
        tag += f' style="{attributes.style}"'
    return tag + ">"
