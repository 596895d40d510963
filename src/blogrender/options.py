#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the transpiler and renderer facade.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy. The defaults reproduce the original blog exactly, including the social
links shown next to the first heading.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from blogrender.constants import (
    DEFAULT_CONTENT_ROOT,
    DEFAULT_GITHUB_URL,
    DEFAULT_INDEX_DOCUMENT,
    DEFAULT_LINKEDIN_URL,
    DEFAULT_PATH_PREFIX,
    DEFAULT_TEMPLATE_PATH,
    DEFAULT_TITLE,
    DEFAULT_TWITTER_URL,
    SOCIAL_ICON_SVGS,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class SocialLink(CloneFrozenMixin):
    """One icon link in the header rendered for the first heading.

    Parameters
    ----------
    name : str
        Label used in logs and configuration
    url : str
        Link target
    icon : str
        Built-in icon name: ``github``, ``linkedin`` or ``twitter``
    new_tab : bool, default True
        Whether the link opens in a new browser tab

    """

    name: str
    url: str
    icon: str
    new_tab: bool = True

    def __post_init__(self) -> None:
        """Validate the icon name.

        Raises
        ------
        ValueError
            If ``icon`` is not one of the built-in icons.

        """
        if self.icon not in SOCIAL_ICON_SVGS:
            raise ValueError(f"Unknown social icon '{self.icon}', expected one of: {', '.join(SOCIAL_ICON_SVGS)}")


DEFAULT_SOCIAL_LINKS: tuple[SocialLink, ...] = (
    SocialLink(name="github", url=DEFAULT_GITHUB_URL, icon="github"),
    SocialLink(name="linkedin", url=DEFAULT_LINKEDIN_URL, icon="linkedin"),
    SocialLink(name="twitter", url=DEFAULT_TWITTER_URL, icon="twitter", new_tab=False),
)


@dataclass(frozen=True)
class TranspilerOptions(CloneFrozenMixin):
    """Options controlling Markdown-to-HTML transpilation.

    Parameters
    ----------
    social_links : tuple of SocialLink
        Icons shown beside the first level-1 heading
    use_list_table : bool, default True
        Render list items from the line-scanned list table. When False every
        list renders its single placeholder item.

    """

    social_links: tuple[SocialLink, ...] = field(
        default=DEFAULT_SOCIAL_LINKS,
        metadata={"help": "Social icon links rendered next to the first heading"},
    )
    use_list_table: bool = field(
        default=True,
        metadata={"help": "Take list items from the line-oriented list scan"},
    )


@dataclass(frozen=True)
class RendererOptions(CloneFrozenMixin):
    """Options for the renderer facade.

    Parameters
    ----------
    content_root : str
        Directory containing the Markdown documents
    template_path : str
        HTML template with ``{title}``, ``{content}`` and metadata placeholders
    path_prefix : str
        Prefix stripped from document identifiers (the route the blog is served under)
    index_document : str
        Document rendered for an empty identifier
    default_title : str
        Substituted for ``{title}`` when the document has no ``title`` metadata
    transpiler : TranspilerOptions
        Options passed on to the transpiler

    """

    content_root: str = field(
        default=DEFAULT_CONTENT_ROOT,
        metadata={"help": "Directory containing Markdown documents"},
    )
    template_path: str = field(
        default=DEFAULT_TEMPLATE_PATH,
        metadata={"help": "HTML template file"},
    )
    path_prefix: str = field(
        default=DEFAULT_PATH_PREFIX,
        metadata={"help": "Prefix stripped from requested document paths"},
    )
    index_document: str = field(
        default=DEFAULT_INDEX_DOCUMENT,
        metadata={"help": "Document name used for empty paths"},
    )
    default_title: str = field(
        default=DEFAULT_TITLE,
        metadata={"help": "Page title used when the document has no title metadata"},
    )
    transpiler: TranspilerOptions = field(default_factory=TranspilerOptions)

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``index_document`` is empty.

        """
        if not self.index_document:
            raise ValueError("index_document must not be empty")
