#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for blogrender.

This module centralizes the hardcoded markup, class strings and default
configuration used across the renderer. Constants are organized by category:

1. Type Definitions
2. Path and Template Defaults
3. Transpiler Markup (Tailwind/Gruvbox class strings)
4. Image Attributes and Presets
5. Social Header Defaults
6. Dependency Specifications
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

SocialIcon = Literal["github", "linkedin", "twitter"]
ImagePreset = Literal["avatar", "banner", "thumbnail"]

# =============================================================================
# Path and Template Defaults
# =============================================================================

DEFAULT_CONTENT_ROOT = "blog"
DEFAULT_TEMPLATE_PATH = "template.html"
DEFAULT_PATH_PREFIX = "blog/"
DEFAULT_INDEX_DOCUMENT = "index"
MARKDOWN_EXTENSION = ".md"
DEFAULT_TITLE = "Blog Post"

TITLE_PLACEHOLDER = "{title}"
CONTENT_PLACEHOLDER = "{content}"

# Front matter and image attributes are both carried in HTML comments
COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

# =============================================================================
# Transpiler Markup
# =============================================================================

HEADING_CLASS_TEMPLATE = "text-{size} text-gruvbox-yellow font-normal mt-8 mb-6 relative"
HEADING_SIZES: dict[int, str] = {1: "2xl", 2: "xl", 3: "lg"}
DEFAULT_HEADING_SIZE = "base"

HEADER_CONTAINER_CLASS = "flex flex-col md:flex-row justify-between items-start md:items-center"
HEADER_LINKS_CLASS = "flex space-x-3 mb-6 md:mb-0 md:mt-8"

LIST_CLASS = "pl-6"
PARAGRAPH_CLASS = "my-4"
BIO_PARAGRAPH_CLASS = "cursor"
BIO_RULE_HTML = '<hr class="border-t border-gruvbox-gray my-8">'
LINK_CLASS = "text-gruvbox-blue hover:text-gruvbox-aqua"
STRONG_CLASS = "font-bold"
EMPHASIS_CLASS = "italic"
CODE_SPAN_CLASS = "bg-gruvbox-bg1 text-gruvbox-yellow px-2 py-1 rounded font-mono text-sm"
CODE_BLOCK_PRE_CLASS = "line-numbers"
DEFAULT_CODE_LANGUAGE = "plaintext"
BLOCKQUOTE_CLASS = "border-l-4 border-gruvbox-gray pl-4 my-4 italic"

# Node kinds contributed by list handling; rendered only by the ancestor list rule
LIST_NODE_KINDS = frozenset({"list", "list_item"})
LIST_MARKER_FRAGMENT = "list_marker"

# =============================================================================
# Image Attributes and Presets
# =============================================================================

DEFAULT_IMAGE_CLASSES = "max-w-full h-auto my-4 rounded-lg shadow-lg"

IMAGE_PRESETS: dict[str, str] = {
    "avatar": "w-32 h-32 rounded-full object-cover",
    "banner": "w-full h-64 object-cover",
    "thumbnail": "w-48 h-48 object-cover rounded",
}

# =============================================================================
# Social Header Defaults
# =============================================================================

DEFAULT_GITHUB_URL = "https://github.com/Abraxas-365"
DEFAULT_LINKEDIN_URL = "https://www.linkedin.com/in/luis-fernando-miranda-castillo-265b22203"
DEFAULT_TWITTER_URL = "#"

SOCIAL_ICON_SVGS: dict[str, str] = {
    "github": (
        '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none"\n'
        '    stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"\n'
        '    class="lucide lucide-github">\n'
        '    <path\n'
        '        d="M15 22v-4a4.8 4.8 0 0 0-1-3.5c3 0 6-2 6-5.5.08-1.25-.27-2.48-1-3.5.28-1.15.28-2.35 0-3.5 '
        "0 0-1 0-3 1.5-2.64-.5-5.36-.5-8 0C6 2 5 2 5 2c-.3 1.15-.3 2.35 0 3.5A5.403 5.403 0 0 0 4 9c0 3.5 "
        '3 5.5 6 5.5-.39.49-.68 1.05-.85 1.65-.17.6-.22 1.23-.15 1.85v4">\n'
        "    </path>\n"
        '    <path d="M9 18c-4.51 2-5-2-7-2"></path>\n'
        "</svg>"
    ),
    "linkedin": (
        '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none"\n'
        '    stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"\n'
        '    class="lucide lucide-linkedin">\n'
        '    <path d="M16 8a6 6 0 0 1 6 6v7h-4v-7a2 2 0 0 0-2-2 2 2 0 0 0-2 2v7h-4v-7a6 6 0 0 1 6-6z"></path>\n'
        '    <rect width="4" height="12" x="2" y="9"></rect>\n'
        '    <circle cx="4" cy="4" r="2"></circle>\n'
        "</svg>"
    ),
    "twitter": (
        '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none"\n'
        '    stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"\n'
        '    class="lucide lucide-twitter">\n'
        "    <path\n"
        '        d="M22 4s-.7 2.1-2 3.4c1.6 10-9.4 17.3-18 11.6 2.2.1 4.4-.6 6-2C3 15.5.5 9.6 3 5c2.2 2.6 '
        '5.6 4.1 9 4-.9-4.2 4-6.6 7-3.8 1.1 0 3-1.2 3-1.2z">\n'
        "    </path>\n"
        "</svg>"
    ),
}

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each spec is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_MARKDOWN = [
    ("tree-sitter", "tree_sitter", ">=0.23.0"),
    ("tree-sitter-markdown", "tree_sitter_markdown", ">=0.3.2"),
]

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_FILENAMES = [".blogrender.toml", ".blogrender.yaml", ".blogrender.yml", ".blogrender.json"]
ENV_PREFIX = "BLOGRENDER_"
