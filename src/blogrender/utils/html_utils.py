"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape the five HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=True)


__all__ = ["escape_html"]
