#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/utils/security.py
"""Path containment checks for document lookups.

Document identifiers arrive from an outer layer (typically a URL path), so
every resolved file location must be proven to stay inside the configured
content root before the filesystem is touched.

"""

from __future__ import annotations

import os
from pathlib import Path

from blogrender.exceptions import InvalidPathError


def sanitize_null_bytes(content: str) -> str:
    """Remove NUL characters, which are never valid in a document identifier."""
    return content.replace("\x00", "")


def validate_path_within_root(root: str | Path, candidate: str | Path) -> Path:
    """Resolve ``candidate`` and ensure it stays within ``root``.

    Parameters
    ----------
    root : str or Path
        Directory that all resolved paths must remain under
    candidate : str or Path
        Path to check; relative paths are interpreted against ``root``

    Returns
    -------
    Path
        The resolved absolute path

    Raises
    ------
    InvalidPathError
        If the path contains NUL bytes, cannot be resolved, or escapes ``root``

    Examples
    --------
    >>> validate_path_within_root("/srv/blog", "posts/hello.md")  # doctest: +SKIP
    PosixPath('/srv/blog/posts/hello.md')

    >>> validate_path_within_root("/srv/blog", "../../etc/passwd.md")  # doctest: +SKIP
    InvalidPathError: Path traversal not allowed: ../../etc/passwd.md

    """
    candidate_str = str(candidate)
    if "\x00" in candidate_str:
        raise InvalidPathError("Path contains NUL byte", requested_path=sanitize_null_bytes(candidate_str))

    root_path = Path(root).resolve()
    try:
        target = (root_path / candidate).resolve()
    except (OSError, RuntimeError) as e:
        raise InvalidPathError(f"Cannot resolve path: {candidate_str}", requested_path=candidate_str) from e

    # Compare with a trailing separator so /srv/blog-other never passes for /srv/blog
    root_str = str(root_path)
    target_str = str(target)
    if not (target_str.startswith(root_str.rstrip(os.sep) + os.sep) or target_str == root_str):
        raise InvalidPathError(f"Path traversal not allowed: {candidate_str}", requested_path=candidate_str)

    return target
