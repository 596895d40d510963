#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/utils/decorators.py
"""Utility decorators for the blogrender parser and renderer.

The grammar packages are imported lazily, when a document is first parsed.
A missing or outdated grammar surfaces as a ``DependencyError`` carrying an
install hint instead of an ImportError from deep inside the parser.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Optional, Sequence, Tuple

from blogrender.exceptions import DependencyError
from blogrender.utils.packages import check_version_requirement

PackageSpec = Tuple[str, str, str]


def check_dependencies(component: str, packages: Sequence[PackageSpec]) -> Optional[DependencyError]:
    """Import each package and compare installed versions.

    Parameters
    ----------
    component : str
        Name used in the error message (e.g. "markdown")
    packages : sequence of (install_name, import_name, version_spec)
        ``version_spec`` may be empty to accept any version

    Returns
    -------
    DependencyError or None
        The error to raise, or None when everything is importable and recent enough

    """
    missing: list[tuple[str, str]] = []
    too_old: list[tuple[str, str, str]] = []
    first_import_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_import_error = first_import_error or e
            continue

        if not version_spec:
            continue
        ok, installed = check_version_requirement(install_name, version_spec)
        if not ok:
            too_old.append((install_name, version_spec, installed or "unknown"))

    if not (missing or too_old):
        return None
    return DependencyError(
        converter_name=component,
        missing_packages=missing,
        version_mismatches=too_old,
        original_import_error=first_import_error,
    )


def requires_dependencies(component: str, packages: Sequence[PackageSpec]) -> Callable:
    """Run :func:`check_dependencies` before every call of the decorated method.

    Examples
    --------
        >>> @requires_dependencies("markdown", DEPS_MARKDOWN)
        ... def parse(self, markdown):
        ...     from tree_sitter import Parser

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            error = check_dependencies(component, packages)
            if error is not None:
                raise error from error.original_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long the block took, at DEBUG level only.

    Examples
    --------
        >>> with debug_timer(logger, "Transpiling"):
        ...     html = transpiler.transpile(tree.root)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    yield
    logger.debug("%s completed in %.2fs", operation, time.perf_counter() - started)
