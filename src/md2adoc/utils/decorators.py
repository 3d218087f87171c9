#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/utils/decorators.py
"""Utility decorators and context managers for the parser and renderer.

The Markdown front end needs mistune and the HTML table converter needs
BeautifulSoup. Both check for their library through
:func:`requires_dependencies` so that a missing or outdated install fails
with an actionable :class:`~md2adoc.exceptions.DependencyError` instead of
a bare ImportError deep inside a conversion.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from md2adoc.exceptions import DependencyError
from md2adoc.utils.packages import check_version_requirement


def requires_dependencies(component_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before calling the function.

    Parameters
    ----------
    component_name : str
        Name of the component (e.g., "markdown", "html-table"). Appears in
        the error message.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec)
        tuples. An empty version_spec accepts any installed version.

    Returns
    -------
    Callable
        Decorator that checks dependencies on every call

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.
        Every problem is collected before raising.

    Examples
    --------
        >>> @requires_dependencies("html-table", [("beautifulsoup4", "bs4", ">=4.12.0")])
        ... def convert(html):
        ...     from bs4 import BeautifulSoup
        ...     return BeautifulSoup(html, "html.parser")

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement:
                        version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=component_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time a block and log the elapsed time at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Parameters
    ----------
    logger : logging.Logger
        Logger that receives the timing message
    operation : str
        Description of the timed operation (e.g., "AsciiDoc rendering")

    Yields
    ------
    None

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.3f}s")
    else:
        yield
