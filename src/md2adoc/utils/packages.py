"""Helpers for checking installed third-party packages."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2adoc/utils/packages.py
from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version


def get_package_version(distribution_name: str) -> Optional[str]:
    """Get the installed version of a distribution.

    Parameters
    ----------
    distribution_name : str
        Name of the distribution on the package index (``beautifulsoup4``,
        not ``bs4``)

    Returns
    -------
    str or None
        Version string if installed, None otherwise

    """
    try:
        return metadata.version(distribution_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(distribution_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check if an installed distribution satisfies a version specifier.

    Parameters
    ----------
    distribution_name : str
        Name of the distribution
    version_spec : str
        PEP 440 specifier (e.g., ">=3.0.0")

    Returns
    -------
    tuple
        (meets_requirement, installed_version). An installed version that
        cannot be parsed, or a malformed specifier, counts as not meeting
        the requirement.

    """
    installed_version = get_package_version(distribution_name)
    if not installed_version:
        return False, None

    try:
        return Version(installed_version) in SpecifierSet(version_spec), installed_version
    except (InvalidVersion, InvalidSpecifier):
        return False, installed_version
