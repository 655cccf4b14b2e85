# SPDX-License-Identifier: MIT
"""Installed versions stored under the gowrap home directory.

Layout::

    <home>/
        config.toml          (optional)
        versions/
            1.19.1/
            1.20.4/
            2/
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from gowrap_semver import latest_version, sort_versions

from .config import GowrapConfig


def get_versions_dir(config: GowrapConfig) -> Path:
    """Return the versions directory, creating it if needed."""
    versions_dir = config.versions_dir
    versions_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    return versions_dir


def installed_versions(config: GowrapConfig) -> list[str]:
    """List the installed versions.

    Every non-hidden subdirectory of the versions directory is an installed
    version. Names are returned in name order; they are not validated here.
    """
    versions_dir = get_versions_dir(config)
    return sorted(
        entry.name
        for entry in versions_dir.iterdir()
        if entry.is_dir() and not entry.name.startswith(".")
    )


def print_sorted_versions(versions: list[str], echo: Callable[[str], None]) -> None:
    """Sort versions in place and print one per line, oldest first.

    Raises:
        InvalidVersionError: If any entry is invalid. Nothing is printed.
    """
    sort_versions(versions)
    for version in versions:
        echo(version)


def current_version(config: GowrapConfig) -> Optional[str]:
    """Return the version to use: the configured default, else the latest installed.

    Raises:
        InvalidVersionError: If an installed directory name is not a valid version
        FileNotFoundError: If the configured default is not installed
    """
    versions = installed_versions(config)
    if config.default_version:
        if config.default_version not in versions:
            raise FileNotFoundError(
                f"default version {config.default_version} is not installed in {config.versions_dir}"
            )
        return config.default_version
    return latest_version(versions)
