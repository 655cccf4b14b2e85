# SPDX-License-Identifier: MIT
"""Version ordering.

Components are compared numerically from left to right. A missing trailing
component sorts below any explicit value, so 1.2 < 1.2.0 < 1.2.1.
"""

from __future__ import annotations

from .semver import parse_components


def _split(version: str) -> list[int]:
    # Caller guarantees the input already passed is_valid_semver
    return [int(part) for part in version.split(".")]


def is_older(version1: str, version2: str) -> bool:
    """Return True if version1 denotes a strictly older version than version2.

    Both arguments must already be valid versions; they are not re-validated.

    Examples:
        >>> is_older("2", "10")
        True
        >>> is_older("1.2", "1.2.4")
        True
        >>> is_older("1.2.4", "1.2.4")
        False
    """
    parts1 = _split(version1)
    parts2 = _split(version2)

    for p1, p2 in zip(parts1, parts2):
        if p1 != p2:
            return p1 < p2

    # All shared components equal - the one with fewer components is older
    return len(parts1) < len(parts2)


def compare_versions(version1: str, version2: str) -> int:
    """Compare two valid versions.

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Examples:
        >>> compare_versions("1.19.1", "1.20.1")
        -1
        >>> compare_versions("1.2", "1.2")
        0
        >>> compare_versions("1.2.0", "1.2")
        1
    """
    if is_older(version1, version2):
        return -1
    if is_older(version2, version1):
        return 1
    return 0


def version_key(version: str) -> tuple[int, ...]:
    """Return a sort key for a version, suitable for sorting.

    Tuple ordering matches is_older: a shorter tuple that is a prefix of a
    longer one sorts first.

    Raises:
        InvalidVersionError: If the version string is invalid

    Examples:
        >>> sorted(["2", "1.20", "1.3"], key=version_key)
        ['1.3', '1.20', '2']
    """
    return parse_components(version)
