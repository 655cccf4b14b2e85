# SPDX-License-Identifier: MIT
"""Validation of dotted numeric version strings.

Accepted grammar is MAJOR[.MINOR[.PATCH]] where every component is a run of
ASCII decimal digits:
- Valid: 1, 21, 1.3, 1.34, 1.1.3, 1.1.34
- Invalid: 1., 2a, 1.2.4., 2.1.2a, -1, +1, 1e3, " 1", 1.2.3.4
"""

from __future__ import annotations

import re

# Matched with fullmatch() so a trailing newline is not accepted
SEMVER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+(?:\.[0-9]+)?)?")


class InvalidVersionError(Exception):
    """Raised when a version string does not follow MAJOR[.MINOR[.PATCH]]."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"invalid semantic version: {version}"
        super().__init__(self.message)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid version.

    Args:
        version_string: The string to validate

    Returns:
        True if the string is MAJOR[.MINOR[.PATCH]], False otherwise

    Examples:
        >>> is_valid_semver("21")
        True
        >>> is_valid_semver("1.")
        False
        >>> is_valid_semver("2.1.2a")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None


def parse_components(version_string: str) -> tuple[int, ...]:
    """Parse a version string into its numeric components.

    Args:
        version_string: A string of the form MAJOR[.MINOR[.PATCH]]

    Returns:
        A tuple of one to three non-negative integers

    Raises:
        InvalidVersionError: If the string is not a valid version

    Examples:
        >>> parse_components("1.20.4")
        (1, 20, 4)
        >>> parse_components("2")
        (2,)
    """
    if not is_valid_semver(version_string):
        raise InvalidVersionError(str(version_string))
    return tuple(int(part) for part in version_string.split("."))
