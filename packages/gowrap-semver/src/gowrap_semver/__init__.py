# SPDX-License-Identifier: MIT
"""Dotted numeric version validation, ordering and stable sorting.

Versions have the form MAJOR[.MINOR[.PATCH]] with non-negative integer
components. Ordering is numeric, left to right, and a missing component sorts
below any explicit value.

Example:
    >>> from gowrap_semver import is_valid_semver, is_older, stable_comparator_for, slice_stable
    >>>
    >>> is_valid_semver("1.20.4")
    True
    >>> is_older("1.2", "1.10")
    True
    >>>
    >>> versions = ["2", "1.20.1", "1.3", "1.20.4", "1.19.1"]
    >>> slice_stable(versions, stable_comparator_for(versions))
    >>> versions
    ['1.3', '1.19.1', '1.20.1', '1.20.4', '2']
"""

__version__ = "0.1.0"

from .semver import (
    parse_components,
    is_valid_semver,
    InvalidVersionError,
    SEMVER_PATTERN,
)
from .compare import (
    is_older,
    compare_versions,
    version_key,
)
from .sort import (
    stable_comparator_for,
    slice_stable,
    sort_versions,
    sorted_versions,
    latest_version,
)

__all__ = [
    # Validation
    "parse_components",
    "is_valid_semver",
    "InvalidVersionError",
    "SEMVER_PATTERN",
    # Ordering
    "is_older",
    "compare_versions",
    "version_key",
    # Sorting
    "stable_comparator_for",
    "slice_stable",
    "sort_versions",
    "sorted_versions",
    "latest_version",
]
