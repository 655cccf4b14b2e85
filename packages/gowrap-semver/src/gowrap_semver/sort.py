# SPDX-License-Identifier: MIT
"""Stable sorting of version collections.

Every entry is validated before any comparison runs, so a sort never stops
half way through a malformed collection.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, MutableSequence, Optional, Sequence

from .compare import is_older, version_key
from .semver import InvalidVersionError, is_valid_semver

IndexPredicate = Callable[[int, int], bool]


def stable_comparator_for(versions: Sequence[str]) -> IndexPredicate:
    """Build an index predicate for stably sorting ``versions`` in place.

    The returned ``less(i, j)`` reads ``versions[i]`` and ``versions[j]`` at
    call time, so it must be used against the same list that is being
    reordered, never a copy.

    Args:
        versions: Version strings, in the caller's current order

    Returns:
        A predicate that is True when the version at index i is older than
        the one at index j

    Raises:
        InvalidVersionError: For the first entry that is not a valid version.
            Entries after it are not inspected.

    Examples:
        >>> versions = ["2", "1.20.1", "1.3"]
        >>> less = stable_comparator_for(versions)
        >>> less(1, 0)
        True
    """
    for version in versions:
        if not is_valid_semver(version):
            raise InvalidVersionError(str(version))

    def less(i: int, j: int) -> bool:
        return is_older(versions[i], versions[j])

    return less


def slice_stable(items: MutableSequence, less: IndexPredicate) -> None:
    """Sort ``items`` in place using an index predicate, keeping equal items in order.

    Indices are ordered with the built-in stable sort while ``items`` is left
    untouched, then the permutation is written back in one step.
    """

    def _cmp(i: int, j: int) -> int:
        if less(i, j):
            return -1
        if less(j, i):
            return 1
        return 0

    order = sorted(range(len(items)), key=cmp_to_key(_cmp))
    items[:] = [items[i] for i in order]


def sort_versions(versions: list[str]) -> None:
    """Sort a list of versions in place, oldest first.

    Raises:
        InvalidVersionError: If any entry is invalid; the list is left untouched
    """
    stable_comparator_for(versions)
    versions.sort(key=version_key)


def sorted_versions(versions: Iterable[str]) -> list[str]:
    """Return a new list of the given versions, oldest first.

    Examples:
        >>> sorted_versions(["2", "1.20.1", "1.3", "1.20.4", "1.19.1"])
        ['1.3', '1.19.1', '1.20.1', '1.20.4', '2']
    """
    result = list(versions)
    sort_versions(result)
    return result


def latest_version(versions: Iterable[str]) -> Optional[str]:
    """Return the newest version, or None if there are none.

    Among equal versions the one appearing last wins, matching the last
    element of a stable ascending sort.

    Raises:
        InvalidVersionError: If any entry is invalid
    """
    candidates = list(versions)
    less = stable_comparator_for(candidates)
    if not candidates:
        return None

    latest = 0
    for i in range(1, len(candidates)):
        if not less(i, latest):
            latest = i
    return candidates[latest]
