"""
Version comparison utilities for versionkit.

Helpers built on :meth:`Version.less` for three-way comparison, sorting,
and classifying the change between two versions.
"""

from __future__ import annotations

import functools
from typing import Iterable, List, Optional, Union

from versionkit.exceptions import IllegalFormatError
from versionkit.models.version import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(value: VersionLike) -> Version:
    if isinstance(value, Version):
        return value
    return parse_version(value)


def compare_versions(left: VersionLike, right: VersionLike) -> int:
    """Three-way comparison of two versions.

    Args:
        left: Version or version string.
        right: Version or version string.

    Returns:
        ``-1`` if ``left`` ranks below ``right``, ``1`` if above, ``0`` if
        neither is less than the other (metadata is ignored).

    Raises:
        IllegalFormatError: A string argument cannot be parsed.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+a", "1.0.0+b")
        0
    """
    a, b = _coerce(left), _coerce(right)
    if a.less(b):
        return -1
    if b.less(a):
        return 1
    return 0


def sort_versions(
    versions: Iterable[VersionLike],
    *,
    reverse: bool = False,
) -> List[Version]:
    """Return ``versions`` parsed and sorted lowest first.

    The sort is stable: versions that tie keep their input order.
    """
    parsed = [_coerce(v) for v in versions]
    return sorted(parsed, key=functools.cmp_to_key(compare_versions), reverse=reverse)


def get_update_type(
    current_version: Optional[VersionLike],
    target_version: Optional[VersionLike],
) -> str:
    """Determine the kind of change from ``current_version`` to ``target_version``.

    Returns:
        One of:
            - ``"new"``       : No current version exists
            - ``"same"``      : Neither version ranks below the other
            - ``"downgrade"`` : Target ranks below current
            - ``"major"``     : Major number changed
            - ``"minor"``     : Minor number changed
            - ``"patch"``     : Patch number changed
            - ``"update"``    : Only the pre-release changed
            - ``"unknown"``   : Target missing or either version unparsable

    Examples:
        >>> get_update_type("1.0.0", "2.0.0")
        'major'
        >>> get_update_type(None, "1.0.0")
        'new'
        >>> get_update_type("1.0.0-rc.1", "1.0.0")
        'update'
    """
    if current_version is None and target_version is None:
        return "unknown"

    if current_version is None:
        return "new"

    if target_version is None:
        return "unknown"

    try:
        current = _coerce(current_version)
        target = _coerce(target_version)
    except IllegalFormatError:
        return "unknown"

    order = compare_versions(current, target)
    if order == 0:
        return "same"
    if order > 0:
        return "downgrade"

    if current.major != target.major:
        return "major"
    if current.minor != target.minor:
        return "minor"
    if current.patch != target.patch:
        return "patch"
    return "update"
