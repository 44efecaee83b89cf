"""
Version data model for versionkit.

A :class:`Version` holds three non-negative numbers plus two ordered lists
of identifiers: the pre-release (after ``-``) and the build metadata (after
``+``). Identifiers are reduced to the ``[0-9A-Za-z-]`` alphabet on the way
in, so parsing is tolerant of stray characters and only the numeric segment
can make a version string invalid.

Ordering follows the numbers first, then the pre-release identifiers.
Metadata never affects ordering.

Typical usage::

    >>> v = parse_version("1.0.0-rc.01+build.7")
    >>> v.pre_release
    ('rc', '1')
    >>> str(v)
    '1.0.0-rc.1+build.7'
    >>> parse_version("1.0.0-alpha") < parse_version("1.0.0")
    True
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Tuple

from versionkit.constants import (
    DEFAULT_NUMBERS,
    IDENTIFIER_SEPARATOR,
    MAX_NUMERIC_COMPONENTS,
    METADATA,
    PRE_RELEASE,
)
from versionkit.exceptions import IllegalFormatError
from versionkit.utils.logger import get_logger

logger = get_logger("models.version")

# Integer literals as accepted for numeric components and numeric
# identifiers: an optional sign followed by ASCII digits.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _to_int(text: str) -> Optional[int]:
    """Return ``text`` as an int, or ``None`` if it is not an integer literal."""
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


def sanitize_identifier(token: str, numeric: bool) -> str:
    """Reduce ``token`` to a valid identifier.

    Characters outside ASCII letters, digits and ``-`` are dropped. When
    ``numeric`` is set and only digits remain, leading zeros are stripped,
    leaving a single ``"0"`` for an all-zero token.

    The result may be empty; deciding whether that is acceptable is up to
    the caller.

    Args:
        token: Raw identifier text.
        numeric: Whether the token may be a numeric identifier. Pre-release
            identifiers use ``True``, metadata identifiers ``False``.

    Returns:
        The sanitized identifier.

    Examples:
        >>> sanitize_identifier("0042", True)
        '42'
        >>> sanitize_identifier("0042", False)
        '0042'
        >>> sanitize_identifier("be_ta!", True)
        'beta'
    """
    kept: List[str] = []
    letter = digit = hyphen = False

    for char in token:
        if _is_ascii_letter(char):
            letter = True
        elif _is_ascii_digit(char):
            digit = True
        elif char == "-":
            hyphen = True
        else:
            continue
        kept.append(char)

    identifier = "".join(kept)
    if numeric and digit and not letter and not hyphen:
        identifier = identifier.lstrip("0") or "0"
    return identifier


def _split_identifiers(segment: str) -> List[str]:
    if not segment:
        return []
    return segment.split(IDENTIFIER_SEPARATOR)


class Version:
    """An immutable version value.

    Args:
        major: Major number; negative values are clamped to 0.
        minor: Minor number; negative values are clamped to 0.
        patch: Patch number; negative values are clamped to 0.
        *identifiers: Pre-release identifiers, optionally followed by the
            :data:`~versionkit.constants.METADATA` marker and metadata
            identifiers. Each one is passed through
            :func:`sanitize_identifier`.

    Examples:
        >>> str(Version(1, 2, 3, "alpha", "1", "+", "build", "42"))
        '1.2.3-alpha.1+build.42'
        >>> Version(-1, 2, 3).major
        0
    """

    __slots__ = ("_major", "_minor", "_patch", "_pre_release", "_metadata")

    def __init__(self, major: int, minor: int, patch: int, *identifiers: str) -> None:
        pre_release: List[str] = []
        metadata: List[str] = []
        in_pre_release = True

        for token in identifiers:
            if in_pre_release:
                if token == METADATA:
                    in_pre_release = False
                    continue
                pre_release.append(sanitize_identifier(token, True))
            else:
                metadata.append(sanitize_identifier(token, False))

        object.__setattr__(self, "_major", max(major, 0))
        object.__setattr__(self, "_minor", max(minor, 0))
        object.__setattr__(self, "_patch", max(patch, 0))
        object.__setattr__(self, "_pre_release", tuple(pre_release))
        object.__setattr__(self, "_metadata", tuple(metadata))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -----------------------------------------------------------------------
    # Accessors
    # -----------------------------------------------------------------------

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def pre_release(self) -> Tuple[str, ...]:
        """Pre-release identifiers in written order."""
        return self._pre_release

    @property
    def metadata(self) -> Tuple[str, ...]:
        """Build metadata identifiers in written order."""
        return self._metadata

    @property
    def pre_release_string(self) -> str:
        """Pre-release identifiers joined with ``.``; empty if none."""
        return IDENTIFIER_SEPARATOR.join(self._pre_release)

    @property
    def metadata_string(self) -> str:
        """Metadata identifiers joined with ``.``; empty if none."""
        return IDENTIFIER_SEPARATOR.join(self._metadata)

    @property
    def is_pre_release(self) -> bool:
        return bool(self._pre_release)

    @property
    def numbers(self) -> Tuple[int, int, int]:
        return (self._major, self._minor, self._patch)

    # -----------------------------------------------------------------------
    # Ordering
    # -----------------------------------------------------------------------

    def less(self, other: Version) -> bool:
        """Return True if this version ranks strictly below ``other``.

        Numbers are compared first. On a tie the pre-release identifiers are
        walked pairwise: two integers compare numerically, anything else
        compares as strings. If one list is a prefix of the other, the
        longer list ranks lower, so ``1.0.0-alpha`` is less than ``1.0.0``.
        Metadata is ignored.
        """
        if self.numbers != other.numbers:
            return self.numbers < other.numbers
        return _pre_release_less(self._pre_release, other._pre_release)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.less(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return other.less(self)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not other.less(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self.less(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self) -> Tuple[Any, ...]:
        return (self.numbers, self._pre_release, self._metadata)

    # -----------------------------------------------------------------------
    # Rendering
    # -----------------------------------------------------------------------

    def __str__(self) -> str:
        rendered = f"{self._major}.{self._minor}.{self._patch}"
        if self._pre_release:
            rendered += PRE_RELEASE + self.pre_release_string
        if self._metadata:
            rendered += METADATA + self.metadata_string
        return rendered

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of all components."""
        return {
            "version": str(self),
            "major": self._major,
            "minor": self._minor,
            "patch": self._patch,
            "pre_release": list(self._pre_release),
            "metadata": list(self._metadata),
        }

    def __copy__(self) -> Version:
        return self

    def __deepcopy__(self, memo: Any) -> Version:
        return self

    def __reduce__(self) -> Tuple[Any, ...]:
        identifiers = list(self._pre_release)
        if self._metadata:
            identifiers.append(METADATA)
            identifiers.extend(self._metadata)
        return (type(self), (self._major, self._minor, self._patch, *identifiers))


def _pre_release_less(left: Tuple[str, ...], right: Tuple[str, ...]) -> bool:
    for a, b in zip(left, right):
        a_num, b_num = _to_int(a), _to_int(b)
        if a_num is not None and b_num is not None:
            if a_num != b_num:
                return a_num < b_num
            continue
        if a != b:
            return a < b
    # A longer list of otherwise equal identifiers ranks lower
    return len(left) > len(right)


def new_version(major: int, minor: int, patch: int, *identifiers: str) -> Version:
    """Construct a :class:`Version`; see the class for argument details."""
    return Version(major, minor, patch, *identifiers)


def _split_version_string(raw: str) -> Tuple[str, str, str]:
    """Split ``raw`` into numeric, pre-release and metadata segments."""
    head, _, metadata = raw.partition(METADATA)
    numbers, _, pre_release = head.partition(PRE_RELEASE)
    return numbers, pre_release, metadata


def _parse_numbers(raw: str, segment: str) -> Tuple[int, int, int]:
    components = segment.split(IDENTIFIER_SEPARATOR)
    if len(components) > MAX_NUMERIC_COMPONENTS:
        raise IllegalFormatError(
            f"Illegal version format: expected at most {MAX_NUMERIC_COMPONENTS} "
            f"numeric components, got {len(components)}",
            version=raw,
        )

    numbers = list(DEFAULT_NUMBERS)
    for index, component in enumerate(components):
        number = _to_int(component)
        if number is None:
            raise IllegalFormatError(
                "Illegal version format: numeric component is not an integer",
                version=raw,
                component=component,
            )
        if number < 0:
            raise IllegalFormatError(
                "Illegal version format: numeric component is negative",
                version=raw,
                component=component,
            )
        numbers[index] = number

    return numbers[0], numbers[1], numbers[2]


def parse_version(raw: str) -> Version:
    """Parse a version string.

    The string is split at the first ``+`` (metadata) and then at the first
    ``-`` (pre-release). The numeric segment must hold one to three
    non-negative integers; missing trailing components default to
    ``1.0.0`` so ``"5"`` parses as ``5.0.0``. Identifiers are sanitized and
    never cause a failure.

    Args:
        raw: Version string, e.g. ``"1.2.3-beta.2+exp.sha.5114f85"``.

    Returns:
        The parsed :class:`Version`.

    Raises:
        IllegalFormatError: The numeric segment is empty, has more than
            three components, or a component is not a non-negative integer.

    Examples:
        >>> parse_version("2")
        Version('2.0.0')
        >>> parse_version("1.0.0-rc.01").pre_release
        ('rc', '1')
    """
    numbers_segment, pre_release_segment, metadata_segment = _split_version_string(raw)

    try:
        major, minor, patch = _parse_numbers(raw, numbers_segment)
    except IllegalFormatError as exc:
        logger.debug("Rejected version %r: %s", raw, exc)
        raise

    identifiers = _split_identifiers(pre_release_segment)
    metadata = _split_identifiers(metadata_segment)
    if metadata:
        identifiers.append(METADATA)
        identifiers.extend(metadata)

    version = Version(major, minor, patch, *identifiers)
    if version.pre_release_string != pre_release_segment or (
        version.metadata_string != metadata_segment
    ):
        logger.debug("Sanitized identifiers of %r to %r", raw, str(version))
    return version


def parse_many(raws: Iterable[str]) -> List[Version]:
    """Parse every string in ``raws``, failing on the first invalid one."""
    return [parse_version(raw) for raw in raws]
