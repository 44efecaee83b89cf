"""
versionkit: version string parsing and ordering

versionkit turns strings such as ``1.4.0-rc.2+build.17`` into immutable
:class:`Version` values and ranks them. Parsing is tolerant: identifiers
are reduced to letters, digits and hyphens instead of being rejected, and
only a malformed numeric segment raises :class:`IllegalFormatError`.

    >>> from versionkit import parse_version
    >>> parse_version("1.0.0-alpha") < parse_version("1.0.0")
    True
"""

from __future__ import annotations

from versionkit.constants import METADATA
from versionkit.exceptions import (
    ConfigError,
    ErrorKind,
    IllegalFormatError,
    VersionKitError,
    is_error,
)
from versionkit.models.version import (
    Version,
    new_version,
    parse_version,
    sanitize_identifier,
)
from versionkit.utils.version_utils import (
    compare_versions,
    get_update_type,
    sort_versions,
)
from versionkit.__version__ import __version__

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "versionkit Contributors"
__license__ = "Apache-2.0"
__description__ = "Tolerant version string parsing, comparison and sorting."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Model
    "Version",
    "new_version",
    "parse_version",
    "sanitize_identifier",
    "METADATA",
    # Errors
    "ErrorKind",
    "VersionKitError",
    "IllegalFormatError",
    "ConfigError",
    "is_error",
    # Comparison helpers
    "compare_versions",
    "sort_versions",
    "get_update_type",
]
