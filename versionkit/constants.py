"""
Centralized constants for versionkit.

This module defines immutable values used across versionkit, including the
version grammar markers, configuration defaults, and logging formats. All
values are intended to be treated as read-only.
"""

from typing import Final, FrozenSet, Tuple

# ---------------------------------------------------------------------------
# Version grammar
# ---------------------------------------------------------------------------

#: Marker separating pre-release identifiers from build metadata.
METADATA: Final[str] = "+"

#: Marker separating the numeric segment from pre-release identifiers.
PRE_RELEASE: Final[str] = "-"

#: Delimiter between numeric components and between identifiers.
IDENTIFIER_SEPARATOR: Final[str] = "."

#: Values applied to ``(major, minor, patch)`` before parsed components
#: overwrite them left to right.
DEFAULT_NUMBERS: Final[Tuple[int, int, int]] = (1, 0, 0)

#: Maximum number of dot-separated components in the numeric segment.
MAX_NUMERIC_COMPONENTS: Final[int] = 3

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Output formats accepted by the CLI and the configuration file.
OUTPUT_FORMATS: Final[FrozenSet[str]] = frozenset({"table", "simple", "json"})

#: Default CLI output format.
DEFAULT_OUTPUT_FORMAT: Final[str] = "table"

#: Sort versions from highest to lowest by default.
DEFAULT_DESCENDING: Final[bool] = False

#: Include build metadata in CLI output by default.
DEFAULT_SHOW_METADATA: Final[bool] = True

#: Standalone configuration file name.
CONFIG_FILE_NAME: Final[str] = "versionkit.toml"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
