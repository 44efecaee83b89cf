"""
versionkit version information.

Single source of truth for the package version. The structured form is
produced by versionkit's own parser.
"""

from __future__ import annotations

from versionkit.models.version import parse_version

# ---------------------------------------------------------------------------
# Main version (single source of truth)
# ---------------------------------------------------------------------------

__version__ = "0.1.0"


# ---------------------------------------------------------------------------
# Structured version metadata
# ---------------------------------------------------------------------------

VERSION_INFO = parse_version(__version__)


# ---------------------------------------------------------------------------
# Human-readable version (for CLI)
# ---------------------------------------------------------------------------

VERSION_STRING = f"versionkit {__version__}"
