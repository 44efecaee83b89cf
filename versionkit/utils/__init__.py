"""
Utility helpers for versionkit.

- Console output helpers (Rich-based)
- Logging configuration and retrieval

Version comparison helpers live in :mod:`versionkit.utils.version_utils`
and are imported from there directly, since they depend on
:mod:`versionkit.models`, which itself logs through this package.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from versionkit.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from versionkit.utils.console import (
    colorize_update_type,
    get_raw_console,
    print_error,
    print_line,
    print_success,
    print_table,
    print_warning,
    reconfigure_console,
)

__all__ = [
    # Console
    "print_error",
    "print_line",
    "print_table",
    "print_success",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    "colorize_update_type",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
]
