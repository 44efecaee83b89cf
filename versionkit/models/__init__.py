"""
Data models for versionkit.
"""

from __future__ import annotations

from versionkit.models.version import (
    Version,
    new_version,
    parse_many,
    parse_version,
    sanitize_identifier,
)

__all__ = [
    "Version",
    "new_version",
    "parse_many",
    "parse_version",
    "sanitize_identifier",
]
