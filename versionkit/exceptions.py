"""
Custom exception hierarchy for versionkit.

All exceptions inherit from :class:`VersionKitError`. Each one carries an
explicit :class:`ErrorKind` discriminant so callers can classify a failure
with :func:`is_error` instead of inspecting its type, and optional
structured metadata via the ``details`` attribute.
"""

from __future__ import annotations

import enum
from typing import Any, Mapping, MutableMapping, Optional


class ErrorKind(enum.Enum):
    """Classification of versionkit failures."""

    ILLEGAL_FORMAT = "illegal_format"
    CONFIG = "config"


class VersionKitError(Exception):
    """Base exception for all versionkit errors.

    Args:
        message: Human-readable error message.
        kind: Classification of the failure.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "kind", "details")

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.kind: ErrorKind = kind
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, kind={self.kind.name}, "
            f"details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def is_error(exc: BaseException, kind: ErrorKind) -> bool:
    """Return True if ``exc`` is a versionkit error of the given kind."""
    return isinstance(exc, VersionKitError) and exc.kind is kind


class IllegalFormatError(VersionKitError):
    """Raised when a version string has no valid numeric segment.

    Args:
        message: Error description.
        version: The raw version string being parsed.
        component: The numeric component that failed, if any.
    """

    __slots__ = ("version", "component")

    def __init__(
        self,
        message: str,
        *,
        version: Optional[str] = None,
        component: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "version", version)
        _add_if(details, "component", component)

        super().__init__(message, ErrorKind.ILLEGAL_FORMAT, details)

        self.version = version
        self.component = component


class ConfigError(VersionKitError):
    """Raised when a configuration file is missing, unreadable or invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, ErrorKind.CONFIG, details)

        self.config_path = config_path
        self.option = option
