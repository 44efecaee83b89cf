"""Configuration file loader for versionkit.

Only the command-line interface reads configuration; the library API is
configured entirely through arguments. Supports two formats:

- ``versionkit.toml``: settings under ``[versionkit]`` table
- ``pyproject.toml``: settings under ``[tool.versionkit]`` table

Discovery order:

1. Explicit path from ``--config`` or ``VERSIONKIT_CONFIG``
2. ``versionkit.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.versionkit]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``versionkit.toml``)::

    [versionkit]
    output_format = "simple"
    descending = true
    show_metadata = false
"""

from __future__ import annotations

import tomli
from pathlib import Path
from typing import Any, Callable, Dict, Optional
from dataclasses import dataclass, field

from versionkit.exceptions import ConfigError
from versionkit.utils.logger import get_logger
from versionkit.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_DESCENDING,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SHOW_METADATA,
    OUTPUT_FORMATS,
)

logger = get_logger("config")


@dataclass
class VersionKitConfig:
    """Parsed and validated versionkit configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        output_format: Default output format of the ``parse``, ``sort`` and
            ``compare`` commands (``table``, ``simple`` or ``json``).
        descending: Sort highest version first in ``versionkit sort``.
        show_metadata: Include build metadata when rendering versions.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    output_format: str = DEFAULT_OUTPUT_FORMAT
    descending: bool = DEFAULT_DESCENDING
    show_metadata: bool = DEFAULT_SHOW_METADATA

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return the user-facing options for debug logging."""
        return {
            "output_format": self.output_format,
            "descending": self.descending,
            "show_metadata": self.show_metadata,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    standalone = cwd / CONFIG_FILE_NAME
    if standalone.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, standalone)
        return standalone

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_versionkit_section(pyproject_toml):
        logger.debug("Found [tool.versionkit] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_versionkit_section(path: Path) -> bool:
    """Check if pyproject.toml contains a ``[tool.versionkit]`` section.

    An unreadable or malformed pyproject.toml is treated as not having one.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring %s: %s", path, exc)
        return False
    return "versionkit" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> VersionKitConfig:
    """Load and validate versionkit configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`VersionKitConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        return VersionKitConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("versionkit", {})
    else:
        section = raw.get("versionkit", {})

    if not section:
        logger.debug("Config file found but no versionkit section, using defaults")
        return VersionKitConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomli.load(fh)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _expect_bool(name: str, value: Any, config_path: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(
            f"{name} must be a boolean, got {type(value).__name__}",
            config_path=config_path,
            option=name,
        )
    return value


def _expect_output_format(name: str, value: Any, config_path: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(
            f"{name} must be a string, got {type(value).__name__}",
            config_path=config_path,
            option=name,
        )
    normalized = value.lower()
    if normalized not in OUTPUT_FORMATS:
        raise ConfigError(
            f"{name} must be one of {', '.join(sorted(OUTPUT_FORMATS))}, got {value!r}",
            config_path=config_path,
            option=name,
        )
    return normalized


_VALIDATORS: Dict[str, Callable[[str, Any, str], Any]] = {
    "output_format": _expect_output_format,
    "descending": _expect_bool,
    "show_metadata": _expect_bool,
}


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> VersionKitConfig:
    """Validate a ``[versionkit]`` or ``[tool.versionkit]`` table.

    Raises:
        ConfigError: Unknown keys or values of the wrong type.
    """
    unknown = set(section) - set(_VALIDATORS)
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    config = VersionKitConfig()
    for name, value in section.items():
        setattr(config, name, _VALIDATORS[name](name, value, config_path))
    return config
