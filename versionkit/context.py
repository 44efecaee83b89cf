"""
Shared context object for versionkit CLI commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from versionkit.config import VersionKitConfig


class VersionKitContext:
    """Per-invocation state handed to every subcommand.

    Attributes:
        config_path: Path to the loaded configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration; ``None`` until the group callback runs.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[VersionKitConfig] = None

    @property
    def effective_config(self) -> VersionKitConfig:
        """Loaded configuration, or defaults when none was loaded."""
        return self.config if self.config is not None else VersionKitConfig()


#: Click decorator for injecting :class:`VersionKitContext` into commands.
pass_context = click.make_pass_decorator(VersionKitContext, ensure=True)
