"""
Click subcommands for the versionkit CLI.
"""

from __future__ import annotations

from versionkit.commands.parse import parse
from versionkit.commands.sort import sort
from versionkit.commands.compare import compare
from versionkit.commands.classify import classify

__all__ = ["classify", "compare", "parse", "sort"]
