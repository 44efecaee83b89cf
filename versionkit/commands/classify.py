"""Classify command implementation for versionkit.

Reports what kind of change moving from one version to another is.

Typical usage::

    $ versionkit classify 1.4.2 2.0.0
    major
"""

from __future__ import annotations

import sys

import click

from versionkit.utils import colorize_update_type, get_logger, print_line
from versionkit.utils.version_utils import get_update_type

logger = get_logger("commands.classify")


@click.command()
@click.argument("current")
@click.argument("target")
def classify(current: str, target: str) -> None:
    """Classify the change from CURRENT to TARGET.

    Prints one of: same, downgrade, major, minor, patch, update, unknown.

    Exits:
        0 on success, 1 if the change is unknown (unparsable input).
    """
    update_type = get_update_type(current, target)
    logger.debug("Update %s -> %s classified as %s", current, target, update_type)

    print_line(colorize_update_type(update_type))
    if update_type == "unknown":
        sys.exit(1)
