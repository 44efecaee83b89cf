"""Sort command implementation for versionkit.

Typical usage::

    $ versionkit sort 1.0.0 1.0.0-alpha 0.9.1
    $ versionkit sort --descending --format simple 2.0 1.5 1.10
"""

from __future__ import annotations

import sys
from typing import Optional, Tuple

import click

from versionkit.exceptions import VersionKitError
from versionkit.context import pass_context, VersionKitContext
from versionkit.commands._output import FORMAT_OPTION_CHOICES, render_versions
from versionkit.utils import get_logger, print_error
from versionkit.utils.version_utils import sort_versions

logger = get_logger("commands.sort")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--descending",
    "-d",
    is_flag=True,
    help="Show the highest version first.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=FORMAT_OPTION_CHOICES,
    default=None,
    help="Output format (defaults to the configured format).",
)
@click.option(
    "--hide-metadata",
    is_flag=True,
    help="Leave build metadata out of the output.",
)
@pass_context
def sort(
    ctx: VersionKitContext,
    versions: Tuple[str, ...],
    descending: bool,
    output_format: Optional[str],
    hide_metadata: bool,
) -> None:
    """Sort VERSIONS from lowest to highest.

    Versions that rank equal (for example ones differing only in build
    metadata) keep their input order.

    Exits:
        0 on success, 1 if any version cannot be parsed.
    """
    config = ctx.effective_config
    descending = descending or config.descending

    try:
        ordered = sort_versions(versions, reverse=descending)
    except VersionKitError as exc:
        print_error(str(exc))
        sys.exit(1)

    logger.debug("Sorted %d version(s), descending=%s", len(ordered), descending)
    render_versions(
        ordered,
        output_format=(output_format or config.output_format).lower(),
        show_metadata=config.show_metadata and not hide_metadata,
        title="Sorted versions",
    )
