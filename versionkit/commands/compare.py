"""Compare command implementation for versionkit.

Typical usage::

    $ versionkit compare 1.0.0-alpha 1.0.0
    1.0.0-alpha < 1.0.0
"""

from __future__ import annotations

import sys
import json
from typing import Optional

import click

from versionkit.exceptions import VersionKitError
from versionkit.context import pass_context, VersionKitContext
from versionkit.commands._output import FORMAT_OPTION_CHOICES
from versionkit.models import parse_version
from versionkit.utils import get_logger, print_error, print_line
from versionkit.utils.version_utils import compare_versions

logger = get_logger("commands.compare")

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("left")
@click.argument("right")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=FORMAT_OPTION_CHOICES,
    default=None,
    help="Output format; 'table' and 'simple' print the same line.",
)
@pass_context
def compare(
    ctx: VersionKitContext,
    left: str,
    right: str,
    output_format: Optional[str],
) -> None:
    """Compare LEFT with RIGHT and print their order.

    ``=`` means neither version ranks below the other; build metadata is
    ignored when comparing.

    Exits:
        0 on success, 1 if either version cannot be parsed.
    """
    output_format = (output_format or ctx.effective_config.output_format).lower()

    try:
        a, b = parse_version(left), parse_version(right)
    except VersionKitError as exc:
        print_error(str(exc))
        sys.exit(1)

    result = compare_versions(a, b)
    logger.debug("compare(%s, %s) = %d", a, b, result)

    if output_format == "json":
        click.echo(
            json.dumps(
                {"left": str(a), "right": str(b), "result": result},
                indent=2,
            )
        )
        return

    print_line(f"[version]{a}[/version] {_SYMBOLS[result]} [version]{b}[/version]")
