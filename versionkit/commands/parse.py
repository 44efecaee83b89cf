"""Parse command implementation for versionkit.

Parses one or more version strings and shows their components.

Typical usage::

    $ versionkit parse 1.2.3-rc.01+build.7
    $ versionkit parse 1.0 2.0.0-beta --format json
"""

from __future__ import annotations

import sys
from typing import List, Optional, Tuple

import click

from versionkit.models import Version, parse_version
from versionkit.exceptions import IllegalFormatError
from versionkit.context import pass_context, VersionKitContext
from versionkit.commands._output import FORMAT_OPTION_CHOICES, render_versions
from versionkit.utils import get_logger, print_error

logger = get_logger("commands.parse")


@click.command()
@click.argument("versions", nargs=-1, required=True)
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
def parse(
    ctx: VersionKitContext,
    versions: Tuple[str, ...],
    output_format: Optional[str],
    hide_metadata: bool,
) -> None:
    """Parse VERSIONS and show their components.

    Identifiers are sanitized while parsing, so the canonical form shown
    may differ from the input (``1.0.0-rc.01`` becomes ``1.0.0-rc.1``).

    Exits:
        0 if every version parsed, 1 if any was rejected.
    """
    config = ctx.effective_config
    output_format = (output_format or config.output_format).lower()
    show_metadata = config.show_metadata and not hide_metadata

    parsed: List[Version] = []
    failures = 0
    for raw in versions:
        try:
            parsed.append(parse_version(raw))
        except IllegalFormatError as exc:
            failures += 1
            print_error(f"{raw!r}: {exc.message}")

    logger.info("Parsed %d of %d version(s)", len(parsed), len(versions))
    if parsed:
        render_versions(
            parsed,
            output_format=output_format,
            show_metadata=show_metadata,
            title="Parsed versions",
        )

    if failures:
        sys.exit(1)
