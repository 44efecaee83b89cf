"""
Command-line interface for versionkit.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from versionkit.config import load_config
from versionkit.__version__ import __version__
from versionkit.context import VersionKitContext
from versionkit.exceptions import ConfigError, VersionKitError
from versionkit.utils.logger import get_logger, setup_logging
from versionkit.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="VERSIONKIT_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="VERSIONKIT_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="versionkit",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """versionkit: parse, compare and sort version strings.

    \b
    Available commands:
      versionkit parse VERSION...      Show the components of versions
      versionkit compare A B           Show how two versions are ordered
      versionkit sort VERSION...       Sort versions lowest to highest
      versionkit classify CURRENT NEW  Classify the change between versions

    \b
    Examples:
      versionkit parse 1.2.3-rc.1+build.5
      versionkit compare 1.0.0-alpha 1.0.0
      versionkit -v sort --descending 1.0 2.0 1.5

    Use ``versionkit COMMAND --help`` for command-specific options.
    """
    _configure_logging(verbose)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    versionkit_ctx = VersionKitContext()
    versionkit_ctx.config_path = loaded_config.source_path
    versionkit_ctx.color = color
    versionkit_ctx.verbose = verbose
    versionkit_ctx.config = loaded_config
    ctx.obj = versionkit_ctx

    # Respect NO_COLOR for the console and downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    logger.debug("versionkit v%s", __version__)
    logger.debug("Config path: %s", versionkit_ctx.config_path)
    if loaded_config.source_path:
        logger.debug("Loaded configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


from versionkit.commands import classify, compare, parse, sort  # noqa: E402

cli.add_command(parse)
cli.add_command(compare)
cli.add_command(sort)
cli.add_command(classify)


def main() -> int:
    """Main entry point for the versionkit CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except VersionKitError as exc:
        print_error(str(exc))
        logger.debug(
            "VersionKitError kind=%s details: %s",
            exc.kind.name,
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    except (KeyboardInterrupt, click.Abort):
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
