"""Renderers shared by the ``parse`` and ``sort`` commands."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

import click

from versionkit.models import Version
from versionkit.utils import print_line, print_table

FORMAT_OPTION_CHOICES = click.Choice(["table", "simple", "json"], case_sensitive=False)


def _display(version: Version, show_metadata: bool) -> str:
    if show_metadata or not version.metadata:
        return str(version)
    return str(Version(version.major, version.minor, version.patch, *version.pre_release))


def _row(version: Version, show_metadata: bool) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "Version": _display(version, show_metadata),
        "Major": version.major,
        "Minor": version.minor,
        "Patch": version.patch,
        "Pre-release": version.pre_release_string or "-",
    }
    if show_metadata:
        row["Metadata"] = version.metadata_string or "-"
    return row


def render_versions(
    versions: Sequence[Version],
    *,
    output_format: str,
    show_metadata: bool = True,
    title: Optional[str] = None,
) -> None:
    """Write ``versions`` to stdout in the requested format.

    Args:
        versions: Versions to render, in display order.
        output_format: ``table``, ``simple`` or ``json``.
        show_metadata: Include build metadata.
        title: Table title; ignored by the other formats.
    """
    if output_format == "json":
        data: List[Dict[str, Any]] = []
        for version in versions:
            entry = version.to_json()
            if not show_metadata:
                entry.pop("metadata")
                entry["version"] = _display(version, show_metadata)
            data.append(entry)
        click.echo(json.dumps(data, indent=2))
        return

    if output_format == "simple":
        for version in versions:
            click.echo(_display(version, show_metadata))
        return

    if not versions:
        print_line("No versions to display", style="dim")
        return

    print_table(
        [_row(v, show_metadata) for v in versions],
        title=title,
        column_styles={
            "Version": {"style": "version", "no_wrap": True},
            "Major": {"justify": "right"},
            "Minor": {"justify": "right"},
            "Patch": {"justify": "right"},
        },
        row_styler=lambda row: "dim" if row["Pre-release"] != "-" else None,
    )
