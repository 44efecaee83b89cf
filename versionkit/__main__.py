"""
Executable module for versionkit.

Running:
    python -m versionkit

is equivalent to:
    versionkit
"""

from __future__ import annotations

import sys


def main() -> int:
    """Run the CLI and return its exit code."""
    from versionkit.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
