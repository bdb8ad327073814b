# deftree:header:start
#
#   project      : DefTree
#   file         : version.py
#   file_relpath : src/deftree/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""DefTree `version` command.

Prints the current DefTree version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging

import click

from deftree.cli.cmd_common import get_console, get_effective_verbosity
from deftree.cli.options import output_format_option
from deftree.constants import DEFTREE_VERSION
from deftree.io.types import TreeFormat


@click.command(
    name="version",
    help="Show the current version of DefTree.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: TreeFormat | None = None) -> None:
    """Show the current version of DefTree.

    Args:
        ctx (click.Context): Click context carrying the console.
        output_format (TreeFormat | None): ``json`` prints ``{"version": ...}``;
            anything else prints the plain version string.
    """
    console = get_console(ctx)

    if output_format is TreeFormat.JSON:
        console.print(json.dumps({"version": DEFTREE_VERSION}))
    elif get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("DefTree version:", bold=True, underline=True))
        console.print(f"    {console.styled(DEFTREE_VERSION, bold=True)}")
    else:
        console.print(console.styled(DEFTREE_VERSION, bold=True))
