# deftree:header:start
#
#   project      : DefTree
#   file         : main.py
#   file_relpath : src/deftree/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""The ``deftree`` command group.

Group-level options are resolved once: the verbosity level and the program-output
console (which carries the color setting) are placed into ``ctx.obj``, and
subcommands read them back through `deftree.cli.cmd_common`. Internal logging is configured from the
``DEFTREE_LOG_LEVEL`` environment variable and always goes to stderr.
"""

from __future__ import annotations

import click

from deftree.cli.commands.check import check_command
from deftree.cli.commands.merge import merge_command
from deftree.cli.commands.shape import shape_command
from deftree.cli.commands.version import version_command
from deftree.cli.console import ClickConsole
from deftree.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from deftree.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    setup_logging()

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DefTree: merge partial configurations with their defaults trees.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the DefTree CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'deftree merge CONFIG --defaults FILE' to resolve a config.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(merge_command)
cli.add_command(shape_command)
cli.add_command(check_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
