# deftree:header:start
#
#   project      : DefTree
#   file         : check.py
#   file_relpath : src/deftree/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""DefTree `check` command.

Validates a schema document and, optionally, a defaults tree and a config
against it:

* the schema must parse (exit code 78 otherwise);
* ``--defaults`` is checked against the derived defaults shape;
* ``--config`` is checked against the config shape;
* with both, the merged result (see ``--mode``) is checked against the final shape.

Each finding is printed as ``<level>: <path>: <message>``. The command exits
with 1 when any ERROR-level diagnostic is found.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from deftree.cli.cli_types import EnumChoiceParam
from deftree.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    load_input_schema,
    load_input_tree,
)
from deftree.cli.exit_codes import ExitCode
from deftree.core.diagnostics import compute_diagnostic_stats
from deftree.core.logging import get_logger
from deftree.core.merge import MergeMode, merge_trees
from deftree.schema.derive import config_shape, default_shape, final_shape
from deftree.schema.validate import validate_tree

if TYPE_CHECKING:
    from deftree.cli.console import ConsoleLike
    from deftree.core.diagnostics import Diagnostic
    from deftree.schema.shapes import ObjectShape

logger = get_logger(__name__)


def _report(console: ConsoleLike, title: str, diags: list[Diagnostic], *, vlevel: int) -> int:
    """Print the diagnostics of one checked tree and return its error count."""
    stats = compute_diagnostic_stats(diags)
    color: bool = getattr(console, "enable_color", False)
    if stats.total == 0:
        if vlevel <= logging.INFO:
            console.print(f"{title}: {console.styled('ok', fg='green')}")
        return 0
    console.print(f"{title}: {stats.n_error} error(s), {stats.n_warning} warning(s)")
    for d in diags:
        console.print(f"  {d.render(color=color)}")
    return stats.n_error


@click.command(
    name="check",
    help="Validate SCHEMA and, optionally, a defaults tree and a config against it.",
)
@click.argument("schema_path", metavar="SCHEMA", type=click.Path(path_type=Path))
@click.option(
    "--defaults",
    "defaults_path",
    default=None,
    metavar="FILE",
    type=click.Path(path_type=Path),
    help="Defaults tree to check against the derived defaults shape.",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    metavar="FILE",
    type=click.Path(path_type=Path),
    help="Config to check against the config shape.",
)
@click.option(
    "--mode",
    type=EnumChoiceParam(MergeMode),
    default=MergeMode.PRESENCE.value,
    show_default=True,
    help="Merge mode used for the final check (see `deftree merge`).",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    schema_path: Path,
    defaults_path: Path | None,
    config_path: Path | None,
    mode: MergeMode,
) -> None:
    """Check a schema, its defaults and a config.

    Args:
        ctx (click.Context): Click context carrying the console.
        schema_path (Path): Schema document.
        defaults_path (Path | None): Optional defaults tree.
        config_path (Path | None): Optional config.
        mode (MergeMode): When a config value counts as supplied in the final check.
    """
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    shape: ObjectShape = load_input_schema(schema_path)
    if vlevel <= logging.INFO:
        console.print(f"schema: {console.styled('ok', fg='green')} ({len(shape.fields)} fields)")

    n_errors = 0
    defaults: dict[str, Any] | None = None
    config: dict[str, Any] | None = None

    if defaults_path is not None:
        defaults = load_input_tree(defaults_path, "defaults")
        n_errors += _report(
            console, "defaults", validate_tree(defaults, default_shape(shape)), vlevel=vlevel
        )

    if config_path is not None:
        config = load_input_tree(config_path, "config")
        n_errors += _report(
            console, "config", validate_tree(config, config_shape(shape)), vlevel=vlevel
        )

    if defaults is not None and config is not None:
        final: dict[str, Any] = merge_trees(config, defaults, shape=shape, mode=mode)
        n_errors += _report(
            console, "final", validate_tree(final, final_shape(shape)), vlevel=vlevel
        )

    logger.debug("check finished with %d error(s)", n_errors)
    if n_errors:
        ctx.exit(ExitCode.FAILURE)
