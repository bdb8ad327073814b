# deftree:header:start
#
#   project      : DefTree
#   file         : merge.py
#   file_relpath : src/deftree/cli/commands/merge.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""DefTree `merge` command.

Merges a config file with a defaults file and prints the final config.

With ``--schema`` the merge is shape-aware (NoDefault fields never read the
defaults tree) and the result is validated against the final shape; a required
field supplied by neither file then fails the command with its dotted path.
Without a schema, unresolved fields are silently omitted.

Examples:
    deftree merge app.toml --defaults app.defaults.toml
    deftree merge app.json --defaults defaults.toml --schema app.schema.toml --format json
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
    resolution_failure,
)
from deftree.cli.options import output_format_option
from deftree.core.errors import ResolutionError
from deftree.core.logging import get_logger
from deftree.core.merge import MergeMode, generate_final_config
from deftree.io.loaders import format_for_path
from deftree.io.render import render_tree

if TYPE_CHECKING:
    from deftree.io.types import TreeFormat
    from deftree.schema.shapes import ObjectShape

logger = get_logger(__name__)


@click.command(
    name="merge",
    help="Merge CONFIG with a defaults tree and print the final config.",
)
@click.argument("config_path", metavar="CONFIG", type=click.Path(path_type=Path))
@click.option(
    "--defaults",
    "defaults_path",
    required=True,
    metavar="FILE",
    type=click.Path(path_type=Path),
    help="Defaults tree (TOML or JSON).",
)
@click.option(
    "--schema",
    "schema_path",
    default=None,
    metavar="FILE",
    type=click.Path(path_type=Path),
    help="Schema document; enables shape-aware merging and validation.",
)
@click.option(
    "--mode",
    type=EnumChoiceParam(MergeMode),
    default=MergeMode.PRESENCE.value,
    show_default=True,
    help="presence: only absent values fall back; truthy: falsy values fall back too.",
)
@click.option(
    "--no-validate",
    "no_validate",
    is_flag=True,
    help="Do not validate the result against the schema.",
)
@output_format_option
@click.pass_context
def merge_command(
    ctx: click.Context,
    *,
    config_path: Path,
    defaults_path: Path,
    schema_path: Path | None,
    mode: MergeMode,
    no_validate: bool,
    output_format: TreeFormat | None,
) -> None:
    """Merge a config with its defaults and print the final config.

    Args:
        ctx (click.Context): Click context carrying the console.
        config_path (Path): Config file (TOML or JSON).
        defaults_path (Path): Defaults file (TOML or JSON).
        schema_path (Path | None): Optional schema document.
        mode (MergeMode): When a config value counts as supplied.
        no_validate (bool): Skip validation of the result.
        output_format (TreeFormat | None): Output format; defaults to the format of
            ``config_path``.
    """
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    config: dict[str, Any] = load_input_tree(config_path, "config")
    defaults: dict[str, Any] = load_input_tree(defaults_path, "defaults")
    shape: ObjectShape | None = load_input_schema(schema_path) if schema_path else None

    if shape is None and vlevel <= logging.INFO:
        console.warn("No schema given: fields supplied by neither tree are omitted.")

    try:
        final: dict[str, Any] = generate_final_config(
            config,
            defaults,
            shape=shape,
            mode=mode,
            validate=not no_validate,
        )
    except ResolutionError as e:
        raise resolution_failure(e) from e

    fmt: TreeFormat = output_format or format_for_path(config_path)
    logger.info("Merged %s with %s (%s mode)", config_path, defaults_path, mode.value)
    console.print(render_tree(final, fmt).rstrip("\n"))
