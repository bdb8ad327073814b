# deftree:header:start
#
#   project      : DefTree
#   file         : shape.py
#   file_relpath : src/deftree/cli/commands/shape.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""DefTree `shape` command.

Prints a shape derived from a schema document:

* ``config``: what callers may supply (markers stripped);
* ``defaults``: what the defaults tree must contain, including its
  ``<field>_defaults`` entries;
* ``final``: what every merged config is guaranteed to contain.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable

import click

from deftree.cli.cli_types import EnumChoiceParam
from deftree.cli.cmd_common import get_console, load_input_schema
from deftree.cli.errors import DefTreeUnexpectedError
from deftree.cli.options import output_format_option
from deftree.io.render import render_tree
from deftree.io.types import TreeFormat
from deftree.schema.derive import config_shape, default_shape, final_shape
from deftree.schema.loader import shape_to_table
from deftree.schema.shapes import ObjectShape

if TYPE_CHECKING:
    from deftree.schema.shapes import Shape


class ShapeKind(str, Enum):
    """Which derived shape to print."""

    CONFIG = "config"
    DEFAULTS = "defaults"
    FINAL = "final"


_DERIVERS: dict[ShapeKind, Callable[[Shape], Shape]] = {
    ShapeKind.CONFIG: config_shape,
    ShapeKind.DEFAULTS: default_shape,
    ShapeKind.FINAL: final_shape,
}


@click.command(
    name="shape",
    help="Print the config, defaults or final shape derived from SCHEMA.",
)
@click.argument("schema_path", metavar="SCHEMA", type=click.Path(path_type=Path))
@click.option(
    "--kind",
    type=EnumChoiceParam(ShapeKind),
    default=ShapeKind.DEFAULTS.value,
    show_default=True,
    help="Derived shape to print.",
)
@output_format_option
@click.pass_context
def shape_command(
    ctx: click.Context,
    *,
    schema_path: Path,
    kind: ShapeKind,
    output_format: TreeFormat | None,
) -> None:
    """Print a derived shape as a schema document."""
    console = get_console(ctx)
    shape: ObjectShape = load_input_schema(schema_path)

    derived: Shape = _DERIVERS[kind](shape)
    if not isinstance(derived, ObjectShape):
        raise DefTreeUnexpectedError(f"Derived {kind.value} shape is not an object")

    fmt: TreeFormat = output_format or TreeFormat.TOML
    console.print(render_tree(shape_to_table(derived), fmt).rstrip("\n"))
