# deftree:header:start
#
#   project      : DefTree
#   file         : cmd_common.py
#   file_relpath : src/deftree/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Common command utilities for Click-based commands.

This module holds small helpers used by several commands: reading the shared
state placed on the context by the ``deftree`` group, loading input files, and
translating library errors into CLI errors with the right exit code.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from deftree.cli.errors import (
    DefTreeConfigError,
    DefTreeDataError,
    DefTreeFileNotFoundError,
    DefTreeIOError,
)
from deftree.core.errors import SchemaError, SourceError
from deftree.core.logging import get_logger
from deftree.io.loaders import load_tree
from deftree.schema.loader import load_schema_file

if TYPE_CHECKING:
    from pathlib import Path

    from deftree.cli.console import ConsoleLike
    from deftree.core.errors import ResolutionError
    from deftree.io.types import TomlTable
    from deftree.schema.shapes import ObjectShape

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level set by the ``deftree`` group (WARNING if unset)."""
    obj = ctx.obj or {}
    return int(obj.get("verbosity_level", logging.WARNING))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the ``deftree`` group."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def _require_file(path: Path, what: str) -> None:
    if not path.exists():
        raise DefTreeFileNotFoundError(f"{what} file not found: {path}")
    if not path.is_file():
        raise DefTreeIOError(f"{what} path is not a file: {path}")


def _source_error(e: SourceError) -> DefTreeIOError | DefTreeDataError:
    if isinstance(e.__cause__, OSError):
        return DefTreeIOError(str(e))
    return DefTreeDataError(str(e))


def load_input_tree(path: Path, what: str) -> TomlTable:
    """Load a config or defaults tree for a command.

    Args:
        path (Path): TOML or JSON file.
        what (str): Human label used in messages (``"config"``, ``"defaults"``).

    Returns:
        TomlTable: The parsed tree.

    Raises:
        DefTreeFileNotFoundError: If ``path`` does not exist.
        DefTreeIOError: If ``path`` cannot be read.
        DefTreeDataError: If ``path`` cannot be parsed.
    """
    _require_file(path, what.capitalize())
    try:
        return load_tree(path)
    except SourceError as e:
        raise _source_error(e) from e


def load_input_schema(path: Path) -> ObjectShape:
    """Load a schema document for a command.

    Raises:
        DefTreeFileNotFoundError: If ``path`` does not exist.
        DefTreeIOError: If ``path`` cannot be read.
        DefTreeDataError: If ``path`` cannot be parsed.
        DefTreeConfigError: If the schema document is malformed.
    """
    _require_file(path, "Schema")
    try:
        return load_schema_file(path)
    except SourceError as e:
        raise _source_error(e) from e
    except SchemaError as e:
        raise DefTreeConfigError(f"Invalid schema: {e}") from e


def resolution_failure(e: ResolutionError) -> DefTreeDataError:
    """Return the CLI error reporting a tree that failed validation."""
    logger.debug("Resolution failed with %d diagnostic(s)", len(e.diagnostics))
    return DefTreeDataError(str(e))
