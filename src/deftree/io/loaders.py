# deftree:header:start
#
#   project      : DefTree
#   file         : loaders.py
#   file_relpath : src/deftree/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Load configuration, defaults and schema trees from disk.

TOML is parsed with `tomlkit` and JSON with the standard `json` module; both
return plain ``dict`` structures. The format follows the file suffix (``.json``
is JSON, anything else is TOML) unless given explicitly.

Unlike a config *layer* that can fall back to an empty table, a tree that cannot
be read is fatal here: every failure is logged and re-raised as `SourceError`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from deftree.core.errors import SourceError
from deftree.core.logging import get_logger

from .guards import is_toml_table
from .types import TreeFormat

if TYPE_CHECKING:
    from pathlib import Path

    from deftree.core.logging import DefTreeLogger

    from .types import TomlTable

logger: DefTreeLogger = get_logger(__name__)


def format_for_path(path: Path) -> TreeFormat:
    """Return the tree format implied by the suffix of ``path``."""
    return TreeFormat.JSON if path.suffix.lower() == ".json" else TreeFormat.TOML


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error reading %s: %s", path, e)
        raise SourceError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s: %s", path, e)
        raise SourceError(f"Cannot decode {path} as UTF-8: {e}") from e


def parse_toml_text(text: str, *, origin: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        SourceError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", origin, e)
        raise SourceError(f"Invalid TOML in {origin}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any)


def parse_json_text(text: str, *, origin: str = "<string>") -> TomlTable:
    """Parse JSON text whose top level is an object into a plain dict.

    Raises:
        SourceError: If the text is not valid JSON or its top level is not an object.
    """
    try:
        data_any: Any = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Error decoding JSON from %s: %s", origin, e)
        raise SourceError(f"Invalid JSON in {origin}: {e}") from e
    if not is_toml_table(data_any):
        raise SourceError(f"Top level of {origin} must be an object, got {type(data_any).__name__}")
    return data_any


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        SourceError: If the file cannot be read or parsed.
    """
    return parse_toml_text(_read_text(path), origin=str(path))


def load_json_dict(path: Path) -> TomlTable:
    """Load and parse a JSON file from the filesystem.

    Raises:
        SourceError: If the file cannot be read or parsed.
    """
    return parse_json_text(_read_text(path), origin=str(path))


def load_tree(path: Path, fmt: TreeFormat | None = None) -> TomlTable:
    """Load a tree from ``path`` in ``fmt`` (inferred from the suffix when None).

    Raises:
        SourceError: If the file cannot be read or parsed.
    """
    fmt = fmt or format_for_path(path)
    logger.debug("Loading %s tree from %s", fmt.value, path)
    if fmt is TreeFormat.JSON:
        return load_json_dict(path)
    return load_toml_dict(path)
