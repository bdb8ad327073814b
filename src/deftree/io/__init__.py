# deftree:header:start
#
#   project      : DefTree
#   file         : __init__.py
#   file_relpath : src/deftree/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""TOML/JSON I/O helpers for DefTree trees.

This package centralizes **pure** helpers for reading and writing the trees DefTree
works with: configuration instances, defaults trees and schema documents. Keeping
them apart from the merge engine keeps the engine free of I/O.

TOML parsing/formatting:
    DefTree uses `tomlkit` for parsing and rendering TOML, and the standard `json`
    module for JSON.

Typical flow:
    1. Load config/defaults with ``load_tree`` (format inferred from the suffix).
    2. Merge with `deftree.core.merge.generate_final_config`.
    3. Render the result with ``render_tree`` (``to_toml`` / ``to_json``).
"""

from __future__ import annotations

from .guards import as_toml_table, is_any_list, is_toml_table
from .loaders import (
    format_for_path,
    load_json_dict,
    load_toml_dict,
    load_tree,
    parse_json_text,
    parse_toml_text,
)
from .render import render_tree, to_json, to_toml
from .types import TomlTable, TreeFormat

__all__: list[str] = [
    "TomlTable",
    "TreeFormat",
    "as_toml_table",
    "format_for_path",
    "is_any_list",
    "is_toml_table",
    "load_json_dict",
    "load_toml_dict",
    "load_tree",
    "parse_json_text",
    "parse_toml_text",
    "render_tree",
    "to_json",
    "to_toml",
]
