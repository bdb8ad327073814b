# deftree:header:start
#
#   project      : DefTree
#   file         : types.py
#   file_relpath : src/deftree/io/types.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Shared tree-related type aliases for the I/O package."""

from __future__ import annotations

from enum import Enum
from typing import Any

TomlTable = dict[str, Any]


class TreeFormat(str, Enum):
    """On-disk formats for configuration, defaults and schema trees."""

    TOML = "toml"
    JSON = "json"
