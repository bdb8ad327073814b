# deftree:header:start
#
#   project      : DefTree
#   file         : render.py
#   file_relpath : src/deftree/io/render.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Render trees as TOML or JSON.

TOML has no `null` value, so `None` entries are stripped during TOML rendering.
Merged trees never hold `None`, but caller-built defaults trees may (for
nullable defaults).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from deftree.core.logging import get_logger

from .types import TreeFormat

if TYPE_CHECKING:
    from deftree.core.logging import DefTreeLogger

    from .types import TomlTable

logger: DefTreeLogger = get_logger(__name__)


def _tomlkit_dumps(data: Mapping[str, Any]) -> str:
    """Typed wrapper around tomlkit.dumps() for strict type checking."""
    cleaned: Any = _strip_none_for_toml(data)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings/lists.

    Notes:
        - Tuples are rendered as arrays.
        - Mapping keys are normalized to strings, since TOML tables are string-keyed.
    """
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                logger.debug("Ignoring `None` entry in Mapping for key %s", k_any)
                continue
            k: str = k_any if isinstance(k_any, str) else str(k_any)
            out[k] = _strip_none_for_toml(v_any)
        return out

    if isinstance(value, (list, tuple)):
        out_list: list[object] = []
        seq: list[object] = list(cast("list[object]", value))
        for v_any in seq:
            if v_any is None:
                logger.debug("Ignoring `None` entry in list")
                continue
            out_list.append(_strip_none_for_toml(v_any))
        return out_list

    return value


def to_toml(toml_dict: Mapping[str, Any]) -> str:
    """Serialize a tree to a TOML string.

    TOML has no null: ``None`` is dropped from tables and from arrays (later array
    elements move up). Render as JSON to keep it.

    Args:
        toml_dict (Mapping[str, Any]): Tree to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    return _tomlkit_dumps(toml_dict)


def to_json(tree: Mapping[str, Any], *, indent: int = 2) -> str:
    """Serialize a tree to a JSON string (``None`` becomes ``null``)."""
    return json.dumps(tree, indent=indent, ensure_ascii=False)


def render_tree(tree: Mapping[str, Any] | TomlTable, fmt: TreeFormat) -> str:
    """Render ``tree`` in the requested format."""
    if fmt is TreeFormat.JSON:
        return to_json(tree)
    return to_toml(tree)
