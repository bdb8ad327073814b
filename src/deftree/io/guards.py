# deftree:header:start
#
#   project      : DefTree
#   file         : guards.py
#   file_relpath : src/deftree/io/guards.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Type guards and normalization helpers for parsed trees.

This module provides `TypeGuard`-based predicates that help Pyright narrow runtime
values coming from TOML/JSON parsing, and small side-effect-free normalization
helpers used by the schema loader.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

from deftree.core.logging import get_logger

if TYPE_CHECKING:
    from deftree.core.logging import DefTreeLogger

    from .types import TomlTable


logger: DefTreeLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value.

    Checks only that the value is a ``list``; does not validate item types.
    """
    return isinstance(obj, list)


def as_toml_table(obj: object) -> TomlTable | None:
    """Return the object as a TOML table when possible.

    Args:
        obj (object): Arbitrary object obtained from a parsed document.

    Returns:
        TomlTable | None: ``obj`` cast to ``TomlTable`` when it is a ``dict``,
        otherwise ``None``.
    """
    if is_toml_table(obj):
        return obj

    logger.debug("Not a TOML table: %r", obj)
    return None
