# deftree:header:start
#
#   project      : DefTree
#   file         : collections.py
#   file_relpath : src/deftree/utils/collections.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Collection helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable

T = TypeVar("T")
K = TypeVar("K", bound="Hashable")


def group_by(items: Iterable[T], selector: Callable[[T], K]) -> dict[K, list[T]]:
    """Group ``items`` by the key ``selector`` returns for each of them.

    Groups appear in the order their first item was seen; items keep their order
    within a group.
    """
    out: dict[K, list[T]] = {}
    for item in items:
        out.setdefault(selector(item), []).append(item)
    return out
