# deftree:header:start
#
#   project      : DefTree
#   file         : merge.py
#   file_relpath : src/deftree/core/merge.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Merge a partial configuration tree with its defaults tree.

Per mapping node, the merge engine:

    1. Collects the field names of ``config`` and ``defaults`` in first-seen order
       (config first). ``<name>_defaults`` keys count as ``<name>``: they carry the
       defaults of a field's children and never appear in a result.
    2. For each name, takes the config value when it is *supplied* (see
       `MergeMode`), otherwise the defaults value.
    3. Recurses into mappings against ``defaults["<name>_defaults"]``; merges every
       element of a list against that same sub-tree (defaults are shared, not
       per index); copies anything else. A ``None`` element of a list of tables
       is an absent element: it is completed from the shared sub-tree as if it
       were an empty table.
    4. Omits names that neither tree supplied.

Inputs are never mutated; the result is built from new dicts and lists.

When a definition shape is passed, ``NO_DEFAULT`` fields never read the defaults
tree, and `generate_final_config` validates the result against the final shape,
raising `MissingRequiredFieldError` with the dotted path of every gap.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from deftree.constants import DEFAULTS_SUFFIX
from deftree.core.logging import get_logger
from deftree.schema.derive import final_shape
from deftree.schema.markers import Marker
from deftree.schema.shapes import ArrayShape, ObjectShape
from deftree.schema.validate import ensure_valid, index_path, join_path

if TYPE_CHECKING:
    from deftree.core.logging import DefTreeLogger
    from deftree.schema.shapes import Shape

logger: DefTreeLogger = get_logger(__name__)

_MISSING: Final = object()

_EMPTY: Final[Mapping[str, Any]] = {}


class MergeMode(str, Enum):
    """When a config value counts as supplied.

    Attributes:
        PRESENCE: The key is present and its value is not ``None``. ``0``, ``""``
            and ``False`` override defaults. This is the default.
        TRUTHY: Legacy falsy-coalescing: ``None``, ``False``, zero, NaN and ``""``
            fall through to the defaults value, even when that is absent. Empty
            tables and arrays count as supplied.
    """

    PRESENCE = "presence"
    TRUTHY = "truthy"


def is_truthy(value: object) -> bool:
    """Return the legacy truthiness of ``value`` used by `MergeMode.TRUTHY`.

    Unlike Python truthiness, empty mappings and lists are truthy.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return value != 0 and not math.isnan(value)
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def _supplied(value: object, mode: MergeMode) -> bool:
    if mode is MergeMode.TRUTHY:
        return is_truthy(value)
    return value is not None


def _base_key(key: str) -> str | None:
    """Return the result key for ``key``; None for a bare reserved suffix."""
    if key.endswith(DEFAULTS_SUFFIX):
        base: str = key[: -len(DEFAULTS_SUFFIX)]
        return base or None
    return key


def _result_keys(config: Mapping[str, Any], defaults: Mapping[str, Any]) -> list[str]:
    seen: dict[str, None] = {}
    for key in (*config, *defaults):
        base: str | None = _base_key(str(key))
        if base is None:
            logger.debug("Ignoring bare %r key", key)
            continue
        seen.setdefault(base, None)
    return list(seen)


def _pick(
    config: Mapping[str, Any],
    defaults: Mapping[str, Any],
    key: str,
    mode: MergeMode,
    *,
    use_defaults: bool,
) -> tuple[Any, str]:
    """Return ``(value, source)`` for ``key``; value is `_MISSING` when unset."""
    value: Any = config.get(key, _MISSING)
    if value is not _MISSING and _supplied(value, mode):
        return value, "config"
    if not use_defaults:
        # No alternate source to fall through to.
        if value is _MISSING or value is None:
            return _MISSING, "none"
        return value, "config"
    fallback: Any = defaults.get(key, _MISSING)
    if fallback is _MISSING or fallback is None:
        return _MISSING, "none"
    return fallback, "defaults"


def _as_defaults(sub_defaults: Any, path: str) -> Mapping[str, Any]:
    if sub_defaults is None:
        return _EMPTY
    if isinstance(sub_defaults, Mapping):
        return sub_defaults
    logger.warning(
        "Ignoring %s%s: expected a table, got %s",
        path,
        DEFAULTS_SUFFIX,
        type(sub_defaults).__name__,
    )
    return _EMPTY


def _merge_node(
    config: Mapping[str, Any],
    defaults: Mapping[str, Any],
    shape: Shape | None,
    mode: MergeMode,
    path: str,
) -> dict[str, Any]:
    fields = shape.fields if isinstance(shape, ObjectShape) else _EMPTY
    result: dict[str, Any] = {}
    for key in _result_keys(config, defaults):
        key_path: str = join_path(path, key)
        field = fields.get(key)
        use_defaults: bool = field is None or field.marker is not Marker.NO_DEFAULT

        value, source = _pick(config, defaults, key, mode, use_defaults=use_defaults)
        if value is _MISSING:
            logger.trace("%s: unset", key_path)
            continue

        sub_defaults: Any = defaults.get(f"{key}{DEFAULTS_SUFFIX}") if use_defaults else None
        logger.trace("%s: resolved from %s", key_path, source)
        result[key] = _merge_value(
            value,
            sub_defaults,
            field.shape if field is not None else None,
            mode,
            key_path,
        )
    return result


def _merge_value(
    value: Any,
    sub_defaults: Any,
    shape: Shape | None,
    mode: MergeMode,
    path: str,
) -> Any:
    if isinstance(value, (list, tuple)):
        element: Shape | None = shape.element if isinstance(shape, ArrayShape) else None
        return [
            _merge_element(item, sub_defaults, element, mode, index_path(path, i))
            for i, item in enumerate(value)
        ]
    if isinstance(value, Mapping):
        return _merge_node(value, _as_defaults(sub_defaults, path), shape, mode, path)
    return value


def _merge_element(
    item: Any,
    sub_defaults: Any,
    shape: Shape | None,
    mode: MergeMode,
    path: str,
) -> Any:
    if item is None:
        tables: bool = isinstance(shape, ObjectShape) or (
            shape is None and isinstance(sub_defaults, Mapping)
        )
        if tables:
            logger.trace("%s: absent element completed from defaults", path)
            return _merge_node(_EMPTY, _as_defaults(sub_defaults, path), shape, mode, path)
    return _merge_value(item, sub_defaults, shape, mode, path)


def merge_trees(
    config: Mapping[str, Any],
    defaults: Mapping[str, Any],
    *,
    shape: ObjectShape | None = None,
    mode: MergeMode = MergeMode.PRESENCE,
) -> dict[str, Any]:
    """Merge ``config`` with ``defaults`` without validating the result.

    Args:
        config (Mapping[str, Any]): Partial configuration instance.
        defaults (Mapping[str, Any]): Defaults tree (see `deftree.schema.derive.default_shape`).
        shape (ObjectShape | None): Definition shape; when given, ``NO_DEFAULT`` fields
            ignore the defaults tree.
        mode (MergeMode): When a config value counts as supplied.

    Returns:
        dict[str, Any]: A new tree. Fields neither tree supplied are omitted.
    """
    mode = MergeMode(mode)
    logger.debug(
        "Merging config (%d keys) with defaults (%d keys), mode=%s",
        len(config),
        len(defaults),
        mode.value,
    )
    return _merge_node(config, defaults, shape, mode, "")


def generate_final_config(
    config: Mapping[str, Any],
    defaults: Mapping[str, Any],
    *,
    shape: ObjectShape | None = None,
    mode: MergeMode = MergeMode.PRESENCE,
    validate: bool = True,
) -> dict[str, Any]:
    """Merge ``config`` with ``defaults`` into a fully-resolved configuration.

    Without a shape this is the plain merge: unresolved fields are silently omitted.
    With a shape (and ``validate``), the result is checked against the final shape
    right away.

    Args:
        config (Mapping[str, Any]): Partial configuration instance.
        defaults (Mapping[str, Any]): Defaults tree.
        shape (ObjectShape | None): Definition shape of the configuration.
        mode (MergeMode): When a config value counts as supplied.
        validate (bool): Check the result against the final shape when ``shape`` is given.

    Returns:
        dict[str, Any]: The resolved configuration tree.

    Raises:
        MissingRequiredFieldError: If a required field was supplied by neither tree.
        ShapeMismatchError: If the result holds values of the wrong type.
    """
    result: dict[str, Any] = merge_trees(config, defaults, shape=shape, mode=mode)
    if shape is not None and validate:
        ensure_valid(result, final_shape(shape), what="final config")
    return result
