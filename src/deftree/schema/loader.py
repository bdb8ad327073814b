# deftree:header:start
#
#   project      : DefTree
#   file         : loader.py
#   file_relpath : src/deftree/schema/loader.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Read and write shapes as TOML schema documents.

A schema document describes one definition shape:

    [fields.appName]
    type = "string"

    [fields.dns]
    type = "object"
    optional = true
    marker = "no_default"

    [fields.dns.fields.hostedZoneId]
    type = "string"

    [fields.environments]
    type = "array"
    non_empty = true

    [fields.environments.items]
    type = "object"

    [fields.environments.items.fields.protocol]
    type = "string"
    optional = true
    choices = ["HTTP", "HTTPS"]

`shape_from_table` parses such a table (strictly: unknown keys, types and markers
raise `SchemaError`), `shape_to_table` renders any shape back, including derived
default shapes whose ``<field>_defaults`` names the builders would reject.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from deftree.core.errors import SchemaError
from deftree.core.logging import get_logger
from deftree.io.guards import as_toml_table, is_any_list
from deftree.io.loaders import load_tree
from deftree.schema.keys import Toml
from deftree.schema.markers import Marker, deep_no_default
from deftree.schema.shapes import (
    ArrayShape,
    Field,
    ObjectShape,
    ScalarKind,
    ScalarShape,
    Shape,
    obj,
)
from deftree.schema.validate import join_path

if TYPE_CHECKING:
    from pathlib import Path

    from deftree.core.logging import DefTreeLogger
    from deftree.io.types import TomlTable

logger: DefTreeLogger = get_logger(__name__)

_SCALAR_TYPES: dict[str, ScalarKind] = {kind.value: kind for kind in ScalarKind}


def _require_table(value: object, path: str) -> TomlTable:
    table: TomlTable | None = as_toml_table(value)
    if table is None:
        raise SchemaError(f"{path}: expected a table, got {type(value).__name__}")
    return table


def _check_keys(table: TomlTable, allowed: frozenset[str], path: str) -> None:
    unknown: list[str] = sorted(k for k in table if k not in allowed)
    if unknown:
        raise SchemaError(
            f"{path}: unknown key(s) {', '.join(unknown)} "
            f"(allowed: {', '.join(sorted(allowed))})"
        )


def _get_bool(table: TomlTable, key: str, path: str) -> bool:
    value: Any = table.get(key, False)
    if not isinstance(value, bool):
        raise SchemaError(f"{join_path(path, key)}: expected a boolean, got {value!r}")
    return value


def _parse_fields(value: object, path: str) -> ObjectShape:
    table: TomlTable = _require_table(value, path)
    return obj({name: _parse_field(sub, join_path(path, name)) for name, sub in table.items()})


def _parse_shape(table: TomlTable, path: str, *, extra_keys: frozenset[str]) -> Shape:
    type_name: Any = table.get(Toml.KEY_TYPE)
    if not isinstance(type_name, str):
        raise SchemaError(f"{path}: missing or invalid '{Toml.KEY_TYPE}'")

    if type_name == Toml.TYPE_OBJECT:
        _check_keys(table, Toml.ALLOWED_SHAPE_KEYS[Toml.TYPE_OBJECT] | extra_keys, path)
        return _parse_fields(
            table.get(Toml.SECTION_FIELDS, {}), join_path(path, Toml.SECTION_FIELDS)
        )

    if type_name == Toml.TYPE_ARRAY:
        _check_keys(table, Toml.ALLOWED_SHAPE_KEYS[Toml.TYPE_ARRAY] | extra_keys, path)
        items_path: str = join_path(path, Toml.KEY_ITEMS)
        if Toml.KEY_ITEMS not in table:
            raise SchemaError(f"{items_path}: arrays need an element shape")
        items: TomlTable = _require_table(table[Toml.KEY_ITEMS], items_path)
        element: Shape = _parse_shape(items, items_path, extra_keys=frozenset())
        return ArrayShape(element, non_empty=_get_bool(table, Toml.KEY_NON_EMPTY, path))

    kind: ScalarKind | None = _SCALAR_TYPES.get(type_name)
    if kind is None:
        raise SchemaError(f"{path}: unknown type {type_name!r}")
    _check_keys(table, Toml.ALLOWED_SCALAR_KEYS | extra_keys, path)
    choices: Any = table.get(Toml.KEY_CHOICES)
    if choices is None:
        return ScalarShape(kind)
    if not is_any_list(choices) or not choices:
        raise SchemaError(f"{join_path(path, Toml.KEY_CHOICES)}: expected a non-empty array")
    for choice in choices:
        if not kind.accepts(choice):
            raise SchemaError(
                f"{join_path(path, Toml.KEY_CHOICES)}: {choice!r} is not a valid {kind.value}"
            )
    return ScalarShape(kind, tuple(choices))


def _parse_field(value: object, path: str) -> Field:
    table: TomlTable = _require_table(value, path)
    shape: Shape = _parse_shape(table, path, extra_keys=Toml.FIELD_ONLY_KEYS)
    field = Field(shape, optional=_get_bool(table, Toml.KEY_OPTIONAL, path))

    marker_name: Any = table.get(Toml.KEY_MARKER)
    if marker_name is None:
        return field
    if marker_name == Toml.MARKER_DEEP_NO_DEFAULT:
        return deep_no_default(field)
    try:
        return Field(field.shape, optional=field.optional, marker=Marker(marker_name))
    except ValueError as e:
        marker_path: str = join_path(path, Toml.KEY_MARKER)
        raise SchemaError(f"{marker_path}: unknown marker {marker_name!r}") from e


def shape_from_table(table: TomlTable) -> ObjectShape:
    """Parse a schema document table into a definition shape.

    Args:
        table (TomlTable): Root table with a ``fields`` table.

    Returns:
        ObjectShape: The root object shape.

    Raises:
        SchemaError: If the document is malformed.
    """
    _check_keys(table, Toml.ALLOWED_ROOT_KEYS, "<schema>")
    shape: ObjectShape = _parse_fields(table.get(Toml.SECTION_FIELDS, {}), Toml.SECTION_FIELDS)
    logger.debug("Parsed schema with %d top-level field(s)", len(shape.fields))
    return shape


def load_schema_file(path: Path) -> ObjectShape:
    """Load a schema document (TOML or JSON) from ``path``.

    Raises:
        SourceError: If the file cannot be read or parsed.
        SchemaError: If the document is malformed.
    """
    try:
        return shape_from_table(load_tree(path))
    except SchemaError as e:
        raise SchemaError(f"{path}: {e}") from e


def _shape_table(shape: Shape) -> TomlTable:
    if isinstance(shape, ObjectShape):
        return {
            Toml.KEY_TYPE: Toml.TYPE_OBJECT,
            Toml.SECTION_FIELDS: _fields_table(shape),
        }
    if isinstance(shape, ArrayShape):
        out: TomlTable = {Toml.KEY_TYPE: Toml.TYPE_ARRAY}
        if shape.non_empty:
            out[Toml.KEY_NON_EMPTY] = True
        out[Toml.KEY_ITEMS] = _shape_table(shape.element)
        return out
    scalar: TomlTable = {Toml.KEY_TYPE: shape.kind.value}
    if shape.choices is not None:
        scalar[Toml.KEY_CHOICES] = list(shape.choices)
    return scalar


def _fields_table(shape: ObjectShape) -> TomlTable:
    out: TomlTable = {}
    for name, f in shape.fields.items():
        table: TomlTable = {Toml.KEY_TYPE: _shape_table(f.shape)[Toml.KEY_TYPE]}
        if f.optional:
            table[Toml.KEY_OPTIONAL] = True
        if f.marker is not None:
            table[Toml.KEY_MARKER] = f.marker.value
        table.update(_shape_table(f.shape))
        out[name] = table
    return out


def shape_to_table(shape: ObjectShape) -> TomlTable:
    """Render an object shape as a schema document table.

    The output of `shape_to_table` for a definition shape parses back to an equal
    shape with `shape_from_table`.
    """
    return {Toml.SECTION_FIELDS: _fields_table(shape)}
