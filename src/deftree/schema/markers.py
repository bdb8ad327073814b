# deftree:header:start
#
#   project      : DefTree
#   file         : markers.py
#   file_relpath : src/deftree/schema/markers.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Defaulting markers for shape fields.

Markers record how a field is defaulted without altering the values stored in a
configuration tree: they live only in the shape and carry no payload.

    * ``NO_DEFAULT``: the field is never looked up in the defaults tree. If the
      config does not supply it, it stays absent.
    * ``NULLABLE_DEFAULT``: the field is filled from the defaults tree, but the
      default itself may be absent (``None``).
    * unmarked: an optional field must have a default and is guaranteed present
      after merging; a required field must come from the config.

`DefaultPolicy` summarizes ``(optional, marker)`` into one value per field.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from deftree.schema.shapes import ArrayShape, Field, ObjectShape, Shape, as_field


class Marker(str, Enum):
    """Defaulting marker attached to a `Field`."""

    NO_DEFAULT = "no_default"
    NULLABLE_DEFAULT = "nullable_default"


class DefaultPolicy(str, Enum):
    """Effective defaulting policy of a field."""

    REQUIRED = "required"
    OPTIONAL_NO_DEFAULT = "optional_no_default"
    OPTIONAL_NULLABLE_DEFAULT = "optional_nullable_default"
    OPTIONAL_WITH_DEFAULT = "optional_with_default"


def policy_of(field: Field) -> DefaultPolicy:
    """Return the `DefaultPolicy` of ``field``.

    Required fields are `DefaultPolicy.REQUIRED` whatever their marker: a marker on a
    required field only matters for the fields nested beneath it.
    """
    if not field.optional:
        return DefaultPolicy.REQUIRED
    if field.marker is Marker.NO_DEFAULT:
        return DefaultPolicy.OPTIONAL_NO_DEFAULT
    if field.marker is Marker.NULLABLE_DEFAULT:
        return DefaultPolicy.OPTIONAL_NULLABLE_DEFAULT
    return DefaultPolicy.OPTIONAL_WITH_DEFAULT


def no_default(value: Shape | Field) -> Field:
    """Mark a field (or a bare shape, taken as a required field) as ``NO_DEFAULT``."""
    return replace(as_field(value), marker=Marker.NO_DEFAULT)


def nullable_default(value: Shape | Field) -> Field:
    """Mark a field (or a bare shape, taken as a required field) as ``NULLABLE_DEFAULT``."""
    return replace(as_field(value), marker=Marker.NULLABLE_DEFAULT)


def deep_no_default(value: Shape | Field) -> Field:
    """Mark a field and every field nested beneath it as ``NO_DEFAULT``.

    Marking distributes through objects and arrays. Fields that already carry a
    marker keep it; their own nested fields are still visited.
    """
    return _deep_mark_field(as_field(value), Marker.NO_DEFAULT)


def _deep_mark_field(field: Field, marker: Marker) -> Field:
    return replace(
        field,
        shape=_deep_mark_shape(field.shape, marker),
        marker=field.marker if field.marker is not None else marker,
    )


def _deep_mark_shape(shape: Shape, marker: Marker) -> Shape:
    if isinstance(shape, ObjectShape):
        return ObjectShape({name: _deep_mark_field(f, marker) for name, f in shape.fields.items()})
    if isinstance(shape, ArrayShape):
        return replace(shape, element=_deep_mark_shape(shape.element, marker))
    return shape
