# deftree:header:start
#
#   project      : DefTree
#   file         : shapes.py
#   file_relpath : src/deftree/schema/shapes.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Shape model for configuration trees.

A *shape* describes the structure of a configuration tree independently of any
instance: which fields exist, how they nest, whether they are optional, and which
defaulting policy (marker) applies to them.

Design:
    * Shapes are frozen dataclasses; derived shapes (see `deftree.schema.derive`)
      are always new objects.
    * Three node kinds exist: `ScalarShape` (leaf values), `ObjectShape`
      (named fields, merged recursively) and `ArrayShape` (one element shape shared
      by every element).
    * Optionality and markers belong to the `Field` that holds a shape, not to the
      shape itself, mirroring how a mapping key may be absent while its value type
      stays the same.

Shapes are usually declared with the small builder functions at the bottom of this
module:

    obj(
        name=string(),
        description=optional(string(), Marker.NO_DEFAULT),
        healthCheck=optional(obj(path=optional(string()))),
    )
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

from deftree.constants import DEFAULTS_SUFFIX
from deftree.core.errors import SchemaError

if TYPE_CHECKING:
    from deftree.schema.markers import Marker


class ScalarKind(str, Enum):
    """Value kinds a `ScalarShape` accepts."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ANY = "any"

    def accepts(self, value: object) -> bool:
        """Return True if ``value`` is an instance of this kind.

        ``bool`` is never accepted as a number even though it subclasses ``int``.
        """
        if self is ScalarKind.ANY:
            return True
        if self is ScalarKind.BOOLEAN:
            return isinstance(value, bool)
        if isinstance(value, bool):
            return False
        if self is ScalarKind.STRING:
            return isinstance(value, str)
        if self is ScalarKind.INTEGER:
            return isinstance(value, int)
        if isinstance(value, float):
            return not math.isnan(value)
        return isinstance(value, int)


@dataclass(frozen=True, slots=True)
class ScalarShape:
    """A leaf value: taken as-is from whichever source provides it.

    Attributes:
        kind (ScalarKind): Accepted value kind.
        choices (tuple[object, ...] | None): Allowed literal values, or None for any
            value of ``kind``.
    """

    kind: ScalarKind = ScalarKind.ANY
    choices: tuple[object, ...] | None = None


@dataclass(frozen=True, slots=True)
class ArrayShape:
    """A list whose elements all share one shape (and one defaults sub-tree).

    Attributes:
        element (Shape): Shape of every element.
        non_empty (bool): Whether the list must hold at least one element.
    """

    element: Shape
    non_empty: bool = False


@dataclass(frozen=True, slots=True)
class ObjectShape:
    """A mapping of named fields, merged recursively.

    Attributes:
        fields (Mapping[str, Field]): Read-only mapping of field name to `Field`,
            in declaration order.
    """

    fields: Mapping[str, Field] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the field table so derived shapes can share it safely.
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


Shape = Union[ScalarShape, ArrayShape, ObjectShape]


@dataclass(frozen=True, slots=True)
class Field:
    """A named slot of an `ObjectShape`.

    Attributes:
        shape (Shape): Shape of the value held by the field.
        optional (bool): Whether the key may be absent from a configuration instance.
        marker (Marker | None): Defaulting marker, or None for the unmarked policy.
    """

    shape: Shape
    optional: bool = False
    marker: Marker | None = None


def innermost(shape: Shape) -> Shape:
    """Return the element shape of (possibly nested) arrays, or ``shape`` itself."""
    while isinstance(shape, ArrayShape):
        shape = shape.element
    return shape


# --- Builders ---


def string(*choices: str) -> ScalarShape:
    """Return a string shape, optionally restricted to literal ``choices``."""
    return ScalarShape(ScalarKind.STRING, tuple(choices) if choices else None)


def integer() -> ScalarShape:
    """Return an integer shape."""
    return ScalarShape(ScalarKind.INTEGER)


def number() -> ScalarShape:
    """Return a number (int or float) shape."""
    return ScalarShape(ScalarKind.NUMBER)


def boolean() -> ScalarShape:
    """Return a boolean shape."""
    return ScalarShape(ScalarKind.BOOLEAN)


def any_value() -> ScalarShape:
    """Return a shape accepting any leaf value."""
    return ScalarShape(ScalarKind.ANY)


def array(element: Shape, *, non_empty: bool = False) -> ArrayShape:
    """Return an array shape whose elements all have shape ``element``."""
    if isinstance(element, Field):
        raise SchemaError("Array elements take a shape, not a field; markers go on the array field")
    return ArrayShape(element, non_empty=non_empty)


def required(shape: Shape) -> Field:
    """Return a required, unmarked field holding ``shape``."""
    return Field(shape)


def optional(shape: Shape, marker: Marker | None = None) -> Field:
    """Return an optional field holding ``shape``, with an optional marker."""
    return Field(shape, optional=True, marker=marker)


def as_field(value: Shape | Field) -> Field:
    """Return ``value`` as a `Field`; bare shapes become required fields."""
    if isinstance(value, Field):
        return value
    if isinstance(value, (ScalarShape, ArrayShape, ObjectShape)):
        return Field(value)
    raise SchemaError(f"Expected a shape or a field, got {type(value).__name__}")


def obj(
    fields: Mapping[str, Shape | Field] | None = None,
    /,
    **kwfields: Shape | Field,
) -> ObjectShape:
    """Return an object shape from named fields or shapes.

    Fields may be passed as a mapping (for names that are not valid identifiers)
    and/or as keyword arguments. Bare shapes are taken as required fields.

    Raises:
        SchemaError: If a field name is empty or uses the reserved defaults suffix.
    """
    merged: dict[str, Shape | Field] = dict(fields or {})
    merged.update(kwfields)
    out: dict[str, Field] = {}
    for name, value in merged.items():
        if not name:
            raise SchemaError("Field names must not be empty")
        if name.endswith(DEFAULTS_SUFFIX):
            raise SchemaError(
                f"Field name {name!r} ends with the reserved suffix {DEFAULTS_SUFFIX!r}"
            )
        out[name] = as_field(value)
    return ObjectShape(out)
