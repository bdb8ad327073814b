# deftree:header:start
#
#   project      : DefTree
#   file         : derive.py
#   file_relpath : src/deftree/schema/derive.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Shapes derived from a configuration definition.

From one *definition* shape (fields with optionality and markers) three shapes
are derived:

    * `config_shape`: what callers may pass in. Markers are stripped, optionality
      is kept.
    * `default_shape`: what the defaults tree must supply. Only fields that need
      defaulting appear, plus ``<field>_defaults`` entries carrying the defaults of
      nested objects (and of array elements).
    * `final_shape`: what a successful merge guarantees. Unmarked optional fields
      become required; ``NO_DEFAULT`` and ``NULLABLE_DEFAULT`` fields stay optional.

Default-shape rules, per field:

    | field                                 | pass-through entry | ``_defaults`` entry  |
    |---------------------------------------|--------------------|----------------------|
    | required, unmarked                    | no                 | if children need it  |
    | optional, unmarked                    | yes, required      | if children need it  |
    | optional, ``NULLABLE_DEFAULT``        | yes, optional      | if children need it  |
    | ``NO_DEFAULT`` (optional or not)      | no                 | no                   |

"Children need it" means the recursively derived default shape of the object (or
of the innermost array element) is not empty.
"""

from __future__ import annotations

from dataclasses import replace

from deftree.constants import DEFAULTS_SUFFIX
from deftree.core.logging import get_logger
from deftree.schema.markers import Marker
from deftree.schema.shapes import ArrayShape, Field, ObjectShape, Shape, innermost

logger = get_logger(__name__)


def config_shape(shape: Shape) -> Shape:
    """Return ``shape`` with every marker stripped and optionality unchanged."""
    if isinstance(shape, ObjectShape):
        return ObjectShape(
            {
                name: Field(config_shape(f.shape), optional=f.optional)
                for name, f in shape.fields.items()
            }
        )
    if isinstance(shape, ArrayShape):
        return replace(shape, element=config_shape(shape.element))
    return shape


def final_shape(shape: Shape) -> Shape:
    """Return the shape guaranteed by merging a config against complete defaults.

    Unmarked optional fields become required. Marked fields keep their optionality.
    Markers are stripped from the result.
    """
    if isinstance(shape, ObjectShape):
        return ObjectShape(
            {
                name: Field(final_shape(f.shape), optional=f.optional and f.marker is not None)
                for name, f in shape.fields.items()
            }
        )
    if isinstance(shape, ArrayShape):
        return replace(shape, element=final_shape(shape.element))
    return shape


def default_shape(shape: Shape) -> Shape:
    """Return the shape of the defaults tree matching the definition ``shape``.

    Arrays contribute the default shape of their (innermost) element; scalars are
    returned unchanged.
    """
    inner: Shape = innermost(shape)
    if isinstance(inner, ObjectShape):
        return _default_object(inner)
    return inner


def _default_object(shape: ObjectShape) -> ObjectShape:
    out: dict[str, Field] = {}
    for name, f in shape.fields.items():
        if f.marker is Marker.NO_DEFAULT:
            logger.trace("default shape: skipping no-default field %r", name)
            continue

        if f.optional:
            out[name] = Field(
                config_shape(f.shape),
                optional=f.marker is Marker.NULLABLE_DEFAULT,
            )

        inner: Shape = innermost(f.shape)
        if isinstance(inner, ObjectShape):
            sub: ObjectShape = _default_object(inner)
            if is_empty(sub):
                logger.trace("default shape: %r has nothing to default beneath it", name)
            else:
                out[f"{name}{DEFAULTS_SUFFIX}"] = Field(sub)
    return ObjectShape(out)


def is_empty(shape: Shape) -> bool:
    """Return True if ``shape`` is an object shape without fields."""
    return isinstance(shape, ObjectShape) and not shape.fields
