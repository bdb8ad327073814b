# deftree:header:start
#
#   project      : DefTree
#   file         : keys.py
#   file_relpath : src/deftree/schema/keys.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Canonical TOML key names for DefTree schema documents.

This module defines the authoritative string constants used when reading and
writing schema documents (see `deftree.schema.loader`).

Design notes:
    - Keys defined here represent *external schema API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys and values used by DefTree schema documents.

    A schema document is a root table with a ``fields`` table. Each entry of a
    ``fields`` table is a *field table*:

        [fields.<name>]
        type = "object" | "array" | "string" | "integer" | "number" | "boolean" | "any"
        optional = true | false            # default false
        marker = "no_default" | "nullable_default" | "deep_no_default"
        fields = { ... }                   # type = "object"
        items = { type = ..., ... }        # type = "array", a shape table
        non_empty = true | false           # type = "array"
        choices = [ ... ]                  # scalar types
    """

    # Root / object tables
    SECTION_FIELDS: Final[str] = "fields"

    # Field tables
    KEY_TYPE: Final[str] = "type"
    KEY_OPTIONAL: Final[str] = "optional"
    KEY_MARKER: Final[str] = "marker"

    # Array shapes
    KEY_ITEMS: Final[str] = "items"
    KEY_NON_EMPTY: Final[str] = "non_empty"

    # Scalar shapes
    KEY_CHOICES: Final[str] = "choices"

    # Shape type names (scalar names follow `ScalarKind` values)
    TYPE_OBJECT: Final[str] = "object"
    TYPE_ARRAY: Final[str] = "array"

    # Marker values beyond the `Marker` enum
    MARKER_DEEP_NO_DEFAULT: Final[str] = "deep_no_default"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_ROOT_KEYS: Final[frozenset[str]] = frozenset({SECTION_FIELDS})

    # Keys allowed on a shape table (array `items` tables), per shape type.
    ALLOWED_SHAPE_KEYS: Final[dict[str, frozenset[str]]] = {
        TYPE_OBJECT: frozenset({KEY_TYPE, SECTION_FIELDS}),
        TYPE_ARRAY: frozenset({KEY_TYPE, KEY_ITEMS, KEY_NON_EMPTY}),
    }
    ALLOWED_SCALAR_KEYS: Final[frozenset[str]] = frozenset({KEY_TYPE, KEY_CHOICES})

    # Field tables additionally carry optionality and a marker.
    FIELD_ONLY_KEYS: Final[frozenset[str]] = frozenset({KEY_OPTIONAL, KEY_MARKER})
