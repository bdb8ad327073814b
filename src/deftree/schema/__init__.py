# deftree:header:start
#
#   project      : DefTree
#   file         : __init__.py
#   file_relpath : src/deftree/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Configuration shapes: declaration, markers, derivation and validation.

Typical flow:
    1. Declare a definition shape with the builders (`obj`, `array`, `string`, ...)
       or load one from TOML (`deftree.schema.loader.load_schema_file`).
    2. Mark fields with `no_default`, `nullable_default` or `deep_no_default`.
    3. Derive the defaults shape (`default_shape`) to know what defaults to supply,
       and the final shape (`final_shape`) to know what a merge guarantees.
    4. Check trees with `validate_tree` / `ensure_valid`.

`deftree.schema.model.ConfigSchema` bundles these steps with the merge engine.
"""

from __future__ import annotations

from .derive import config_shape, default_shape, final_shape, is_empty
from .markers import (
    DefaultPolicy,
    Marker,
    deep_no_default,
    no_default,
    nullable_default,
    policy_of,
)
from .shapes import (
    ArrayShape,
    Field,
    ObjectShape,
    ScalarKind,
    ScalarShape,
    Shape,
    any_value,
    array,
    as_field,
    boolean,
    integer,
    number,
    obj,
    optional,
    required,
    string,
)
from .validate import ensure_valid, validate_tree

__all__: list[str] = [
    "ArrayShape",
    "DefaultPolicy",
    "Field",
    "Marker",
    "ObjectShape",
    "ScalarKind",
    "ScalarShape",
    "Shape",
    "any_value",
    "array",
    "as_field",
    "boolean",
    "config_shape",
    "deep_no_default",
    "default_shape",
    "ensure_valid",
    "final_shape",
    "integer",
    "is_empty",
    "no_default",
    "nullable_default",
    "number",
    "obj",
    "optional",
    "policy_of",
    "required",
    "string",
    "validate_tree",
]
