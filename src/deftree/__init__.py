# deftree:header:start
#
#   project      : DefTree
#   file         : __init__.py
#   file_relpath : src/deftree/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""DefTree package.

DefTree completes partial configuration trees from a defaults tree. A definition
shape says which fields are required, optional, never defaulted (`no_default`)
or defaulted to nothing (`nullable_default`); DefTree derives the shape the
defaults tree must have, merges a config with its defaults, and checks that the
result is complete.

Example:
    from deftree import ConfigSchema, obj, optional, string

    schema = ConfigSchema(
        obj(name=string(), region=optional(string())),
        {"region": "us-west-2"},
    )
    schema.resolve({"name": "app"})  # {"name": "app", "region": "us-west-2"}
"""

from __future__ import annotations

from deftree.core.errors import (
    DefTreeError,
    MissingRequiredFieldError,
    ResolutionError,
    SchemaError,
    ShapeMismatchError,
    SourceError,
)
from deftree.core.merge import MergeMode, generate_final_config, merge_trees
from deftree.schema import (
    ArrayShape,
    DefaultPolicy,
    Field,
    Marker,
    ObjectShape,
    ScalarKind,
    ScalarShape,
    Shape,
    any_value,
    array,
    boolean,
    config_shape,
    deep_no_default,
    default_shape,
    ensure_valid,
    final_shape,
    integer,
    no_default,
    nullable_default,
    number,
    obj,
    optional,
    policy_of,
    required,
    string,
    validate_tree,
)
from deftree.schema.model import ConfigSchema

__all__: list[str] = [
    "ArrayShape",
    "ConfigSchema",
    "DefTreeError",
    "DefaultPolicy",
    "Field",
    "Marker",
    "MergeMode",
    "MissingRequiredFieldError",
    "ObjectShape",
    "ResolutionError",
    "ScalarKind",
    "ScalarShape",
    "SchemaError",
    "Shape",
    "ShapeMismatchError",
    "SourceError",
    "any_value",
    "array",
    "boolean",
    "config_shape",
    "deep_no_default",
    "default_shape",
    "ensure_valid",
    "final_shape",
    "generate_final_config",
    "integer",
    "merge_trees",
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
