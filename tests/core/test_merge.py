# deftree:header:start
#
#   project      : DefTree
#   file         : test_merge.py
#   file_relpath : tests/core/test_merge.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Unit tests for the merge engine (`deftree.core.merge`).

Covers the per-node algorithm: field union, config-over-defaults precedence,
``<field>_defaults`` sub-trees, arrays sharing one defaults sub-tree, unset
fields, and the shape-aware handling of ``NO_DEFAULT`` fields.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from deftree.core.errors import MissingRequiredFieldError, ShapeMismatchError
from deftree.core.merge import generate_final_config, merge_trees
from deftree.schema.markers import no_default, nullable_default
from deftree.schema.shapes import array, integer, obj, optional, string


def test_config_value_wins_over_default() -> None:
    """A supplied config value replaces the default."""
    assert merge_trees({"region": "eu-west-1"}, {"region": "us-west-2"}) == {
        "region": "eu-west-1"
    }


def test_default_fills_absent_field() -> None:
    """Fields absent from the config are taken from the defaults tree."""
    assert merge_trees({"name": "app"}, {"region": "us-west-2"}) == {
        "name": "app",
        "region": "us-west-2",
    }


def test_result_keys_follow_config_then_defaults_order() -> None:
    """Result keys appear in first-seen order, config first."""
    result = merge_trees({"b": 1, "a": 2}, {"c": 3, "a": 9})
    assert list(result) == ["b", "a", "c"]


def test_nested_partial_override() -> None:
    """Nested config fields override only the matching nested defaults."""
    config: dict[str, Any] = {"healthCheck": {"path": "/ping"}}
    defaults: dict[str, Any] = {
        "healthCheck_defaults": {"protocol": "HTTP", "port": 80, "path": "/"},
    }
    assert merge_trees(config, defaults) == {
        "healthCheck": {"protocol": "HTTP", "port": 80, "path": "/ping"},
    }


def test_default_object_merges_with_its_own_defaults() -> None:
    """An object taken from the defaults tree is completed by its ``_defaults`` entry."""
    defaults: dict[str, Any] = {
        "application": {},
        "application_defaults": {"listeningPort": 80},
    }
    assert merge_trees({}, defaults) == {"application": {"listeningPort": 80}}


def test_array_elements_share_one_defaults_subtree() -> None:
    """Every array element is merged against the same ``_defaults`` sub-tree."""
    config: dict[str, Any] = {
        "environments": [{"name": "A"}, {"name": "B", "minInstances": 3}],
    }
    defaults: dict[str, Any] = {"environments_defaults": {"minInstances": 1}}
    assert merge_trees(config, defaults) == {
        "environments": [
            {"name": "A", "minInstances": 1},
            {"name": "B", "minInstances": 3},
        ],
    }


def test_non_mapping_array_elements_pass_through() -> None:
    """Scalars inside arrays are copied unchanged."""
    config: dict[str, Any] = {"tags": ["a", 1, {"k": "v"}]}
    defaults: dict[str, Any] = {"tags_defaults": {"extra": True}}
    assert merge_trees(config, defaults) == {"tags": ["a", 1, {"k": "v", "extra": True}]}


def test_none_array_element_is_completed_from_defaults() -> None:
    """A ``None`` element of a list of tables is filled like an empty table."""
    config: dict[str, Any] = {"e": [None, {"a": 2}]}
    defaults: dict[str, Any] = {"e_defaults": {"a": 1}}
    assert merge_trees(config, defaults) == {"e": [{"a": 1}, {"a": 2}]}


def test_none_array_element_without_table_defaults_is_kept() -> None:
    """Without a defaults sub-tree there is nothing to complete: ``None`` stays."""
    assert merge_trees({"tags": ["a", None]}, {}) == {"tags": ["a", None]}


def test_none_array_element_follows_element_shape() -> None:
    """With a shape, only arrays of tables complete ``None`` elements."""
    shape = obj(envs=array(obj(name=optional(string()))), ports=array(integer()))
    config: dict[str, Any] = {"envs": [None], "ports": [80, None]}
    defaults: dict[str, Any] = {"envs_defaults": {"name": "dev"}, "ports_defaults": {}}
    result = merge_trees(config, defaults, shape=shape)
    assert result == {"envs": [{"name": "dev"}], "ports": [80, None]}


def test_nested_lists_share_the_same_subtree() -> None:
    """Lists of lists are mapped element-wise against the same sub-tree."""
    config: dict[str, Any] = {"grid": [[{"x": 1}], [{}]]}
    defaults: dict[str, Any] = {"grid_defaults": {"x": 0, "y": 0}}
    assert merge_trees(config, defaults) == {
        "grid": [[{"x": 1, "y": 0}], [{"x": 0, "y": 0}]],
    }


def test_no_defaults_keys_in_result() -> None:
    """``_defaults`` keys, including a bare ``_defaults`` key, never reach the result."""
    config: dict[str, Any] = {"a": {"b": 1}, "stray_defaults": {"x": 1}, "_defaults": {}}
    defaults: dict[str, Any] = {"a_defaults": {"c": 2}, "_defaults": {"z": 0}}
    result = merge_trees(config, defaults)
    assert result == {"a": {"b": 1, "c": 2}}


def test_defaults_suffix_in_config_is_read_as_base_field() -> None:
    """A ``<field>_defaults`` key only names ``<field>``; it never supplies a value itself."""
    result = merge_trees({"x_defaults": {"y": 1}}, {})
    assert result == {}


def test_unset_field_is_omitted() -> None:
    """A field present in neither tree is omitted, not set to ``None``."""
    result = merge_trees({"a": None}, {"b": None})
    assert result == {}
    assert "a" not in result


def test_malformed_defaults_subtree_is_ignored() -> None:
    """A non-table ``_defaults`` entry is logged and treated as empty."""
    assert merge_trees({"a": {"x": 1}}, {"a_defaults": "oops"}) == {"a": {"x": 1}}


def test_defaults_for_absent_field_are_harmless() -> None:
    """A ``_defaults`` entry for a field no tree supplies is unused."""
    assert merge_trees({}, {"ghost_defaults": {"x": 1}}) == {}


def test_inputs_are_not_mutated() -> None:
    """Merging never mutates the config or the defaults tree."""
    config: dict[str, Any] = {"environments": [{"name": "A"}], "app": {}}
    defaults: dict[str, Any] = {
        "environments_defaults": {"scaling": {}, "scaling_defaults": {"min": 1}},
        "app_defaults": {"port": 80},
    }
    config_before = copy.deepcopy(config)
    defaults_before = copy.deepcopy(defaults)

    result = merge_trees(config, defaults)
    result["environments"][0]["scaling"]["min"] = 99

    assert config == config_before
    assert defaults == defaults_before


def test_result_does_not_alias_default_tables() -> None:
    """Tables taken from the defaults tree are copied into the result."""
    defaults: dict[str, Any] = {"app": {"port": 80}}
    first = merge_trees({}, defaults)
    first["app"]["port"] = 1
    assert defaults["app"]["port"] == 80


def test_tuples_are_merged_like_lists() -> None:
    """Tuples are treated as arrays and produce lists."""
    result = merge_trees({"items": ({"a": 1},)}, {"items_defaults": {"b": 2}})
    assert result == {"items": [{"a": 1, "b": 2}]}


# --- Shape-aware merging ---

ENV_SHAPE = obj(
    name=string(),
    description=no_default(optional(string())),
    minInstances=optional(integer()),
)

APP_SHAPE = obj(
    name=string(),
    dns=no_default(optional(obj(zone=string()))),
    account=nullable_default(optional(string())),
    environments=array(ENV_SHAPE, non_empty=True),
)


def test_no_default_field_ignores_defaults_tree() -> None:
    """With a shape, a ``NO_DEFAULT`` field absent from the config stays absent."""
    config: dict[str, Any] = {"name": "app", "environments": [{"name": "dev"}]}
    defaults: dict[str, Any] = {
        "dns": {"zone": "example.com"},
        "environments_defaults": {"description": "leaked", "minInstances": 1},
    }
    result = merge_trees(config, defaults, shape=APP_SHAPE)
    assert "dns" not in result
    assert result["environments"] == [{"name": "dev", "minInstances": 1}]


def test_no_default_field_keeps_config_value() -> None:
    """A ``NO_DEFAULT`` field supplied by the config is kept."""
    config: dict[str, Any] = {"name": "app", "dns": {"zone": "a.org"}, "environments": []}
    defaults: dict[str, Any] = {"dns": {"zone": "b.org"}, "dns_defaults": {"ttl": 60}}
    result = merge_trees(config, defaults, shape=APP_SHAPE)
    assert result["dns"] == {"zone": "a.org"}


def test_without_shape_no_default_marker_is_unknown() -> None:
    """The plain merge has no markers to consult and reads every default."""
    result = merge_trees({}, {"dns": {"zone": "example.com"}})
    assert result == {"dns": {"zone": "example.com"}}


def test_nullable_default_may_stay_unset() -> None:
    """A nullable default of ``None`` resolves to an absent field and validates."""
    config: dict[str, Any] = {"name": "app", "environments": [{"name": "dev"}]}
    defaults: dict[str, Any] = {"account": None, "environments_defaults": {"minInstances": 1}}
    result = generate_final_config(config, defaults, shape=APP_SHAPE)
    assert "account" not in result


def test_unset_required_field_legacy_mode_is_silent() -> None:
    """Without a shape, an unresolved field is simply omitted."""
    result = generate_final_config({"environments": [{}]}, {})
    assert result == {"environments": [{}]}


def test_unset_required_field_hardened_mode_raises_with_paths() -> None:
    """With a shape, every unresolved required field is reported by dotted path."""
    config: dict[str, Any] = {"environments": [{"name": "dev"}, {}]}
    defaults: dict[str, Any] = {"environments_defaults": {"minInstances": 1}}
    with pytest.raises(MissingRequiredFieldError) as excinfo:
        generate_final_config(config, defaults, shape=APP_SHAPE)

    assert excinfo.value.paths == ("name", "environments[1].name")
    assert "environments[1].name" in str(excinfo.value)
    assert excinfo.value.what == "final config"


def test_unset_optional_field_without_default_raises() -> None:
    """An unmarked optional field must be supplied by one of the trees."""
    config: dict[str, Any] = {"name": "app", "environments": [{"name": "dev"}]}
    with pytest.raises(MissingRequiredFieldError) as excinfo:
        generate_final_config(config, {}, shape=APP_SHAPE)
    assert excinfo.value.paths == ("environments[0].minInstances",)


def test_wrong_type_raises_shape_mismatch() -> None:
    """A value of the wrong type fails validation after the merge."""
    config: dict[str, Any] = {
        "name": "app",
        "environments": [{"name": "dev", "minInstances": "one"}],
    }
    with pytest.raises(ShapeMismatchError, match=r"environments\[0\]\.minInstances"):
        generate_final_config(config, {}, shape=APP_SHAPE)


def test_validation_can_be_skipped() -> None:
    """``validate=False`` returns the shape-aware merge without checking it."""
    result = generate_final_config({"environments": [{}]}, {}, shape=APP_SHAPE, validate=False)
    assert result == {"environments": [{}]}
