# deftree:header:start
#
#   project      : DefTree
#   file         : test_validate.py
#   file_relpath : tests/schema/test_validate.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Tests for tree validation (`validate_tree`, `ensure_valid`)."""

from __future__ import annotations

from typing import Any

import pytest

from deftree.core.diagnostics import DiagnosticKind, DiagnosticLevel
from deftree.core.errors import MissingRequiredFieldError, ShapeMismatchError
from deftree.core.merge import generate_final_config
from deftree.schema.shapes import array, boolean, integer, number, obj, optional, string
from deftree.schema.validate import ensure_valid, index_path, join_path, validate_tree

SHAPE = obj(
    name=string(),
    protocol=optional(string("HTTP", "HTTPS")),
    environments=array(
        obj(name=string(), autoscaling=optional(obj(enabled=boolean(), max=integer()))),
        non_empty=True,
    ),
)


def _kinds(instance: Any) -> list[tuple[str, DiagnosticKind]]:
    return [(d.path, d.kind) for d in validate_tree(instance, SHAPE)]


def test_valid_tree_has_no_diagnostics() -> None:
    tree: dict[str, Any] = {
        "name": "app",
        "protocol": "HTTPS",
        "environments": [{"name": "dev", "autoscaling": {"enabled": True, "max": 2}}],
    }
    assert validate_tree(tree, SHAPE) == []


def test_missing_required_fields_report_dotted_paths() -> None:
    tree: dict[str, Any] = {"environments": [{"name": "dev"}, {"autoscaling": {"enabled": False}}]}
    assert _kinds(tree) == [
        ("name", DiagnosticKind.MISSING_FIELD),
        ("environments[1].name", DiagnosticKind.MISSING_FIELD),
        ("environments[1].autoscaling.max", DiagnosticKind.MISSING_FIELD),
    ]


def test_none_counts_as_absent() -> None:
    tree: dict[str, Any] = {"name": None, "protocol": None, "environments": [{"name": "x"}]}
    assert _kinds(tree) == [("name", DiagnosticKind.MISSING_FIELD)]


def test_type_mismatch_and_invalid_choice() -> None:
    tree: dict[str, Any] = {"name": 1, "protocol": "FTP", "environments": {"name": "x"}}
    assert _kinds(tree) == [
        ("name", DiagnosticKind.TYPE_MISMATCH),
        ("protocol", DiagnosticKind.INVALID_CHOICE),
        ("environments", DiagnosticKind.TYPE_MISMATCH),
    ]


def test_empty_non_empty_array() -> None:
    assert _kinds({"name": "app", "environments": []}) == [
        ("environments", DiagnosticKind.EMPTY_ARRAY),
    ]


def test_none_array_element_is_missing() -> None:
    assert _kinds({"name": "app", "environments": [None]}) == [
        ("environments[0]", DiagnosticKind.MISSING_FIELD),
    ]


def test_unknown_fields_are_warnings() -> None:
    diags = validate_tree({"name": "app", "environments": [{"name": "x"}], "extra": 1}, SHAPE)
    assert [(d.level, d.kind, d.path) for d in diags] == [
        (DiagnosticLevel.WARNING, DiagnosticKind.UNKNOWN_FIELD, "extra"),
    ]


def test_root_type_mismatch_uses_root_path() -> None:
    diags = validate_tree(["not", "a", "table"], SHAPE)
    assert [(d.path, d.kind) for d in diags] == [("<root>", DiagnosticKind.TYPE_MISMATCH)]


def test_path_helpers() -> None:
    assert join_path("", "a") == "a"
    assert join_path("a", "b") == "a.b"
    assert index_path("a.b", 2) == "a.b[2]"
    assert index_path("", 0) == "<root>[0]"


def test_ensure_valid_raises_missing_before_mismatch() -> None:
    tree: dict[str, Any] = {"name": 1, "environments": [{}]}
    with pytest.raises(MissingRequiredFieldError) as excinfo:
        ensure_valid(tree, SHAPE, what="config")
    assert excinfo.value.paths == ("environments[0].name",)
    # Every error is carried, not only the missing fields.
    assert len(excinfo.value.diagnostics) == 2
    assert str(excinfo.value).startswith("Invalid config:\n")


def test_ensure_valid_raises_shape_mismatch() -> None:
    with pytest.raises(ShapeMismatchError, match="protocol"):
        ensure_valid(
            {"name": "a", "protocol": "ftp", "environments": [{"name": "x"}]}, SHAPE, what="config"
        )


def test_ensure_valid_returns_warnings() -> None:
    diags = ensure_valid(
        {"name": "a", "environments": [{"name": "x", "zone": "eu"}]}, SHAPE, what="config"
    )
    assert [d.path for d in diags] == ["environments[0].zone"]


def test_number_accepts_integers_beyond_float_range() -> None:
    shape = obj(n=number(), count=integer())
    tree: dict[str, Any] = {"n": 10**400, "count": -(10**400)}
    assert validate_tree(tree, shape) == []
    assert generate_final_config({"n": 10**400}, {"count": 1}, shape=shape) == {
        "n": 10**400,
        "count": 1,
    }


def test_number_rejects_nan() -> None:
    diags = validate_tree({"n": float("nan")}, obj(n=number()))
    assert [(d.path, d.kind) for d in diags] == [("n", DiagnosticKind.TYPE_MISMATCH)]
