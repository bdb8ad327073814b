# deftree:header:start
#
#   project      : DefTree
#   file         : test_shapes.py
#   file_relpath : tests/schema/test_shapes.py
#   license      : MIT
#   copyright    : (c) 2026 DefTree contributors
#
# deftree:header:end

"""Tests for the shape model and its builders."""

from __future__ import annotations

import math

import pytest

from deftree.core.errors import SchemaError
from deftree.schema.markers import Marker
from deftree.schema.shapes import (
    ArrayShape,
    Field,
    ObjectShape,
    ScalarKind,
    ScalarShape,
    array,
    as_field,
    integer,
    innermost,
    number,
    obj,
    optional,
    required,
    string,
)
from tests.conftest import parametrize


def test_obj_wraps_bare_shapes_as_required_fields() -> None:
    shape = obj(name=string(), port=optional(integer()))
    assert shape.fields["name"] == Field(string())
    assert shape.fields["port"] == Field(integer(), optional=True)


def test_obj_accepts_mapping_for_non_identifier_names() -> None:
    shape = obj({"connection-arn": string()}, branch=required(string()))
    assert list(shape.fields) == ["connection-arn", "branch"]


def test_obj_fields_are_read_only() -> None:
    shape = obj(name=string())
    with pytest.raises(TypeError):
        shape.fields["other"] = Field(string())  # type: ignore[index]


def test_empty_obj_is_a_valid_shape() -> None:
    assert obj().fields == {}


@parametrize("name", ["", "repo_defaults", "_defaults"])
def test_obj_rejects_reserved_or_empty_names(name: str) -> None:
    with pytest.raises(SchemaError):
        obj({name: string()})


def test_array_rejects_a_field_as_element() -> None:
    with pytest.raises(SchemaError, match="markers go on the array field"):
        array(optional(string()))  # type: ignore[arg-type]


def test_as_field_rejects_non_shapes() -> None:
    with pytest.raises(SchemaError):
        as_field("string")  # type: ignore[arg-type]


def test_optional_with_marker() -> None:
    f = optional(string(), Marker.NO_DEFAULT)
    assert f.optional is True
    assert f.marker is Marker.NO_DEFAULT


def test_string_choices() -> None:
    assert string("HTTP", "HTTPS") == ScalarShape(ScalarKind.STRING, ("HTTP", "HTTPS"))
    assert string().choices is None


def test_innermost_unwraps_nested_arrays() -> None:
    element = obj(x=integer())
    assert innermost(ArrayShape(ArrayShape(element))) is element
    assert innermost(element) is element


def test_shapes_compare_structurally() -> None:
    assert obj(a=array(number())) == ObjectShape({"a": Field(ArrayShape(number()))})


@parametrize(
    ("kind", "value", "accepted"),
    [
        (ScalarKind.STRING, "x", True),
        (ScalarKind.STRING, 1, False),
        (ScalarKind.INTEGER, 3, True),
        (ScalarKind.INTEGER, 3.0, False),
        (ScalarKind.INTEGER, True, False),
        (ScalarKind.NUMBER, 3, True),
        (ScalarKind.NUMBER, 2.5, True),
        (ScalarKind.NUMBER, math.nan, False),
        (ScalarKind.NUMBER, False, False),
        (ScalarKind.BOOLEAN, False, True),
        (ScalarKind.BOOLEAN, 0, False),
        (ScalarKind.ANY, {"a": 1}, True),
    ],
)
def test_scalar_kind_accepts(kind: ScalarKind, value: object, accepted: bool) -> None:
    assert kind.accepts(value) is accepted
