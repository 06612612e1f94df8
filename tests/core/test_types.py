"""Tests for type resolution and runtime categories in schemy.core.types."""

import collections.abc
import datetime

import pytest

from schemy.core.enums import TypeKind
from schemy.core.types import (
    TypeSpec,
    category_of,
    is_valid_date,
    matches_kind,
    resolve_type_tag,
    tag_name,
)


@pytest.mark.parametrize(
    "tag, kind",
    [
        (str, TypeKind.STRING),
        (int, TypeKind.NUMBER),
        (float, TypeKind.NUMBER),
        (bool, TypeKind.BOOLEAN),
        (dict, TypeKind.OBJECT),
        (callable, TypeKind.FUNCTION),
        (collections.abc.Callable, TypeKind.FUNCTION),
        (datetime.date, TypeKind.DATE),
        (datetime.datetime, TypeKind.DATE),
        (list, TypeKind.ARRAY),
        ("uuid/v1", TypeKind.UUID_V1),
        ("uuid/v4", TypeKind.UUID_V4),
    ],
)
def test_resolve_type_tag_supported(tag, kind):
    assert resolve_type_tag(tag) == kind


@pytest.mark.parametrize("tag", [set, bytes, object, "not_supported", None, 5, lambda: None])
def test_resolve_type_tag_unsupported(tag):
    assert resolve_type_tag(tag) is None


def test_resolve_type_tag_unhashable_token():
    assert resolve_type_tag({"a": 1}) is None


def test_tag_name():
    assert tag_name(set) == "set"
    assert tag_name("not_supported") == "not_supported"
    assert tag_name(5) == "int"


@pytest.mark.parametrize(
    "value, category",
    [
        (None, "null"),
        (True, "boolean"),
        (1, "number"),
        (1.5, "number"),
        ("a", "string"),
        ([1], "array"),
        ((1,), "array"),
        ({"a": 1}, "object"),
        (len, "function"),
        ({1, 2}, "set"),
    ],
)
def test_category_of(value, category):
    assert category_of(value) == category


@pytest.mark.parametrize(
    "value",
    [
        "2023-04-01",
        "2023-04-01T10:20:30",
        "2023-04-01T10:20:30Z",
        "2023-04-01T10:20:30.123+02:00",
        "Tue, 15 Nov 1994 08:12:31 GMT",
        0,
        1680307200000,
        -1.5,
    ],
)
def test_is_valid_date_accepts(value):
    assert is_valid_date(value) is True


@pytest.mark.parametrize(
    "value",
    ["", "   ", "not a date", "2023-13-45", True, None, [2023], float("nan"), 9e15, 10**400],
)
def test_is_valid_date_rejects(value):
    assert is_valid_date(value) is False


def test_matches_kind_number_excludes_bool():
    spec = TypeSpec(TypeKind.NUMBER)
    assert matches_kind(spec, 3) is True
    assert matches_kind(spec, 3.2) is True
    assert matches_kind(spec, True) is False
    assert matches_kind(spec, "3") is False


def test_matches_kind_uuid():
    v4 = "9b2e2a4c-8f1d-4c3b-a2f4-6d3c1e5b7a90"
    v1 = "6fa459ea-ee8a-11ca-ac93-00c04fd430c8"
    assert matches_kind(TypeSpec(TypeKind.UUID_V4), v4) is True
    assert matches_kind(TypeSpec(TypeKind.UUID_V4), v4.upper()) is True
    assert matches_kind(TypeSpec(TypeKind.UUID_V4), v1) is False
    assert matches_kind(TypeSpec(TypeKind.UUID_V1), v1) is True
    assert matches_kind(TypeSpec(TypeKind.UUID_V1), v1 + "0") is False
    assert matches_kind(TypeSpec(TypeKind.UUID_V1), 42) is False


def test_type_spec_constraints():
    with pytest.raises(ValueError, match="Nested type requires a compiled schema"):
        TypeSpec(TypeKind.NESTED)
    with pytest.raises(ValueError, match="Only array types may declare an item type"):
        TypeSpec(TypeKind.STRING, item=TypeSpec(TypeKind.STRING))
