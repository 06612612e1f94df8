"""Tests for the Schemy facade and the validate-and-return helpers."""

import asyncio

import pytest

import schemy
from schemy import Schemy, ValidationFailed, validate, validate_async
from schemy.exceptions import SchemaError, SchemyUsageError
from schemy.validation import compile_schema
from schemy.validation.models import ValidationError


class TestSchemy:
    def test_validate_and_read_errors(self, hooks):
        schema = Schemy({"age": {"type": int, "min": 0, "max": 120}}, hooks=hooks)
        assert schema.validate({"age": 150}) is False
        assert schema.get_validation_errors() == ["Property age must be less than 120"]
        assert schema.get_grouped_validation_errors() == [
            ValidationError("age", "Property age must be less than 120")
        ]

    def test_each_validation_replaces_the_last_result(self, hooks):
        schema = Schemy({"age": int}, hooks=hooks)
        schema.validate({"age": "x"})
        assert schema.validate({"age": 3}) is True
        assert schema.get_validation_errors() == []
        assert schema.last_result.data == {"age": 3}

    @pytest.mark.parametrize(
        "method", ["get_validation_errors", "get_grouped_validation_errors", "get_body"]
    )
    def test_reading_before_validate_is_an_error(self, hooks, method):
        schema = Schemy({"a": str}, hooks=hooks)
        with pytest.raises(SchemyUsageError, match=rf"call \.validate\(\) before \.{method}\(\)"):
            getattr(schema, method)()

    def test_get_body_after_invalid_data_shape(self, hooks):
        schema = Schemy({"a": str}, hooks=hooks)
        assert schema.validate(["a"]) is False
        with pytest.raises(SchemyUsageError, match="not an object"):
            schema.get_body()

    def test_strict_and_flex_bodies(self, hooks):
        declaration = {"a": {"type": str}}
        data = {"a": "x", "b": "y"}

        strict = Schemy.strict(declaration, hooks=hooks)
        assert strict.validate(dict(data)) is False
        assert strict.get_validation_errors() == ["Property b not valid in schema"]

        flex = Schemy.schema(declaration, hooks=hooks)
        assert flex.flex is True
        assert flex.validate(dict(data)) is True
        assert flex.get_body(False, True) == {"a": "x"}
        assert flex.get_body(include_all=True) == {"a": "x", "b": "y"}

    def test_get_body_orders_declared_keys_first(self, hooks):
        schema = Schemy({"a": str, "b": str}, hooks=hooks)
        schema.validate({"b": "2", "a": "1"})
        assert list(schema.get_body()) == ["a", "b"]
        assert list(schema.get_body(order_body=False)) == ["b", "a"]

    def test_get_body_includes_defaults(self, hooks):
        schema = Schemy({"role": {"type": str, "default": "viewer"}}, hooks=hooks)
        schema.validate({})
        assert schema.get_body() == {"role": "viewer"}

    def test_evaluate_stores_nothing(self, hooks):
        schema = Schemy({"a": str}, hooks=hooks)
        result = schema.evaluate({"a": 1})
        assert result.valid is False
        assert schema.last_result is None

    def test_schemy_instances_nest(self, hooks):
        address = Schemy({"street": {"type": str, "required": True}}, hooks=hooks)
        person = Schemy({"name": str, "address": {"type": address}}, hooks=hooks)
        person.validate({"name": "Ada", "address": {}})
        assert person.get_validation_errors() == ["Missing required property address.street"]

    def test_compiled_schema_is_reused(self, hooks):
        compiled = compile_schema({"a": str}, hooks=hooks)
        assert Schemy(compiled, hooks=hooks).compiled_schema is compiled

    def test_malformed_declaration(self, hooks):
        with pytest.raises(SchemaError, match="Unsupported type on a: set"):
            Schemy({"a": set}, hooks=hooks)

    def test_get_version(self):
        assert Schemy.get_version() == schemy.__version__ == "1.6.2"


class TestValidateHelpers:
    def test_returns_projected_body(self, hooks):
        body = validate({"a": "x"}, {"a": str}, hooks=hooks)
        assert body == {"a": "x"}

    def test_raw_declarations_are_strict(self, hooks):
        with pytest.raises(ValidationFailed) as excinfo:
            validate({"a": "x", "b": 1}, {"a": str}, hooks=hooks)
        assert excinfo.value.errors == ["Property b not valid in schema"]
        assert str(excinfo.value) == "Property b not valid in schema"

    def test_flex_schema_instance(self, hooks):
        schema = Schemy.schema({"a": str}, hooks=hooks)
        assert validate({"b": 1, "a": "x"}, schema) == {"a": "x"}
        assert validate({"b": 1, "a": "x"}, schema, include_all=True) == {"b": 1, "a": "x"}

    def test_unordered_by_default(self, hooks):
        schema = Schemy.schema({"a": str, "b": str}, hooks=hooks)
        assert list(validate({"b": "2", "a": "1"}, schema)) == ["b", "a"]
        assert list(validate({"b": "2", "a": "1"}, schema, order_body=True)) == ["a", "b"]

    def test_error_message_joins_all_errors(self, hooks):
        with pytest.raises(ValidationFailed, match="Missing required property a; Property b"):
            validate({"b": 1}, {"a": str, "b": str}, hooks=hooks)

    def test_async_success(self, hooks):
        body = asyncio.run(validate_async({"a": "x"}, {"a": str}, hooks=hooks))
        assert body == {"a": "x"}

    def test_async_failure(self, hooks):
        with pytest.raises(ValidationFailed):
            asyncio.run(validate_async({"a": 1}, {"a": str}, hooks=hooks))
