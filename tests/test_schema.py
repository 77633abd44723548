"""Tests for the schema model: shorthand parsing and builders."""

from __future__ import annotations

import pytest

from paramassert.validators.models import ErrorCode, SchemaError
from paramassert.validators.schema import (
    ArraySchema,
    ForceFlag,
    ObjectSchema,
    PredicateSchema,
    Primitive,
    PrimitiveSchema,
    array_of,
    obj,
    parse_schema,
    predicate,
    primitive,
)


def is_positive(v):
    return v > 0


class TestParsePrimitive:
    def test_single_required_type(self):
        schema = parse_schema("n")
        assert schema == PrimitiveSchema(types=(Primitive.NUMBER,), optional=False)

    def test_union_with_optional_flag(self):
        schema = parse_schema("s:n,r")
        assert schema.types == (Primitive.STRING, Primitive.NUMBER)
        assert schema.optional is True
        assert schema.to_shorthand() == "s:n,r"

    @pytest.mark.parametrize(
        "raw",
        ["", "x", "n:", ":n", "n:n", "b:n:b", "n,", "n,q", "n,R", "n,r,r", "N", "n s"],
    )
    def test_malformed_strings_are_rejected(self, raw):
        with pytest.raises(SchemaError) as exc_info:
            parse_schema(raw)
        assert exc_info.value.code is ErrorCode.INVALID_SCHEMA


class TestParseObject:
    def test_nested_object(self):
        schema = parse_schema({"id": "s:n,r", "info": {"name": "s", "phones": ["s,r"]}})
        assert isinstance(schema, ObjectSchema)
        info = schema.properties["info"]
        assert isinstance(info, ObjectSchema)
        assert isinstance(info.properties["phones"], ArraySchema)

    def test_empty_object_schema_is_valid(self):
        assert parse_schema({}) == ObjectSchema(properties={})

    def test_bad_child_fails_whole_schema_with_path(self):
        with pytest.raises(SchemaError) as exc_info:
            parse_schema({"info": {"address": {"city": "s,x"}}})
        assert exc_info.value.path == ("info", "address", "city")
        assert "info.address.city" in str(exc_info.value)

    def test_non_string_keys_are_rejected(self):
        with pytest.raises(SchemaError):
            parse_schema({1: "n"})


class TestParseArray:
    def test_element_only(self):
        schema = parse_schema(["n"])
        assert schema.force is None
        assert schema.force_level == 0

    @pytest.mark.parametrize("flag, level", [("f", 1), ("F", 2)])
    def test_force_flags(self, flag, level):
        schema = parse_schema(["n", flag])
        assert schema.force is ForceFlag(flag)
        assert schema.force_level == level

    def test_tuple_shorthand(self):
        assert parse_schema(("n", "F")) == parse_schema(["n", "F"])

    def test_nested_arrays(self):
        schema = parse_schema([["n"]])
        assert isinstance(schema.element, ArraySchema)

    @pytest.mark.parametrize("raw", [[], ["n", "f", "F"], ["n", "x"], ["n", None], ["n", 1], ["q"]])
    def test_malformed_arrays_are_rejected(self, raw):
        with pytest.raises(SchemaError):
            parse_schema(raw)

    def test_element_error_points_at_index_zero(self):
        with pytest.raises(SchemaError) as exc_info:
            parse_schema({"ids": ["n:n"]})
        assert exc_info.value.path == ("ids", 0)


class TestParseOther:
    def test_callable_becomes_predicate(self):
        schema = parse_schema(is_positive)
        assert schema == PredicateSchema(func=is_positive)
        assert schema.to_shorthand() is is_positive

    @pytest.mark.parametrize("raw", [None, True, False, 0, 1.5, {1, 2}, b"n"])
    def test_unsupported_shapes_are_rejected(self, raw):
        with pytest.raises(SchemaError):
            parse_schema(raw)

    def test_tagged_schema_passes_through(self):
        schema = primitive("b")
        assert parse_schema(schema) is schema

    def test_schema_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_schema(42)


class TestBuilders:
    def test_primitive_builder(self):
        assert primitive("n", "s", optional=True) == parse_schema("n:s,r")

    def test_primitive_builder_rejects_duplicates_and_unknowns(self):
        with pytest.raises(SchemaError):
            primitive("n", "n")
        with pytest.raises(SchemaError):
            primitive("x")
        with pytest.raises(SchemaError):
            primitive()

    def test_obj_builder_accepts_mapping_and_kwargs(self):
        schema = obj({"id": "n"}, name=primitive("s"), tags=["s,r"])
        assert schema == parse_schema({"id": "n", "name": "s", "tags": ["s,r"]})

    def test_array_builder(self):
        assert array_of("n", force="F") == parse_schema(["n", "F"])
        assert array_of(obj(id="s")) == parse_schema([{"id": "s"}])
        with pytest.raises(SchemaError):
            array_of("n", force="x")

    def test_predicate_builder_requires_callable(self):
        assert predicate(is_positive).func is is_positive
        with pytest.raises(SchemaError):
            predicate("not callable")

    def test_shorthand_round_trip_of_nested_schema(self):
        raw = {"id": "s:n,r", "info": {"name": "s", "phones": ["s,r", "f"]}}
        assert parse_schema(raw).to_shorthand() == raw


class TestPrimitiveSchemaConstruction:
    def test_string_tokens_are_coerced(self):
        schema = PrimitiveSchema(types=("n", "s"))
        assert schema.types == (Primitive.NUMBER, Primitive.STRING)
        assert schema == primitive("n", "s")

    def test_coerced_schema_compiles_and_checks(self):
        from paramassert.validators.compiler import compile_schema

        validator = compile_schema(PrimitiveSchema(types=("n",)))
        assert validator.validate(1).ok
        assert validator.validate("x").payload.code is ErrorCode.WRONG_TYPE

    def test_unknown_and_duplicate_tokens_are_rejected(self):
        with pytest.raises(SchemaError):
            PrimitiveSchema(types=("x",))
        with pytest.raises(SchemaError):
            PrimitiveSchema(types=("n", Primitive.NUMBER))
