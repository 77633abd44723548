"""Tests for error payloads, reports and the error-code table."""

from __future__ import annotations

import pytest

from paramassert.validators.compiler import compile_schema
from paramassert.validators.models import (
    ERROR_MESSAGES,
    OK,
    Branch,
    Err,
    ErrorCode,
    Leaf,
    SchemaError,
    ValidationReport,
    error_message,
    format_path,
)


class TestErrorCodes:
    def test_every_code_has_a_message(self):
        assert set(ERROR_MESSAGES) == set(ErrorCode)

    def test_message_lookup_by_code_or_string(self):
        assert error_message(ErrorCode.EMPTY_ARRAY) == "array cannot be empty"
        assert error_message("uselessProperty") == "property is redundant"

    def test_codes_compare_equal_to_their_names(self):
        assert ErrorCode.EMPTY_VALUE == "emptyValue"


class TestPayload:
    def test_format_path(self):
        assert format_path(()) is None
        assert format_path(("info",)) == "info"
        assert format_path(("info", "phones", 1)) == "info.phones[1]"
        assert format_path((0, "id")) == "[0].id"
        assert format_path(("m", 0, 2)) == "m[0][2]"

    def test_branch_keys_keep_their_types(self):
        branch = Branch(children={0: Leaf(code=ErrorCode.EMPTY_VALUE), "a": Leaf(code=ErrorCode.WRONG_TYPE)})
        assert branch.to_plain() == {0: "emptyValue", "a": "wrongType"}

    def test_iter_errors_walks_leaves_in_order(self):
        payload = Branch(
            children={
                "a": Branch(children={1: Leaf(code=ErrorCode.EMPTY_ELEMENT_VALUE)}),
                "b": Leaf(code=ErrorCode.USELESS_PROPERTY),
            }
        )
        assert list(payload.iter_errors()) == [
            (("a", 1), ErrorCode.EMPTY_ELEMENT_VALUE),
            (("b",), ErrorCode.USELESS_PROPERTY),
        ]

    def test_results(self):
        assert OK.ok is True
        assert Err(payload=Leaf(code=ErrorCode.WRONG_TYPE)).ok is False


class TestReport:
    def test_passing_report(self):
        report = ValidationReport.build(OK)
        assert report.passed is True
        assert report.errors == []
        assert report.plain_errors() is None
        assert report.verdict.startswith("PASS")

    def test_failing_report_flattens_the_tree(self):
        result = compile_schema({"info": {"phones": ["s"]}, "id": "n"}).validate(
            {"info": {"phones": ["1", 2]}, "extra": True}
        )
        report = ValidationReport.build(result)
        assert report.passed is False
        assert [(e.field, e.code) for e in report.errors] == [
            ("info.phones[1]", "wrongType"),
            ("id", "emptyValue"),
            ("extra", "uselessProperty"),
        ]
        assert report.errors[0].message == "type of value is wrong"
        assert report.summary == {"wrongType": 1, "emptyValue": 1, "uselessProperty": 1}
        assert report.verdict.startswith("FAIL")

    def test_root_leaf_has_no_field(self):
        report = ValidationReport.build(compile_schema("n").validate("x"))
        assert report.errors[0].field is None
        assert report.errors[0].path == []

    def test_report_serializes(self):
        report = ValidationReport.build(compile_schema(["n"]).validate([None]))
        dumped = report.model_dump(mode="json")
        assert dumped["passed"] is False
        assert dumped["errors"][0]["field"] == "[0]"

    def test_schema_error_report(self):
        report = ValidationReport.from_schema_error(SchemaError("bad flag", ("a",)))
        assert report.schema_error == "bad flag"
        assert report.errors[0].field == "a"
        assert "schema is invalid" in report.errors[0].message


UNREACHABLE_CODES = {ErrorCode.MISSING_PROPERTY, ErrorCode.WRONG_TYPE_ELEMENT}

FAILING_CASES = [
    ("n", None),
    ("n", "x"),
    ({"a": "s"}, {}),
    ({"a": "s"}, {"a": "x", "b": 1}),
    ({"a": "s"}, "str"),
    (["n"], None),
    (["n"], []),
    (["n"], "x"),
    (["n"], [1, None]),
    (["n"], ["x"]),
    (["n,r"], [None]),
    (["n", "F"], None),
    ([["n"]], [[], [1, "x"]]),
    ([{"id": "s"}], [{}, {"id": 1, "z": 0}]),
    (lambda v: False, 1),
    ({"xs": [lambda v: v == 1]}, {"xs": [1, 2]}),
]


class TestUnreachableCodes:
    """missingProperty and wrongTypeElement exist in the table but no rule emits them.

    If a rule change starts producing either, this test should be revisited.
    """

    @pytest.mark.parametrize("schema, value", FAILING_CASES)
    def test_no_rule_produces_unreachable_codes(self, schema, value):
        result = compile_schema(schema).validate(value)
        assert not result.ok
        codes = {code for _, code in result.payload.iter_errors()}
        assert not codes & UNREACHABLE_CODES
