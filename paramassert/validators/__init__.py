"""Schema validators — compile a schema once, check many values.

Usage:
    from paramassert.validators import assertion_engine

    report = assertion_engine.validate(params, {"id": "s:n,r", "info": {"name": "s"}})
    if not report.passed:
        # report.errors is a flat, path-addressed list; report.payload is the tree
"""

from paramassert.validators.base import BaseValidator
from paramassert.validators.classify import MISSING, TypeCategory, is_absent, type_of
from paramassert.validators.compiler import SchemaCompiler, compile_schema
from paramassert.validators.engine import AssertionEngine, assert_value, assertion_engine, validate
from paramassert.validators.models import (
    ERROR_MESSAGES,
    AssertOptions,
    Branch,
    Err,
    ErrorCode,
    Leaf,
    Ok,
    SchemaError,
    ValidationError,
    ValidationReport,
    error_message,
)
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

__all__ = [
    "AssertionEngine",
    "assertion_engine",
    "assert_value",
    "validate",
    "SchemaCompiler",
    "compile_schema",
    "BaseValidator",
    "MISSING",
    "TypeCategory",
    "type_of",
    "is_absent",
    "ERROR_MESSAGES",
    "error_message",
    "ErrorCode",
    "AssertOptions",
    "Ok",
    "Err",
    "Leaf",
    "Branch",
    "SchemaError",
    "ValidationError",
    "ValidationReport",
    "Primitive",
    "ForceFlag",
    "PrimitiveSchema",
    "ObjectSchema",
    "ArraySchema",
    "PredicateSchema",
    "parse_schema",
    "primitive",
    "obj",
    "array_of",
    "predicate",
]
