"""Schema Compiler — turns a schema (shorthand or tagged) into a validator tree.

Compilation is fail-fast: the first malformed node raises SchemaError and no
partial validator is returned.
"""

from typing import Any

import structlog

from paramassert.validators.array_validator import ArrayValidator
from paramassert.validators.base import BaseValidator
from paramassert.validators.models import SchemaError
from paramassert.validators.object_validator import ObjectValidator
from paramassert.validators.predicate_validator import PredicateValidator
from paramassert.validators.primitive_validator import PrimitiveValidator
from paramassert.validators.schema import (
    ArraySchema,
    ObjectSchema,
    PredicateSchema,
    PrimitiveSchema,
    Schema,
    parse_schema,
)

logger = structlog.get_logger()


class SchemaCompiler:
    """Compiles schemas under one fixed set of compile options.

    Args:
        allow_useless_property: If True, object validators accept keys the
            schema does not declare.
    """

    def __init__(self, allow_useless_property: bool = False):
        self.allow_useless_property = allow_useless_property

    def compile(self, schema: Any) -> BaseValidator:
        """Parse (if needed) and compile a schema.

        Raises:
            SchemaError: if the schema is malformed anywhere
        """
        validator = self._compile(parse_schema(schema))
        logger.debug("schema_compiled", validator=validator.name)
        return validator

    def _compile(self, schema: Schema) -> BaseValidator:
        if isinstance(schema, BaseValidator):
            # Precompiled; keeps the options it was compiled with
            return schema
        if isinstance(schema, PrimitiveSchema):
            return PrimitiveValidator(schema)
        if isinstance(schema, ObjectSchema):
            return ObjectValidator(
                {name: self._compile(sub) for name, sub in schema.properties.items()},
                allow_useless_property=self.allow_useless_property,
            )
        if isinstance(schema, ArraySchema):
            return ArrayValidator(self._compile(schema.element), force_level=schema.force_level)
        if isinstance(schema, PredicateSchema):
            return PredicateValidator(schema.func)
        raise SchemaError(f"unsupported schema node {type(schema).__name__}")


def compile_schema(schema: Any, allow_useless_property: bool = False) -> BaseValidator:
    """Compile a schema into a reusable validator."""
    return SchemaCompiler(allow_useless_property=allow_useless_property).compile(schema)
