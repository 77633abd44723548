"""Primitive Validator — checks a value against a union of boolean/number/string."""

from typing import Any

from paramassert.validators.base import BaseValidator
from paramassert.validators.classify import type_of
from paramassert.validators.models import OK, ErrorCode, Result
from paramassert.validators.schema import PrimitiveSchema


class PrimitiveValidator(BaseValidator):
    """Validates a single field against a primitive-union schema."""

    def __init__(self, schema: PrimitiveSchema):
        self.schema = schema
        self.categories = schema.categories
        self.optional = schema.optional

    @property
    def name(self) -> str:
        return f"PrimitiveValidator({self.schema.to_shorthand()})"

    def validate(self, value: Any) -> Result:
        if self._is_absent(value):
            return OK if self.optional else self._fail(ErrorCode.EMPTY_VALUE)
        if type_of(value) not in self.categories:
            return self._fail(ErrorCode.WRONG_TYPE)
        return OK
