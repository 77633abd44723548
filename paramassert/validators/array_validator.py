"""Array Validator — checks array presence, emptiness and every element."""

from typing import Any

from paramassert.validators.base import BaseValidator
from paramassert.validators.classify import TypeCategory, type_of
from paramassert.validators.models import OK, ErrorCode, ErrorPayload, Leaf, PathKey, Result


class ArrayValidator(BaseValidator):
    """Validates a list/tuple whose elements all share one schema.

    Whether the field may be absent or empty is derived from the force level
    and from ``element_nullable``, which is probed once at construction time:

        absent   -> ok only if force_level == 0 and element_nullable
        []       -> ok if element_nullable or force_level == 2
        [x, ...] -> every element must pass and must not be None/MISSING
    """

    def __init__(self, element: BaseValidator, force_level: int = 0):
        self.element = element
        self.force_level = force_level
        self.element_nullable = element.accepts_absent()

    @property
    def name(self) -> str:
        return f"ArrayValidator({self.element.name})"

    def validate(self, value: Any) -> Result:
        if self._is_absent(value):
            if self.force_level > 0 or not self.element_nullable:
                return self._fail(ErrorCode.ARRAY_MUST_BE_ARRAY)
            return OK

        if type_of(value) is not TypeCategory.ARRAY:
            return self._fail(ErrorCode.ARRAY_MUST_BE_ARRAY)

        if len(value) == 0:
            if self.element_nullable or self.force_level == 2:
                return OK
            return self._fail(ErrorCode.EMPTY_ARRAY)

        errors: dict[PathKey, ErrorPayload] = {}
        for index, item in enumerate(value):
            result = self.element.validate(item)
            if not result.ok:
                errors[index] = result.payload
            elif self._is_absent(item):
                # Element nullability governs array-level absence, not holes
                errors[index] = Leaf(code=ErrorCode.EMPTY_ELEMENT_VALUE)

        return self._merge(errors)
