"""Object Validator — checks declared properties and flags undeclared ones."""

from typing import Any, Mapping

from paramassert.validators.base import BaseValidator
from paramassert.validators.classify import MISSING, TypeCategory, type_of
from paramassert.validators.models import ErrorCode, ErrorPayload, Leaf, PathKey, Result


class ObjectValidator(BaseValidator):
    """Validates a mapping property-by-property.

    An absent value is checked as if it were {}, so an object whose fields are
    all optional is itself optional. Every property is checked even after a
    failure, so the error Branch is complete.
    """

    def __init__(self, properties: Mapping[str, BaseValidator], allow_useless_property: bool = False):
        self.properties = dict(properties)
        self.allow_useless_property = allow_useless_property

    @property
    def name(self) -> str:
        return f"ObjectValidator({', '.join(self.properties)})"

    def validate(self, value: Any) -> Result:
        if self._is_absent(value):
            target: Mapping = {}
        elif type_of(value) is not TypeCategory.OBJECT:
            return self._fail(ErrorCode.WRONG_TYPE)
        else:
            target = value

        errors: dict[PathKey, ErrorPayload] = {}
        for prop_name, validator in self.properties.items():
            result = validator.validate(target.get(prop_name, MISSING))
            if not result.ok:
                errors[prop_name] = result.payload

        # Now all declared properties are checked; flag the undeclared ones
        if not self.allow_useless_property:
            for prop_name in target:
                if prop_name not in self.properties:
                    errors[prop_name] = Leaf(code=ErrorCode.USELESS_PROPERTY)

        return self._merge(errors)

    def accepts_absent(self, value: Any = None) -> bool:
        # Absent is checked as {}, so every property sees MISSING
        return all(validator.accepts_absent(MISSING) for validator in self.properties.values())
