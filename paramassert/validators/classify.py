"""Type classification — maps runtime values onto the semantic categories schemas speak in."""

import datetime
import decimal
import numbers
from collections.abc import Mapping
from enum import Enum


class _Missing:
    """Marker for a value that is not there at all (e.g. an absent mapping key)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


class TypeCategory(str, Enum):
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    DATE = "date"
    FUNCTION = "function"
    OTHER = "other"


def type_of(value) -> TypeCategory:
    """Classify a value.

    Order matters: bool is an int subclass, and str/bytes are sequences.
    """
    if value is MISSING:
        return TypeCategory.UNDEFINED
    if value is None:
        return TypeCategory.NULL
    if isinstance(value, bool):
        return TypeCategory.BOOLEAN
    if isinstance(value, (numbers.Real, decimal.Decimal)):
        return TypeCategory.NUMBER
    if isinstance(value, str):
        return TypeCategory.STRING
    if isinstance(value, Mapping):
        return TypeCategory.OBJECT
    if isinstance(value, (list, tuple)):
        return TypeCategory.ARRAY
    if isinstance(value, (datetime.date, datetime.time)):
        return TypeCategory.DATE
    if callable(value):
        return TypeCategory.FUNCTION
    return TypeCategory.OTHER


def is_absent(value) -> bool:
    """True for None and MISSING; category alone can't short-circuit optionality."""
    return value is None or value is MISSING
