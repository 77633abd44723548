"""Predicate Validator — delegates the whole check to a user-supplied function."""

from typing import Any, Callable

import structlog

from paramassert.validators.base import BaseValidator
from paramassert.validators.models import OK, ErrorCode, Result

logger = structlog.get_logger()


class PredicateValidator(BaseValidator):
    """Runs a predicate as-is.

    No null handling is injected: the predicate sees None and MISSING like
    any other value. Only a return value of exactly True passes. Exceptions
    raised by the predicate propagate to the caller.
    """

    def __init__(self, func: Callable[[Any], bool]):
        self.func = func

    @property
    def name(self) -> str:
        return f"PredicateValidator({getattr(self.func, '__name__', repr(self.func))})"

    def validate(self, value: Any) -> Result:
        if self.func(value) is True:
            return OK
        return self._fail(ErrorCode.FUNCTION_NOT_PASS)

    def accepts_absent(self, value: Any = None) -> bool:
        # A predicate that cannot even look at an absent value does not accept it
        try:
            return self.func(value) is True
        except (TypeError, ValueError, AttributeError) as e:
            logger.debug("predicate_probe_failed", predicate=self.name, error=str(e))
            return False
