"""Base validator — abstract class implementing the Strategy Pattern.

Each compiled schema node is a standalone, independently testable validator.
Parents hold their children's validators and merge child results into a
Branch keyed by property name or array index.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from paramassert.validators.classify import is_absent
from paramassert.validators.models import OK, Branch, Err, ErrorCode, ErrorPayload, Leaf, PathKey, Result


class BaseValidator(ABC):
    """Abstract base for compiled validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns Ok or Err(payload); value failures are never raised
        - validators hold no per-call state and can be shared freely
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, value: Any) -> Result:
        """Check a value against the compiled schema node.

        Args:
            value: Any value; MISSING stands for an absent property

        Returns:
            OK, or Err whose payload mirrors the failing part of the value
        """
        ...

    def accepts_absent(self, value: Any = None) -> bool:
        """Whether this node alone would accept an absent value (None or MISSING)."""
        return self.validate(value).ok

    def to_shorthand(self) -> "BaseValidator":
        # A compiled validator nested in a schema stands for itself
        return self

    def __call__(self, value: Any) -> Result:
        return self.validate(value)

    # ── Helper Methods ──

    def _fail(self, code: ErrorCode) -> Err:
        """Leaf failure at this position."""
        return Err(payload=Leaf(code=code))

    def _merge(self, errors: Mapping[PathKey, ErrorPayload]) -> Result:
        """OK when no child erred, else a Branch of every child failure."""
        if not errors:
            return OK
        return Err(payload=Branch(children=dict(errors)))

    @staticmethod
    def _is_absent(value: Any) -> bool:
        return is_absent(value)
