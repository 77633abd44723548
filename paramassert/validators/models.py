"""Validation models — error codes, error payload trees, results, and the report structure.

Value failures are data: a validator returns Ok or Err(payload), where the
payload mirrors the shape of the value that failed. Schema failures are
exceptions (SchemaError) raised while compiling.
"""

from enum import Enum
from typing import Annotated, Iterator, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorCode(str, Enum):
    """Closed set of error codes produced while compiling or checking."""

    INVALID_SCHEMA = "invalidSchema"
    WRONG_TYPE = "wrongType"
    EMPTY_VALUE = "emptyValue"
    MISSING_PROPERTY = "missingProperty"      # Not produced by the current rules
    USELESS_PROPERTY = "uselessProperty"
    EMPTY_ARRAY = "emptyArray"
    WRONG_TYPE_ELEMENT = "wrongTypeElement"   # Not produced by the current rules
    EMPTY_ELEMENT_VALUE = "emptyElementValue"
    FUNCTION_NOT_PASS = "functionNotPass"
    ARRAY_MUST_BE_ARRAY = "arrayMustBeArray"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_SCHEMA: "schema is invalid",
    ErrorCode.WRONG_TYPE: "type of value is wrong",
    ErrorCode.EMPTY_VALUE: "value cannot be null or undefined",
    ErrorCode.MISSING_PROPERTY: "property is missing",
    ErrorCode.USELESS_PROPERTY: "property is redundant",
    ErrorCode.EMPTY_ARRAY: "array cannot be empty",
    ErrorCode.WRONG_TYPE_ELEMENT: "type of element is wrong",
    ErrorCode.EMPTY_ELEMENT_VALUE: "value of element cannot be null or undefined",
    ErrorCode.FUNCTION_NOT_PASS: "has not passed the checking function",
    ErrorCode.ARRAY_MUST_BE_ARRAY: "array should be an empty array at least",
}


def error_message(code: Union[ErrorCode, str]) -> str:
    """Human-readable message for an error code."""
    return ERROR_MESSAGES[ErrorCode(code)]


PathKey = Union[int, str]


def format_path(path: Sequence[PathKey]) -> Optional[str]:
    """Render a payload path as a field string, e.g. ``info.phones[1]``."""
    if not path:
        return None
    parts: list[str] = []
    for key in path:
        if isinstance(key, int):
            parts.append(f"[{key}]")
        elif parts:
            parts.append(f".{key}")
        else:
            parts.append(key)
    return "".join(parts)


# ── Error payload tree ──


class Leaf(BaseModel):
    """A single failure at this position in the value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["leaf"] = "leaf"
    code: ErrorCode

    def to_plain(self) -> str:
        return self.code.value

    def iter_errors(self, path: tuple[PathKey, ...] = ()) -> Iterator[tuple[tuple[PathKey, ...], ErrorCode]]:
        yield path, self.code


class Branch(BaseModel):
    """Failures below this position, keyed by property name or array index."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["branch"] = "branch"
    children: dict[PathKey, "ErrorPayload"]

    def to_plain(self) -> dict:
        return {key: child.to_plain() for key, child in self.children.items()}

    def iter_errors(self, path: tuple[PathKey, ...] = ()) -> Iterator[tuple[tuple[PathKey, ...], ErrorCode]]:
        for key, child in self.children.items():
            yield from child.iter_errors(path + (key,))


ErrorPayload = Annotated[Union[Leaf, Branch], Field(discriminator="kind")]

Branch.model_rebuild()


# ── Validator results ──


class Ok(BaseModel):
    """The value conforms."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True


class Err(BaseModel):
    """The value does not conform; payload says where and why."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    payload: ErrorPayload


Result = Union[Ok, Err]

OK = Ok()


# ── Schema errors ──


class SchemaError(ValueError):
    """Raised when a schema is malformed.

    Always carries the single code ``invalidSchema``; ``detail`` and ``path``
    only locate the offending node for diagnostics.
    """

    code = ErrorCode.INVALID_SCHEMA

    def __init__(self, detail: str, path: Sequence[PathKey] = ()):
        self.detail = detail
        self.path = tuple(path)
        location = format_path(self.path)
        prefix = f"{location}: " if location else ""
        super().__init__(f"{ERROR_MESSAGES[self.code]} ({prefix}{detail})")


# ── Per-call options ──


class AssertOptions(BaseModel):
    """Options scoped to a single assertion call; they never outlive it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    allow_more: bool = Field(default=False, alias="allowMore", description="Accept undeclared object keys")
    debug: Optional[bool] = Field(default=None, description="Override Settings.DEBUG for this call")


# ── Report ──


class ValidationError(BaseModel):
    """A single flattened finding."""

    model_config = ConfigDict(use_enum_values=True)

    code: ErrorCode
    message: str
    path: list[PathKey] = Field(default_factory=list)
    field: Optional[str] = None  # Dotted/indexed path; None for the value itself


class ValidationReport(BaseModel):
    """Complete assertion report — the output of the assertion engine."""

    passed: bool
    payload: Optional[ErrorPayload] = None
    errors: list[ValidationError] = Field(default_factory=list)
    summary: dict[str, int] = Field(default_factory=dict, description="Count of errors by code")
    schema_error: Optional[str] = None
    verdict: str = ""

    @classmethod
    def build(cls, result: Result) -> "ValidationReport":
        """Build a report from a validator result."""
        if isinstance(result, Ok):
            return cls(passed=True, verdict="PASS — value matches schema.")

        errors = [
            ValidationError(
                code=code,
                message=ERROR_MESSAGES[code],
                path=list(path),
                field=format_path(path),
            )
            for path, code in result.payload.iter_errors()
        ]
        summary: dict[str, int] = {}
        for err in errors:
            summary[err.code] = summary.get(err.code, 0) + 1

        return cls(
            passed=False,
            payload=result.payload,
            errors=errors,
            summary=summary,
            verdict=f"FAIL — {len(errors)} error(s) found in value.",
        )

    @classmethod
    def from_schema_error(cls, exc: SchemaError) -> "ValidationReport":
        """Build a failed report for a schema that did not compile."""
        return cls(
            passed=False,
            errors=[
                ValidationError(
                    code=exc.code,
                    message=str(exc),
                    path=list(exc.path),
                    field=format_path(exc.path),
                )
            ],
            summary={exc.code.value: 1},
            schema_error=exc.detail,
            verdict=f"FAIL — schema is invalid: {exc}",
        )

    def plain_errors(self):
        """The payload as plain data (code strings and dicts), or None if passed."""
        return self.payload.to_plain() if self.payload is not None else None
