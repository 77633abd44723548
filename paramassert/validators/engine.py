"""Assertion Engine — compiles a schema, runs it against a value, and reports.

This is the main entry point. It performs no checking itself: every decision
lives in the compiled validator tree. The engine orchestrates and reports.

Usage:
    engine = AssertionEngine()
    if not engine.check(params, {"id": "s:n,r", "tags": ["s,r"]}):
        ...
    report = engine.validate(params, schema)
    report.plain_errors()   # e.g. {"tags": {1: "emptyElementValue"}}
"""

from typing import Any, Mapping, Optional, Union

import structlog

from paramassert.config import Settings, get_settings
from paramassert.validators.base import BaseValidator
from paramassert.validators.compiler import SchemaCompiler
from paramassert.validators.models import AssertOptions, SchemaError, ValidationReport

logger = structlog.get_logger()

OptionsLike = Union[AssertOptions, Mapping[str, Any], None]


class AssertionEngine:
    """Runs assertions under a fixed Settings snapshot.

    Design principles:
        - Deterministic: same input → same output
        - No shared mutable state: per-call options never leak into later calls
        - Quiet boundary: failures become a report (and logs), never exceptions
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize with explicit settings, or the cached environment settings."""
        self.settings = settings or get_settings()

    def resolve_options(self, options: OptionsLike = None) -> AssertOptions:
        """Normalize per-call options (a model, a dict, or None)."""
        if options is None:
            return AssertOptions()
        if isinstance(options, AssertOptions):
            return options
        return AssertOptions.model_validate(dict(options))

    def compile(self, schema: Any, options: OptionsLike = None) -> BaseValidator:
        """Compile a schema for reuse across many checks.

        Raises:
            SchemaError: if the schema is malformed
        """
        opts = self.resolve_options(options)
        allow_useless = self.settings.ALLOW_USELESS_PROPERTY or opts.allow_more
        return SchemaCompiler(allow_useless_property=allow_useless).compile(schema)

    def validate(self, value: Any, schema: Any, options: OptionsLike = None) -> ValidationReport:
        """Check a value and return the full report.

        Args:
            value: The value to check
            schema: Shorthand schema, tagged schema, or an already compiled validator
            options: Per-call AssertOptions (or {"allowMore": True, "debug": False})

        Returns:
            ValidationReport with pass/fail, the error tree and flattened errors
        """
        opts = self.resolve_options(options)
        debug = self.settings.DEBUG if opts.debug is None else opts.debug

        if isinstance(schema, BaseValidator):
            validator = schema
        else:
            try:
                validator = self.compile(schema, opts)
            except SchemaError as e:
                if debug:
                    logger.error(
                        "invalid_schema",
                        code=e.code.value,
                        detail=e.detail,
                        path=list(e.path),
                        schema=schema,
                    )
                return ValidationReport.from_schema_error(e)

        report = ValidationReport.build(validator.validate(value))

        if not report.passed and debug:
            logger.error(
                "assert_failed",
                errors=report.plain_errors(),
                summary=report.summary,
            )
            logger.debug("assert_context", value=value, schema=schema)

        return report

    def check(self, value: Any, schema: Any, options: OptionsLike = None) -> bool:
        """Check a value; True iff it conforms to the schema."""
        return self.validate(value, schema, options).passed


# Module-level singleton
assertion_engine = AssertionEngine()


def assert_value(value: Any, schema: Any, options: OptionsLike = None) -> bool:
    """Assert that ``value`` matches ``schema`` using the default engine."""
    return assertion_engine.check(value, schema, options)


def validate(value: Any, schema: Any, options: OptionsLike = None) -> ValidationReport:
    """Validate ``value`` against ``schema`` using the default engine."""
    return assertion_engine.validate(value, schema, options)
