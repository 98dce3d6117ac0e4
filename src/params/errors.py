"""Error taxonomy for schema compilation and query decoding.

Every error carries the offending field name and raw text so callers can report precisely what
went wrong. Nothing in this package logs; callers decide how to surface failures.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable machine-readable error codes."""

    invalid_descriptor = "invalid_descriptor"
    invalid_default = "invalid_default"
    missing_required = "missing_required"
    invalid_number = "invalid_number"
    invalid_boolean = "invalid_boolean"


class ParamsError(ValueError):
    """Base class for all decoder errors."""

    code: ErrorCode

    def __init__(self, message: str, *, field: str | None, raw: str | None) -> None:
        super().__init__(message)
        self.field = field
        self.raw = raw


class SchemaError(ParamsError):
    """Raised when a field descriptor cannot be compiled."""


class InvalidDescriptorError(SchemaError):
    code = ErrorCode.invalid_descriptor

    def __init__(self, field: str, raw: object) -> None:
        super().__init__(f"invalid descriptor: {field}: {raw!r}", field=field, raw=str(raw))


class InvalidDefaultError(SchemaError):
    code = ErrorCode.invalid_default

    def __init__(self, field: str, raw: str) -> None:
        super().__init__(f"invalid default value: {field}: {raw!r}", field=field, raw=raw)


class ParseError(ParamsError):
    """Raised when a query does not satisfy the schema."""


class MissingRequiredError(ParseError):
    code = ErrorCode.missing_required

    def __init__(self, field: str, raw: str | None = None) -> None:
        super().__init__(f"missing param: {field}", field=field, raw=raw)


class CoercionError(ParamsError):
    """Raised when a raw string cannot be converted to the declared type."""


class InvalidNumberError(CoercionError):
    code = ErrorCode.invalid_number

    def __init__(self, raw: str, *, field: str | None = None) -> None:
        super().__init__(_coercion_message("number", field, raw), field=field, raw=raw)


class InvalidBooleanError(CoercionError):
    code = ErrorCode.invalid_boolean

    def __init__(self, raw: str, *, field: str | None = None) -> None:
        super().__init__(_coercion_message("boolean", field, raw), field=field, raw=raw)


def _coercion_message(type_name: str, field: str | None, raw: str) -> str:
    if field is None:
        return f"could not parse {type_name}: {raw!r}"
    return f"could not parse {type_name}: {field}: {raw!r}"
