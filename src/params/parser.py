"""Typed value parsing against a compiled schema.

Per-field rules, applied in the schema's sorted field order:
    - a non-empty raw value is coerced to the declared type,
    - an absent or empty raw value resolves to the default (`type=value`),
      is omitted (`type?`), or fails (required).

An empty string counts as absent. This mirrors the long-standing behavior of the decoder and is
kept on purpose: `?caseId=` is reported as a missing `caseId`, not as an invalid number.

Parsing is fail-fast: the first error aborts and no partial record is returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from src.params.coerce import coerce_value
from src.params.compiler import compile_schema
from src.params.errors import MissingRequiredError
from src.params.query import DuplicatePolicy, extract_query
from src.params.schema import CompiledSchema, Modifier, TypedValue


def parse_values(schema: CompiledSchema, raw: Mapping[str, str]) -> dict[str, TypedValue]:
    """Decode `raw` query values into a typed record.

    Raises:
        MissingRequiredError: If a required field is absent or empty.
        CoercionError: If a provided value does not match the declared type.
    """

    result: dict[str, TypedValue] = {}
    for name, field in schema.items():
        raw_value = raw.get(name)
        if raw_value:
            result[name] = coerce_value(raw_value, field.type, field=name)
        elif field.modifier == Modifier.default:
            result[name] = field.default_value
        elif field.required:
            raise MissingRequiredError(name, raw_value)
    return result


@dataclass(frozen=True)
class Params:
    """A compiled schema bound to a query extraction policy."""

    schema: CompiledSchema
    duplicates: DuplicatePolicy = "first"

    def __post_init__(self) -> None:
        if self.duplicates not in ("first", "last"):
            raise ValueError(f"unsupported duplicate policy: {self.duplicates!r}")

    def parse(self, url: str) -> dict[str, TypedValue]:
        """Extract the query component of `url` and decode it."""

        return parse_values(self.schema, extract_query(url, duplicates=self.duplicates))

    def parse_query(self, raw: Mapping[str, str]) -> dict[str, TypedValue]:
        """Decode an already extracted query mapping."""

        return parse_values(self.schema, raw)


def params(descriptors: Mapping[str, str], *, duplicates: DuplicatePolicy = "first") -> Params:
    """Compile `descriptors` once and return a reusable parser (convenience wrapper)."""

    return Params(schema=compile_schema(descriptors), duplicates=duplicates)
