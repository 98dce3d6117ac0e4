"""Compiled schema models.

A compiled schema is the contract between the descriptor compiler and the value parser. Fields are
validated on construction and the schema is immutable afterwards, so one instance may be shared
by any number of parse calls.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

TypedValue = str | int | float | bool


class TypeKind(StrEnum):
    """Supported primitive parameter types."""

    string = "string"
    number = "number"
    boolean = "boolean"


class Modifier(StrEnum):
    """Descriptor modifiers. A required field has no modifier."""

    optional = "?"
    default = "="


def value_matches_kind(value: object, kind: TypeKind) -> bool:
    """Whether a decoded value has the Python type used for `kind`."""

    if kind == TypeKind.string:
        return isinstance(value, str)
    if kind == TypeKind.boolean:
        return isinstance(value, bool)
    return isinstance(value, int | float) and not isinstance(value, bool)


class CompiledField(BaseModel):
    """A normalized `(type, modifier, default_value)` triple."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: TypeKind
    modifier: Modifier | None = None
    default_value: TypedValue | None = None

    @model_validator(mode="after")
    def validate_default(self) -> CompiledField:
        """Validate that a default is present iff `modifier` is `default`, with a matching type."""

        if self.modifier == Modifier.default:
            if self.default_value is None:
                raise ValueError("default_value is required for modifier '='")
            if not value_matches_kind(self.default_value, self.type):
                raise ValueError(f"default_value does not match type {self.type}")
        elif self.default_value is not None:
            raise ValueError("default_value is only allowed for modifier '='")
        return self

    @property
    def required(self) -> bool:
        return self.modifier is None


class CompiledSchema(Mapping[str, CompiledField]):
    """Read-only mapping of field name to compiled field, iterated in sorted name order."""

    __slots__ = ("_fields",)

    _fields: dict[str, CompiledField]

    def __init__(self, fields: Iterable[tuple[str, CompiledField]] = ()) -> None:
        object.__setattr__(self, "_fields", dict(sorted(fields, key=lambda item: item[0])))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, name: str) -> CompiledField:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {field!r}" for name, field in self._fields.items())
        return f"CompiledSchema({{{items}}})"
