"""Descriptor compiler.

A descriptor is a compact type declaration for one query parameter:

    number          required number
    number?         optional number (omitted from the result when absent)
    number=-1       number defaulting to -1 when absent
    string=Default  string defaulting to "Default"
    boolean=true    boolean defaulting to True

Default literals are coerced here, at compile time, so a bad default fails before any URL is
parsed.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from src.params.coerce import coerce_value
from src.params.errors import CoercionError, InvalidDefaultError, InvalidDescriptorError
from src.params.schema import CompiledField, CompiledSchema, Modifier, TypeKind

_DESCRIPTOR_RE = re.compile(
    r"(?P<type>string|number|boolean)(?:(?P<modifier>[?=])(?P<rest>.*))?",
    flags=re.DOTALL,
)


def compile_descriptor(field: str, descriptor: str) -> CompiledField:
    """Compile a single descriptor for `field`.

    Text after `?` is ignored; text after `=` is the default literal.

    Raises:
        InvalidDescriptorError: If `descriptor` does not match the grammar.
        InvalidDefaultError: If the default literal cannot be coerced to the declared type.
    """

    if not isinstance(descriptor, str):
        raise InvalidDescriptorError(field, descriptor)

    match = _DESCRIPTOR_RE.fullmatch(descriptor)
    if not match:
        raise InvalidDescriptorError(field, descriptor)

    kind = TypeKind(match.group("type"))
    modifier_char = match.group("modifier")
    if modifier_char is None:
        return CompiledField(type=kind)

    modifier = Modifier(modifier_char)
    if modifier == Modifier.optional:
        return CompiledField(type=kind, modifier=modifier)

    literal = match.group("rest")
    try:
        default_value = coerce_value(literal, kind, field=field)
    except CoercionError as exc:
        raise InvalidDefaultError(field, literal) from exc

    return CompiledField(type=kind, modifier=modifier, default_value=default_value)


def compile_schema(descriptors: Mapping[str, str]) -> CompiledSchema:
    """Compile a mapping of field name to descriptor into an immutable schema.

    Fields are compiled in sorted name order, so the first reported error is deterministic.

    Raises:
        SchemaError: On the first invalid descriptor.
    """

    compiled: list[tuple[str, CompiledField]] = []
    for field in sorted(descriptors):
        compiled.append((field, compile_descriptor(field, descriptors[field])))
    return CompiledSchema(compiled)
