"""Raw string to typed value coercion.

The same rules apply to query values and to default literals in descriptors, so a default that
compiles is guaranteed to be a value the parser could have produced.
"""

from __future__ import annotations

import re

from src.params.errors import InvalidBooleanError, InvalidNumberError
from src.params.schema import TypedValue, TypeKind

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", flags=re.ASCII)
_INTEGER_RE = re.compile(r"[+-]?\d+", flags=re.ASCII)
_RADIX_RE = re.compile(r"0(?P<prefix>[xXoObB])(?P<digits>[0-9a-fA-F]+)")
_INFINITY_RE = re.compile(r"(?P<sign>[+-]?)Infinity")

_RADIX_BASES: dict[str, int] = {"x": 16, "o": 8, "b": 2}

_BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}


def coerce_number(raw: str, *, field: str | None = None) -> int | float:
    """Parse a permissive numeric literal.

    Integer-form literals (`4`, `-1`, `0x1f`) decode to `int`; fractional or exponent forms and
    `Infinity` decode to `float`. Surrounding whitespace is ignored. Empty text and `NaN` are
    rejected.

    Raises:
        InvalidNumberError: If `raw` is not a numeric literal.
    """

    text = raw.strip()

    if _INTEGER_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Longer than the int string-conversion digit limit.
            return float(text)

    if _DECIMAL_RE.fullmatch(text):
        return float(text)

    match = _RADIX_RE.fullmatch(text)
    if match:
        try:
            return int(match.group("digits"), _RADIX_BASES[match.group("prefix").lower()])
        except ValueError as exc:
            raise InvalidNumberError(raw, field=field) from exc

    match = _INFINITY_RE.fullmatch(text)
    if match:
        return float("-inf") if match.group("sign") == "-" else float("inf")

    raise InvalidNumberError(raw, field=field)


def coerce_boolean(raw: str, *, field: str | None = None) -> bool:
    """Parse exactly `"true"` or `"false"` (case-sensitive)."""

    try:
        return _BOOLEAN_LITERALS[raw]
    except KeyError:
        raise InvalidBooleanError(raw, field=field) from None


def coerce_value(raw: str, kind: TypeKind, *, field: str | None = None) -> TypedValue:
    """Convert `raw` to the Python value for `kind`.

    Raises:
        CoercionError: If `raw` is not valid for `kind`.
    """

    if kind == TypeKind.string:
        return raw
    if kind == TypeKind.number:
        return coerce_number(raw, field=field)
    return coerce_boolean(raw, field=field)
