"""URL query extraction.

Tokenization and percent-decoding are delegated to `urllib.parse`. The only policy decided here is
how repeated keys collapse into a single raw value.
"""

from __future__ import annotations

from typing import Literal
from urllib.parse import parse_qsl, urlsplit

DuplicatePolicy = Literal["first", "last"]


def extract_query(url: str, *, duplicates: DuplicatePolicy = "first") -> dict[str, str]:
    """Return a mapping of query parameter name to raw (decoded) value.

    Blank values are kept (`?a=` yields `{"a": ""}`); treating them as absent is the parser's job.

    Raises:
        ValueError: If `duplicates` is not `"first"` or `"last"`.
    """

    if duplicates not in ("first", "last"):
        raise ValueError(f"unsupported duplicate policy: {duplicates!r}")

    query = urlsplit(url).query
    result: dict[str, str] = {}
    for name, value in parse_qsl(query, keep_blank_values=True):
        if duplicates == "first" and name in result:
            continue
        result[name] = value
    return result
