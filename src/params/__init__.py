"""Typed query-string decoding.

The params layer compiles compact field descriptors (`number?`, `string=x`, ...) into an immutable
schema, then uses it to turn a URL's query component into a dict of typed values.
"""

