"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class TypeKind(str, Enum):
    """Closed set of value kinds a schema property can declare.

    Values are strings to ease serialization and error reporting.
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    FUNCTION = "function"
    DATE = "date"
    UUID_V1 = "uuid/v1"
    UUID_V4 = "uuid/v4"
    NESTED = "nested"
    ARRAY = "array"


__all__ = ["TypeKind"]
