"""Type specifications and runtime value categories.

This module resolves declared type tokens into ``TypeSpec`` values and
answers the per-kind "does this value have the right shape" question used
by the validation engine.

Declared tokens are resolved once, at compile time:

- Python type tags: ``str``, ``int``/``float``, ``bool``, ``dict``,
  ``callable``, ``datetime.date``/``datetime.datetime``, ``list``/``tuple``
- Keyword strings: ``"uuid/v1"``, ``"uuid/v4"``
- Nested schemas and array wrappers are built by the compiler on top of these
"""

from __future__ import annotations

import collections.abc
import datetime
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from .enums import TypeKind

if TYPE_CHECKING:  # pragma: no cover
    from schemy.validation.models import CompiledSchema


UUID_V1_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)
UUID_V4_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}", re.IGNORECASE
)

# Largest absolute epoch offset (in milliseconds) accepted as a timestamp
MAX_TIMESTAMP_MS = 8.64e15

_TAG_KINDS: Dict[Any, TypeKind] = {
    str: TypeKind.STRING,
    int: TypeKind.NUMBER,
    float: TypeKind.NUMBER,
    bool: TypeKind.BOOLEAN,
    dict: TypeKind.OBJECT,
    callable: TypeKind.FUNCTION,
    collections.abc.Callable: TypeKind.FUNCTION,
    datetime.date: TypeKind.DATE,
    datetime.datetime: TypeKind.DATE,
    list: TypeKind.ARRAY,
    tuple: TypeKind.ARRAY,
}

SUPPORTED_KEYWORDS: Dict[str, TypeKind] = {
    TypeKind.UUID_V1.value: TypeKind.UUID_V1,
    TypeKind.UUID_V4.value: TypeKind.UUID_V4,
}


@dataclass(frozen=True)
class TypeSpec:
    """Resolved type of a schema property.

    Attributes:
        kind: The value kind the property must conform to.
        schema: Child schema, set only for ``TypeKind.NESTED``.
        item: Inner item spec for ``TypeKind.ARRAY``; ``None`` accepts items of any type.

    Examples:
        >>> tags = TypeSpec(TypeKind.ARRAY, item=TypeSpec(TypeKind.STRING))
        >>> tags.item.is_string
        True
    """

    kind: TypeKind
    schema: Optional["CompiledSchema"] = None
    item: Optional["TypeSpec"] = None

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.kind == TypeKind.NESTED and self.schema is None:
            raise ValueError("Nested type requires a compiled schema")
        if self.item is not None and self.kind != TypeKind.ARRAY:
            raise ValueError("Only array types may declare an item type")

    @property
    def is_nested(self) -> bool:
        return self.kind == TypeKind.NESTED

    @property
    def is_string(self) -> bool:
        return self.kind == TypeKind.STRING


def resolve_type_tag(tag: Any) -> Optional[TypeKind]:
    """Classify a Python type tag or keyword string.

    Args:
        tag: Declared type token (``str``, ``int``, ``"uuid/v4"``...).

    Returns:
        The matching ``TypeKind`` or ``None`` when the token is unsupported.

    Examples:
        >>> resolve_type_tag(str)
        <TypeKind.STRING: 'string'>
        >>> resolve_type_tag("uuid/v4")
        <TypeKind.UUID_V4: 'uuid/v4'>
        >>> resolve_type_tag(set) is None
        True
    """
    if isinstance(tag, str):
        return SUPPORTED_KEYWORDS.get(tag)
    try:
        return _TAG_KINDS.get(tag)
    except TypeError:
        # Unhashable tokens are never type tags
        return None


def tag_name(tag: Any) -> str:
    """Human readable name of a declared type token."""
    if isinstance(tag, str):
        return tag
    return getattr(tag, "__name__", type(tag).__name__)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def category_of(value: Any) -> str:
    """Name the runtime category of a value.

    Returns one of ``null``, ``boolean``, ``number``, ``string``, ``array``,
    ``object``, ``function``, or the Python type name for anything else.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_array(value):
        return "array"
    if isinstance(value, collections.abc.Mapping):
        return "object"
    if callable(value):
        return "function"
    return type(value).__name__


def is_valid_date(value: Any) -> bool:
    """Check that a value can be read as a date.

    Strings are accepted in ISO-8601 or RFC 2822 form. Numbers are epoch
    offsets in milliseconds. ``date`` and ``datetime`` objects, as produced by
    YAML loaders, are dates already.
    """
    if isinstance(value, datetime.date):
        return True
    if isinstance(value, int) and not isinstance(value, bool):
        # Compared as int, large values would overflow a float conversion
        return abs(value) <= MAX_TIMESTAMP_MS
    if is_number(value):
        return math.isfinite(value) and abs(value) <= MAX_TIMESTAMP_MS
    if not isinstance(value, str) or not value.strip():
        return False

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        datetime.datetime.fromisoformat(text)
        return True
    except ValueError:
        pass

    from email.utils import parsedate_to_datetime

    try:
        parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return False
    return True


def matches_kind(spec: TypeSpec, value: Any) -> bool:
    """Check that a value has the shape required by a type spec.

    Only the primitive shape is checked here: nested schemas are reported as
    matching any mapping, and arrays any list or tuple.
    """
    kind = spec.kind
    if kind == TypeKind.STRING:
        return isinstance(value, str)
    if kind == TypeKind.NUMBER:
        return is_number(value)
    if kind == TypeKind.BOOLEAN:
        return isinstance(value, bool)
    if kind in (TypeKind.OBJECT, TypeKind.NESTED):
        return isinstance(value, collections.abc.Mapping)
    if kind == TypeKind.FUNCTION:
        return callable(value)
    if kind == TypeKind.DATE:
        return is_valid_date(value)
    if kind == TypeKind.UUID_V1:
        return isinstance(value, str) and UUID_V1_PATTERN.fullmatch(value) is not None
    if kind == TypeKind.UUID_V4:
        return isinstance(value, str) and UUID_V4_PATTERN.fullmatch(value) is not None
    if kind == TypeKind.ARRAY:
        return is_array(value)
    return False


__all__ = [
    "TypeSpec",
    "SUPPORTED_KEYWORDS",
    "UUID_V1_PATTERN",
    "UUID_V4_PATTERN",
    "resolve_type_tag",
    "tag_name",
    "category_of",
    "is_number",
    "is_array",
    "is_valid_date",
    "matches_kind",
]
