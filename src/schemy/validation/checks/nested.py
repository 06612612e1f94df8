"""Nested schema checks.

A failing child object is reported once, at the parent key. The child's
flattened messages are folded into that error with the parent key prefixed
to the property reference, e.g. ``Property child.title is number, expected string``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from schemy.core.enums import TypeKind
from ..models import PropertyRule, ValidationError
from . import type_mismatch


def prefix_message(message: str, key: str) -> str:
    """Prefix the first property reference in a message with ``key.``."""
    return message.replace("roperty ", f"roperty {key}.", 1)


class NestedSchemaCheck:
    """Validate a child object against its nested schema."""

    def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
        if not isinstance(value, Mapping):
            return [type_mismatch(key, value, TypeKind.OBJECT.value)]

        from ..engine import validate_data

        result = validate_data(rule.type.schema, value)
        if result.valid:
            return []
        return [ValidationError(key, tuple(prefix_message(m, key) for m in result.messages()))]

    def applies_to_kind(self, kind: TypeKind) -> bool:
        return kind == TypeKind.NESTED
