"""Category-only checks for booleans, functions and plain objects."""

from __future__ import annotations

from typing import Any, List

from schemy.core.enums import TypeKind
from schemy.core.types import matches_kind
from ..models import PropertyRule, ValidationError
from . import type_mismatch

_KINDS = (TypeKind.BOOLEAN, TypeKind.FUNCTION, TypeKind.OBJECT)


class PrimitiveCheck:
    """Validate that a value has the declared runtime category."""

    def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
        if matches_kind(rule.type, value):
            return []
        return [type_mismatch(key, value, rule.kind.value)]

    def applies_to_kind(self, kind: TypeKind) -> bool:
        return kind in _KINDS
