"""UUID checks for the ``uuid/v1`` and ``uuid/v4`` keywords."""

from __future__ import annotations

from typing import Any, List

from schemy.core.enums import TypeKind
from schemy.core.types import matches_kind
from ..models import PropertyRule, ValidationError


class UuidCheck:
    """Validate UUID strings (case-insensitive, 8-4-4-4-12 hex groups)."""

    def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
        if matches_kind(rule.type, value):
            return []
        return [ValidationError(key, f"Property {key} is not a valid {rule.kind.value}")]

    def applies_to_kind(self, kind: TypeKind) -> bool:
        return kind in (TypeKind.UUID_V1, TypeKind.UUID_V4)
