"""Number checks: category and value bounds."""

from __future__ import annotations

from typing import Any, List

from schemy.core.enums import TypeKind
from schemy.core.types import is_number
from ..models import PropertyRule, ValidationError
from . import type_mismatch


class NumberCheck:
    """Validate numeric values (``bool`` is not a number)."""

    def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
        if not is_number(value):
            return [type_mismatch(key, value, TypeKind.NUMBER.value)]

        errors: List[ValidationError] = []
        if rule.min is not None and value < rule.min:
            errors.append(ValidationError(key, f"Property {key} must be greater than {rule.min}"))
        if rule.max is not None and value > rule.max:
            errors.append(ValidationError(key, f"Property {key} must be less than {rule.max}"))
        return errors

    def applies_to_kind(self, kind: TypeKind) -> bool:
        return kind == TypeKind.NUMBER
