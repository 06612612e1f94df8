"""String checks: category, enum membership, regex and length bounds.

Once the value is known to be a string, every constraint is evaluated and
reported on its own, so one value can fail several of them at once.
"""

from __future__ import annotations

from typing import Any, List

from schemy.core.enums import TypeKind
from ..models import PropertyRule, ValidationError
from . import type_mismatch


class StringCheck:
    """Validate string values."""

    def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
        if not isinstance(value, str):
            return [type_mismatch(key, value, TypeKind.STRING.value)]

        errors: List[ValidationError] = []

        if rule.enum_values is not None and value not in rule.enum_values:
            errors.append(
                ValidationError(key, f"Value of property {key} does not contain an acceptable value")
            )

        if rule.regex is not None and rule.regex.search(value) is None:
            errors.append(ValidationError(key, f"Regex validation failed for property {key}"))

        if rule.min is not None and len(value) < rule.min:
            errors.append(
                ValidationError(key, f"Property {key} must contain at least {rule.min} characters")
            )

        if rule.max is not None and len(value) > rule.max:
            errors.append(
                ValidationError(key, f"Property {key} must contain less than {rule.max} characters")
            )

        return errors

    def applies_to_kind(self, kind: TypeKind) -> bool:
        return kind == TypeKind.STRING
