"""Array checks: sequence shape, length bounds and item types.

Item failures are aggregated into a single error for the property; the
failing elements are not reported individually. Inner array declarations
(``[[str]]``) are checked all the way down.
"""

from __future__ import annotations

from typing import Any, List

from schemy.core.enums import TypeKind
from schemy.core.types import TypeSpec, is_array, matches_kind
from ..models import PropertyRule, ValidationError
from . import type_mismatch


def item_matches(spec: TypeSpec, element: Any) -> bool:
    """Check one array element against the declared item spec, recursively."""
    if spec.is_nested:
        from ..engine import validate_data

        return validate_data(spec.schema, element).valid
    if spec.kind == TypeKind.ARRAY and spec.item is not None:
        return is_array(element) and all(item_matches(spec.item, inner) for inner in element)
    return matches_kind(spec, element)


class ArrayCheck:
    """Validate list/tuple values."""

    def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
        if not is_array(value):
            return [type_mismatch(key, value, TypeKind.ARRAY.value)]

        errors: List[ValidationError] = []

        if rule.min is not None and len(value) < rule.min:
            errors.append(
                ValidationError(key, f"Property {key} must contain at least {rule.min} elements")
            )

        if rule.max is not None and len(value) > rule.max:
            errors.append(
                ValidationError(key, f"Property {key} must contain no more than {rule.max} elements")
            )

        item = rule.type.item
        if item is None or all(item_matches(item, element) for element in value):
            return errors

        if item.is_nested:
            errors.append(ValidationError(key, f"An item in array of property {key} is not valid"))
        else:
            errors.append(
                ValidationError(
                    key,
                    f"An item in array of property {key} is not valid. "
                    f"All items must be of type {item.kind.value}",
                )
            )

        return errors

    def applies_to_kind(self, kind: TypeKind) -> bool:
        return kind == TypeKind.ARRAY
