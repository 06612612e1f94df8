"""Date checks.

A date value is a string (ISO-8601 or RFC 2822), a number of milliseconds
since the epoch, or a ``date``/``datetime`` object such as YAML loaders produce.
"""

from __future__ import annotations

from typing import Any, List

from schemy.core.enums import TypeKind
from schemy.core.types import is_valid_date
from ..models import PropertyRule, ValidationError


class DateCheck:
    """Validate date values."""

    def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
        if is_valid_date(value):
            return []
        return [ValidationError(key, f"Property {key} is not a valid date")]

    def applies_to_kind(self, kind: TypeKind) -> bool:
        return kind == TypeKind.DATE
