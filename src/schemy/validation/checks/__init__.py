"""Type-specific property checks.

This module defines the protocol (interface) that every property check
implements. Each check validates values of one or more ``TypeKind``s
(e.g. string bounds, array items, nested schemas).

To implement a new property check:

1. Create a new file in this directory (e.g., `my_check.py`)
2. Define a class that implements the PropertyCheck protocol
3. Implement the required methods: `validate()` and `applies_to_kind()`
4. Add the check to the ALL_CHECKS list in engine.py

Example:
    ```python
    # checks/my_check.py
    from typing import Any, List
    from schemy.core.enums import TypeKind
    from ..models import PropertyRule, ValidationError

    class MyCheck:
        def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
            # Validation logic here
            return []

        def applies_to_kind(self, kind: TypeKind) -> bool:
            return kind == TypeKind.STRING
    ```
"""

from __future__ import annotations

from typing import Any, List, Protocol

from schemy.core.enums import TypeKind
from schemy.core.types import category_of
from ..models import PropertyRule, ValidationError


class PropertyCheck(Protocol):
    """Protocol defining the interface for property checks.

    Use duck typing (Protocol) for flexibility - no need to inherit from a base class.

    Methods:
        validate: Check a present value against its rule and return errors.
        applies_to_kind: Determine if the check handles a type kind.
    """

    def validate(self, key: str, value: Any, rule: PropertyRule) -> List[ValidationError]:
        """Run the check on a present (not None) value.

        Args:
            key: Property name being validated.
            value: The property value from the data object.
            rule: Compiled rule of the property.

        Returns:
            Errors found, in the order they were detected. Empty list if the value passes.
        """
        ...

    def applies_to_kind(self, kind: TypeKind) -> bool:
        """Check if this check handles values declared with a given kind."""
        ...


def type_mismatch(key: str, value: Any, expected: str) -> ValidationError:
    """Error for a value whose runtime category differs from the declared one."""
    return ValidationError(key, f"Property {key} is {category_of(value)}, expected {expected}")


__all__ = ["PropertyCheck", "type_mismatch"]
