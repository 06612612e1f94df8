"""Validation data models.

This module defines the core data structures of the engine:
- PropertyRule: Compiled contract for a single schema property
- CompiledSchema: Ordered, read-only mapping of property name to PropertyRule
- ValidationError: One error recorded during a validation run
- ValidationResult: Self-contained outcome of a validation run
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from re import Pattern
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from schemy.core.enums import TypeKind
from schemy.core.types import TypeSpec

# Signature of a custom validator: (value, data, schema) -> str | bool
CustomValidator = Callable[[Any, Any, "CompiledSchema"], Any]


@dataclass(frozen=True)
class PropertyRule:
    """Compiled contract for one schema property.

    Attributes:
        name: Property name as declared.
        type: Resolved type specification.
        required: True if the property must be present and not None.
        custom: Optional validator called as ``custom(value, data, schema)``.
        regex: Compiled pattern the value must match (strings only).
        min: Lower bound (string length, numeric value, or array length).
        max: Upper bound (string length, numeric value, or array length).
        enum_values: Accepted values (strings only).
        default: Literal or zero-argument producer used when the value is absent.
        message: Replaces every default error message reported for this property.

    Examples:
        >>> PropertyRule(name="age", type=TypeSpec(TypeKind.NUMBER), min=0, max=120)
    """

    name: str
    type: TypeSpec
    required: bool = False
    custom: Optional[CustomValidator] = None
    regex: Optional[Pattern[str]] = None
    min: Optional[float] = None
    max: Optional[float] = None
    enum_values: Optional[Tuple[str, ...]] = None
    default: Any = None
    message: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if (self.regex is not None or self.enum_values is not None) and not self.type.is_string:
            raise ValueError("regex and enum can be set only for strings")

    @property
    def kind(self) -> TypeKind:
        return self.type.kind

    @property
    def has_default(self) -> bool:
        return self.default is not None


class CompiledSchema(Mapping):
    """Normalized rule tree produced by the schema compiler.

    Behaves as a read-only mapping of property name to ``PropertyRule``.
    Iteration follows declaration order, which is significant for body
    projection. Nested schemas hang off ``TypeSpec.schema`` of their parent rule.

    Attributes:
        flex: True when undeclared keys are tolerated (``strict=False``).
    """

    def __init__(self, rules: Iterable[PropertyRule], flex: bool = False) -> None:
        self._rules: Dict[str, PropertyRule] = {}
        for rule in rules:
            self._rules[rule.name] = rule
        self.flex = flex

    @property
    def strict(self) -> bool:
        return not self.flex

    def __getitem__(self, key: str) -> PropertyRule:
        return self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        mode = "flex" if self.flex else "strict"
        return f"CompiledSchema({list(self._rules)!r}, {mode})"

    def is_declared(self, key: str) -> bool:
        return key in self._rules


@dataclass(frozen=True)
class ValidationError:
    """One error recorded for a key during a validation run.

    Attributes:
        key: Property the error refers to (empty for engine-level errors).
        message: Error text, or a tuple of texts for errors folded from a nested schema.
    """

    key: str
    message: Union[str, Tuple[str, ...]]

    def messages(self) -> List[str]:
        """Return the message(s) as a flat list."""
        if isinstance(self.message, tuple):
            return list(self.message)
        return [self.message]

    def to_dict(self) -> Dict[str, Any]:
        message = list(self.message) if isinstance(self.message, tuple) else self.message
        return {"key": self.key, "message": message}


def flatten_messages(errors: Iterable[ValidationError]) -> List[str]:
    """Flatten error messages one level, keeping error order."""
    flat: List[str] = []
    for error in errors:
        flat.extend(error.messages())
    return flat


@dataclass(frozen=True)
class ValidationResult:
    """Self-contained outcome of validating one data object.

    Attributes:
        valid: True if no error was recorded.
        errors: Errors in the order they were recorded.
        data: The validated object, with computed defaults written into it.
        schema: Schema the data was validated against.
    """

    valid: bool
    errors: Tuple[ValidationError, ...] = field(default_factory=tuple)
    data: Any = None
    schema: Optional[CompiledSchema] = None

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.valid and self.errors:
            raise ValueError("valid=True requires no errors")
        if not self.valid and not self.errors:
            raise ValueError("valid=False requires at least one error")

    def __bool__(self) -> bool:
        return self.valid

    def messages(self) -> List[str]:
        """Flattened list of error messages."""
        return flatten_messages(self.errors)

    def grouped(self) -> List[ValidationError]:
        """Errors with their keys; folded nested errors keep their message list."""
        return list(self.errors)


__all__ = [
    "CustomValidator",
    "PropertyRule",
    "CompiledSchema",
    "ValidationError",
    "ValidationResult",
    "flatten_messages",
]
