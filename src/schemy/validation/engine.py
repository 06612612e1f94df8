"""Validation engine.

This module orchestrates property checks:
- ALL_CHECKS: List of all type-specific check instances
- validate_data(): Validates one data object and returns a ValidationResult

Per declared property, in schema order, the engine applies defaults,
enforces required-ness, runs the custom validator and then the check
registered for the property's type kind. No failure stops the run; the
verdict is "no error was recorded".
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from schemy.core.types import is_number
from .checks.arrays import ArrayCheck
from .checks.dates import DateCheck
from .checks.nested import NestedSchemaCheck
from .checks.numbers import NumberCheck
from .checks.primitives import PrimitiveCheck
from .checks.strings import StringCheck
from .checks.uuids import UuidCheck
from .config import ENGINE_DATA_ERROR
from .errors import ErrorCollector
from .models import CompiledSchema, PropertyRule, ValidationResult

logger = logging.getLogger(__name__)


# Registry of all type-specific checks, exactly one per type kind
ALL_CHECKS = [
    NestedSchemaCheck(),
    DateCheck(),
    StringCheck(),
    NumberCheck(),
    PrimitiveCheck(),
    UuidCheck(),
    ArrayCheck(),
]


def _apply_default(rule: PropertyRule, data: MutableMapping) -> None:
    """Write a rule's default into ``data`` when the value is absent.

    Producers are best effort: a failing producer leaves the value unset.
    Literal defaults are honoured only for strings and numbers.
    """
    if not rule.has_default or data.get(rule.name) is not None:
        return

    default = rule.default
    if callable(default):
        try:
            data[rule.name] = default()
        except Exception:  # noqa: BLE001 - producer failures leave the value unset
            logger.debug("Default producer for %s failed", rule.name, exc_info=True)
    elif isinstance(default, str) or is_number(default):
        data[rule.name] = default


def _push(errors: ErrorCollector, rule: PropertyRule, message: Any) -> None:
    """Record an error for a declared property, honouring the rule's message override."""
    if isinstance(message, str) and rule.message:
        message = rule.message
    errors.add(rule.name, message)


def _run_custom(
    errors: ErrorCollector,
    rule: PropertyRule,
    value: Any,
    data: Any,
    schema: CompiledSchema,
) -> None:
    outcome = rule.custom(value, data, schema)
    if isinstance(outcome, str):
        _push(errors, rule, outcome)
    elif outcome is not True:
        _push(errors, rule, f"Custom validation failed for property {rule.name}")


def validate_data(schema: CompiledSchema, data: Any) -> ValidationResult:
    """Validate a data object against a compiled schema.

    Computed defaults are written back into ``data`` in place.

    Args:
        schema: Compiled schema to validate against.
        data: Object to validate. Must be a mapping.

    Returns:
        ValidationResult with the verdict, the recorded errors and the data.

    Examples:
        >>> schema = compile_schema({"age": {"type": int, "min": 0, "max": 120}})
        >>> result = validate_data(schema, {"age": 150})
        >>> result.messages()
        ['Property age must be less than 120']
    """
    errors = ErrorCollector()

    if not isinstance(data, Mapping):
        errors.add("", ENGINE_DATA_ERROR)
        return ValidationResult(valid=False, errors=errors.freeze(), data=data, schema=schema)

    if not schema.flex:
        for key in data:
            if not schema.is_declared(key):
                errors.add(key, f"Property {key} not valid in schema")

    for key, rule in schema.items():
        if isinstance(data, MutableMapping):
            _apply_default(rule, data)

        value = data.get(key)

        # Missing and None values skip every other check
        if value is None:
            if rule.required:
                _push(errors, rule, f"Missing required property {key}")
            continue

        if rule.custom is not None:
            _run_custom(errors, rule, value, data, schema)

        for check in ALL_CHECKS:
            if check.applies_to_kind(rule.kind):
                for error in check.validate(key, value, rule):
                    _push(errors, rule, error.message)
                break

    logger.debug("Validated %d properties: %d errors", len(schema), len(errors))
    return ValidationResult(valid=not errors, errors=errors.freeze(), data=data, schema=schema)


__all__ = ["ALL_CHECKS", "validate_data"]
