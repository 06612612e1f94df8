"""Validation system for schemy.

This module provides the schema compiler and the validation engine:

- **Models**: PropertyRule, CompiledSchema, ValidationError, ValidationResult
- **Compiler**: compile_schema() - turns a declaration into a CompiledSchema
- **Checks**: Type-specific property checks (see validation/checks/)
- **Engine**: validate_data() - runs the checks over one data object
- **Body**: project_body() - clean output object from validated data
- **Config**: Engine constants and YAML declaration loading (import from .config)

Usage:
    >>> from schemy.validation import compile_schema, validate_data
    >>> schema = compile_schema({"id": {"type": "uuid/v4"}})
    >>> result = validate_data(schema, {"id": "not-a-uuid"})
    >>> result.valid
    False
    >>> result.messages()
    ['Property id is not a valid uuid/v4']

For implementation details:
    - See validation/checks/__init__.py for check interface conventions
    - See validation/config.py for constants and YAML type names
    - See validation/engine.py for check orchestration
"""

from __future__ import annotations

from schemy.core.enums import TypeKind

from .body import project_body
from .compiler import SchemaCompiler, compile_schema
from .engine import validate_data
from .errors import ErrorCollector
from .models import CompiledSchema, PropertyRule, ValidationError, ValidationResult

__all__ = [
    # Data models
    "PropertyRule",
    "CompiledSchema",
    "ValidationError",
    "ValidationResult",
    "ErrorCollector",
    # Compiler and engine
    "SchemaCompiler",
    "compile_schema",
    "validate_data",
    "project_body",
    # Enums
    "TypeKind",
]
