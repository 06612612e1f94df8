"""Exceptions raised by schemy.

Compile-time problems with a schema declaration are programmer errors and are
raised as ``SchemaError``. Problems with validated data are never raised by the
engine; they are returned as ``ValidationError`` records. ``ValidationFailed``
exists only for the validate-and-return helpers, which turn a failed run into
an exception carrying the flattened error messages.
"""

from __future__ import annotations

from typing import List, Sequence


class SchemyError(Exception):
    """Base class for all schemy exceptions."""


class SchemaError(SchemyError, ValueError):
    """A schema declaration is malformed and cannot be compiled."""


class SchemyUsageError(SchemyError, RuntimeError):
    """The public API was called out of order (e.g. errors read before validate)."""


class ValidationFailed(SchemyError):
    """Raised by ``validate``/``validate_async`` when the body does not match the schema.

    Attributes:
        errors: Flattened list of error messages from the failed run.
    """

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__("; ".join(self.errors) or "Validation failed")


__all__ = ["SchemyError", "SchemaError", "SchemyUsageError", "ValidationFailed"]
