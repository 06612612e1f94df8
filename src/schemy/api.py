"""High level API: the ``Schemy`` schema object and validate-and-return helpers.

Usage:
    >>> from schemy import Schemy
    >>> schema = Schemy({"title": {"type": str, "min": 3}, "tags": [str]})
    >>> schema.validate({"title": "Hello", "tags": ["a", "b"]})
    True
    >>> schema.get_body()
    {'title': 'Hello', 'tags': ['a', 'b']}

A ``Schemy`` instance remembers only its most recent validation run, so an
instance must not serve two validations at the same time. To validate
payloads concurrently, use one instance per task, or call ``evaluate()``,
which returns a self-contained ``ValidationResult`` and stores nothing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Union

from .exceptions import SchemyUsageError, ValidationFailed
from .hooks import DEFAULT_HOOKS, HookEvent, HookRegistry
from .validation.body import project_body
from .validation.compiler import SchemaCompiler
from .validation.config import DEFAULT_STRICT
from .validation.engine import validate_data
from .validation.models import CompiledSchema, ValidationError, ValidationResult


class Schemy:
    """A compiled schema together with the state of its last validation run.

    Args:
        declaration: Mapping of property name to rule (or a compiled schema).
        strict: If False, undeclared keys pass validation and are dropped from bodies.
        hooks: Registry notified at lifecycle events. Defaults to DEFAULT_HOOKS.

    Raises:
        SchemaError: If the declaration is malformed.
    """

    def __init__(
        self,
        declaration: Any,
        strict: bool = DEFAULT_STRICT,
        hooks: Optional[HookRegistry] = None,
    ) -> None:
        self.hooks = hooks if hooks is not None else DEFAULT_HOOKS
        self.compiled_schema: CompiledSchema = SchemaCompiler(self.hooks).compile(
            declaration, strict=strict
        )
        self._last_result: Optional[ValidationResult] = None

    def __repr__(self) -> str:
        return f"Schemy({self.compiled_schema!r})"

    @classmethod
    def schema(cls, declaration: Any, hooks: Optional[HookRegistry] = None) -> "Schemy":
        """Create a non-strict schema."""
        return cls(declaration, strict=False, hooks=hooks)

    @classmethod
    def strict(cls, declaration: Any, hooks: Optional[HookRegistry] = None) -> "Schemy":
        """Create a strict schema."""
        return cls(declaration, strict=True, hooks=hooks)

    @staticmethod
    def extend(plugins: Union[Any, Sequence[Any]]) -> None:
        """Register plugins on the default hook registry."""
        DEFAULT_HOOKS.extend(plugins)

    @staticmethod
    def get_version() -> str:
        from . import __version__

        return __version__

    @property
    def flex(self) -> bool:
        return self.compiled_schema.flex

    @property
    def last_result(self) -> Optional[ValidationResult]:
        return self._last_result

    def evaluate(self, data: Any) -> ValidationResult:
        """Validate data and return the result without storing it on the instance."""
        self.hooks.trigger(HookEvent.BEFORE_VALIDATE, data)
        result = validate_data(self.compiled_schema, data)
        self.hooks.trigger(HookEvent.AFTER_VALIDATE, data)
        return result

    def validate(self, data: Any) -> bool:
        """Validate data against this schema.

        Errors and the validated data are kept until the next call and can be
        read with ``get_validation_errors()`` and ``get_body()``.

        Returns:
            True if the data is valid, False otherwise.
        """
        self._last_result = self.evaluate(data)
        return self._last_result.valid

    def _require_result(self, method: str) -> ValidationResult:
        if self._last_result is None:
            raise SchemyUsageError(f"You need to call .validate() before .{method}()")
        return self._last_result

    def get_validation_errors(self) -> List[str]:
        """Error messages of the last validation, flattened."""
        result = self._require_result("get_validation_errors")
        self.hooks.trigger(HookEvent.GET_VALIDATION_ERRORS, None)
        return result.messages()

    def get_grouped_validation_errors(self) -> List[ValidationError]:
        """Errors of the last validation with their keys."""
        result = self._require_result("get_grouped_validation_errors")
        self.hooks.trigger(HookEvent.GET_GROUPED_VALIDATION_ERRORS, None)
        return result.grouped()

    def get_body(self, include_all: bool = False, order_body: bool = True) -> Dict[str, Any]:
        """Data of the last validation, projected onto this schema.

        Args:
            include_all: Keep keys not declared in a non-strict schema.
            order_body: Order keys as declared in the schema.
        """
        result = self._require_result("get_body")
        if not isinstance(result.data, Mapping):
            raise SchemyUsageError("Last validated data is not an object")
        return project_body(result.data, self.compiled_schema, include_all, order_body)


def validate(
    body: Any,
    schema: Any,
    include_all: bool = False,
    order_body: bool = False,
    hooks: Optional[HookRegistry] = None,
) -> Dict[str, Any]:
    """Validate a body and return it, projected onto the schema.

    Args:
        body: Object to validate.
        schema: ``Schemy`` instance, compiled schema or raw declaration (compiled strict).
        include_all: Keep keys not declared in a non-strict schema.
        order_body: Order keys as declared in the schema.
        hooks: Registry for a schema compiled here. Ignored for ``Schemy`` instances.

    Returns:
        The projected body.

    Raises:
        ValidationFailed: If the body is not valid; ``errors`` holds the messages.
        SchemaError: If a raw declaration is malformed.
    """
    if not isinstance(schema, Schemy):
        schema = Schemy(schema, hooks=hooks)

    if schema.validate(body):
        return schema.get_body(include_all, order_body)

    raise ValidationFailed(schema.get_validation_errors())


async def validate_async(
    body: Any,
    schema: Any,
    include_all: bool = False,
    order_body: bool = False,
    hooks: Optional[HookRegistry] = None,
) -> Dict[str, Any]:
    """Awaitable form of ``validate`` for async call sites.

    Runs to completion synchronously; there is no suspension point.
    """
    return validate(body, schema, include_all=include_all, order_body=order_body, hooks=hooks)


__all__ = ["Schemy", "validate", "validate_async"]
