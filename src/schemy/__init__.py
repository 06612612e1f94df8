"""schemy: declarative validation for plain data objects.

Declare the expected shape of a mapping once, then validate any number of
objects against it:

    >>> from schemy import Schemy
    >>> schema = Schemy({"age": {"type": int, "min": 0, "max": 120}})
    >>> schema.validate({"age": 150})
    False
    >>> schema.get_validation_errors()
    ['Property age must be less than 120']
"""

__all__ = [
    "__version__",
    "Schemy",
    "validate",
    "validate_async",
    "compile_schema",
    "validate_data",
    "HookEvent",
    "HookRegistry",
    "DEFAULT_HOOKS",
    "SchemyError",
    "SchemaError",
    "SchemyUsageError",
    "ValidationFailed",
]

__version__ = "1.6.2"

from .api import Schemy, validate, validate_async  # noqa: E402
from .exceptions import SchemaError, SchemyError, SchemyUsageError, ValidationFailed  # noqa: E402
from .hooks import DEFAULT_HOOKS, HookEvent, HookRegistry  # noqa: E402
from .validation import compile_schema, validate_data  # noqa: E402
