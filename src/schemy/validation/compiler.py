"""Schema compiler.

Turns a raw schema declaration (mapping of property name to rule) into a
``CompiledSchema``. The declaration itself is validated on the way; any
problem raises ``SchemaError`` and no schema is produced.

Each declared value is one of:
- a bare type token (``str``, ``"uuid/v4"``, ``[str]``...): shorthand for a required property
- a rule mapping with a ``type`` key: ``{"type": int, "min": 0, "max": 120}``
- a mapping without a ``type`` key: an implicit nested schema declaration
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from schemy.core.enums import TypeKind
from schemy.core.types import TypeSpec, category_of, is_number, resolve_type_tag, tag_name
from schemy.exceptions import SchemaError
from schemy.hooks import DEFAULT_HOOKS, HookEvent, HookRegistry
from .config import DEFAULT_STRICT, NESTED_META_KEYS
from .models import CompiledSchema, PropertyRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainRule:
    """A declared property with an explicit ``type``."""

    key: str
    options: Mapping


@dataclass(frozen=True)
class NestedDeclaration:
    """A declared property whose value is itself a schema declaration."""

    key: str
    declaration: Dict[str, Any] = field(default_factory=dict)
    required: bool = False
    custom: Any = None


def classify_declaration(key: str, value: Any) -> Union[PlainRule, NestedDeclaration]:
    """Resolve one declared value into the rule grammar.

    Examples:
        >>> classify_declaration("name", str)
        PlainRule(key='name', options={'type': <class 'str'>, 'required': True})
        >>> classify_declaration("child", {"title": str, "required": True}).required
        True
    """
    if isinstance(value, Mapping) and not isinstance(value, CompiledSchema):
        if "type" in value:
            return PlainRule(key=key, options=value)
        return NestedDeclaration(
            key=key,
            declaration={k: v for k, v in value.items() if k not in NESTED_META_KEYS},
            required=bool(value.get("required", False)),
            custom=value.get("custom"),
        )
    return PlainRule(key=key, options={"type": value, "required": True})


def _compiled_of(token: Any) -> Optional[CompiledSchema]:
    """Return the compiled schema carried by a token, if any."""
    if isinstance(token, CompiledSchema):
        return token
    compiled = getattr(token, "compiled_schema", None)
    if isinstance(compiled, CompiledSchema):
        return compiled
    return None


class SchemaCompiler:
    """Compile schema declarations into ``CompiledSchema`` trees.

    Nested declarations are compiled depth-first into independent child
    schemas; child schemas are always strict. Hooks fire only around the
    top-level compilation.
    """

    def __init__(self, hooks: Optional[HookRegistry] = None) -> None:
        self.hooks = hooks if hooks is not None else DEFAULT_HOOKS

    def compile(self, declaration: Any, strict: bool = DEFAULT_STRICT) -> CompiledSchema:
        """Compile a declaration.

        Args:
            declaration: Mapping of property name to rule, or an already compiled schema.
            strict: If False, undeclared keys are tolerated during validation.

        Returns:
            The compiled schema. An already compiled schema is returned unchanged.

        Raises:
            SchemaError: If the declaration is malformed.
        """
        self.hooks.trigger(HookEvent.BEFORE_PARSE, declaration)

        compiled = _compiled_of(declaration)
        if compiled is None:
            compiled = self._compile_declaration(declaration, flex=not strict)
            logger.debug(
                "Compiled schema with %d properties (%s)",
                len(compiled),
                "strict" if strict else "flex",
            )

        self.hooks.trigger(HookEvent.AFTER_PARSE, compiled)
        return compiled

    def _compile_declaration(self, declaration: Any, flex: bool) -> CompiledSchema:
        if not isinstance(declaration, Mapping):
            raise SchemaError(
                f"Schema declaration must be a mapping, got {category_of(declaration)}"
            )
        rules = [self._compile_property(key, value) for key, value in declaration.items()]
        return CompiledSchema(rules, flex=flex)

    def _compile_property(self, key: str, value: Any) -> PropertyRule:
        parsed = classify_declaration(key, value)
        if isinstance(parsed, NestedDeclaration):
            self._check_custom(key, parsed.custom)
            child = self._compile_nested(key, parsed.declaration)
            return PropertyRule(
                name=key,
                type=TypeSpec(TypeKind.NESTED, schema=child),
                required=parsed.required,
                custom=parsed.custom,
            )
        return self._compile_rule(key, parsed.options)

    def _compile_nested(self, key: str, declaration: Any) -> CompiledSchema:
        try:
            return self._compile_declaration(declaration, flex=False)
        except SchemaError as e:
            raise SchemaError(f"Could not parse property {key} as schema") from e

    def _compile_rule(self, key: str, options: Mapping) -> PropertyRule:
        type_spec = self._resolve_type(key, options["type"])

        regex = options.get("regex")
        enum_values = options.get("enum")
        if (regex is not None or enum_values is not None) and not type_spec.is_string:
            raise SchemaError(f"Invalid schema for {key}: regex and enum can be set only for strings")

        if regex is not None and not isinstance(regex, re.Pattern):
            raise SchemaError(f"Invalid schema for {key}: regex must be an instance of re.Pattern")

        if enum_values is not None:
            if isinstance(enum_values, (str, bytes)) or not isinstance(
                enum_values, (list, tuple, set, frozenset)
            ):
                raise SchemaError(f"Invalid schema for {key}: enum must be a list of values")
            enum_values = tuple(enum_values)

        custom = options.get("custom")
        self._check_custom(key, custom)

        for bound in ("min", "max"):
            value = options.get(bound)
            if value is not None and not is_number(value):
                raise SchemaError(f"Invalid schema for {key}: {bound} property must be a number")

        return PropertyRule(
            name=key,
            type=type_spec,
            required=bool(options.get("required", False)),
            custom=custom,
            regex=regex,
            min=options.get("min"),
            max=options.get("max"),
            enum_values=enum_values,
            default=options.get("default"),
            message=options.get("message"),
        )

    def _resolve_type(self, key: str, token: Any) -> TypeSpec:
        compiled = _compiled_of(token)
        if compiled is not None:
            return TypeSpec(TypeKind.NESTED, schema=compiled)

        if isinstance(token, (list, tuple)):
            if len(token) > 1:
                raise SchemaError(
                    f"Invalid schema for {key}. Array items must be declared of any type, "
                    f"or just one type: [str], [int]"
                )
            if not token:
                return TypeSpec(TypeKind.ARRAY)
            return TypeSpec(TypeKind.ARRAY, item=self._resolve_type(key, token[0]))

        if isinstance(token, Mapping):
            return TypeSpec(TypeKind.NESTED, schema=self._compile_nested(key, token))

        kind = resolve_type_tag(token)
        if kind is None:
            raise SchemaError(f"Unsupported type on {key}: {tag_name(token)}")
        return TypeSpec(kind)

    @staticmethod
    def _check_custom(key: str, custom: Any) -> None:
        if custom is not None and not callable(custom):
            raise SchemaError(
                f"Custom validator for {key} must be a function, was {category_of(custom)}"
            )


def compile_schema(
    declaration: Any,
    strict: bool = DEFAULT_STRICT,
    hooks: Optional[HookRegistry] = None,
) -> CompiledSchema:
    """Compile a schema declaration.

    Args:
        declaration: Mapping of property name to rule.
        strict: If False, undeclared keys are tolerated (and dropped from bodies).
        hooks: Registry notified before and after compilation. Defaults to DEFAULT_HOOKS.

    Returns:
        The compiled schema.

    Raises:
        SchemaError: If the declaration is malformed.

    Examples:
        >>> schema = compile_schema({"age": {"type": int, "min": 0, "max": 120}})
        >>> schema["age"].max
        120
    """
    return SchemaCompiler(hooks=hooks).compile(declaration, strict=strict)


__all__ = [
    "PlainRule",
    "NestedDeclaration",
    "classify_declaration",
    "SchemaCompiler",
    "compile_schema",
]
