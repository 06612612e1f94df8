"""Validation configuration constants and declaration loading.

This module centralizes engine-wide constants and the mapping used to read
schema declarations from YAML (or JSON) files.

YAML type names:
    - "string": str
    - "number": float, "integer": int (both checked as numbers)
    - "boolean": bool
    - "object": dict
    - "function": callable
    - "date": datetime.date
    - "array": list (items of any type)
    - "uuid/v1", "uuid/v4": kept as keywords
"""

from __future__ import annotations

import datetime
import re
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from schemy.core.types import SUPPORTED_KEYWORDS
from schemy.exceptions import SchemaError

# ============================================================================
# ENGINE CONSTANTS
# ============================================================================

# Schemas reject undeclared keys unless compiled with strict=False
DEFAULT_STRICT = True

# Engine-level error recorded when the validated value is not a mapping
ENGINE_DATA_ERROR = "Data passed to validate is incorrect. It must be an object."

# Keys lifted out of an implicit nested declaration instead of being compiled as properties
NESTED_META_KEYS = frozenset({"required", "custom"})


# ============================================================================
# YAML TYPE NAMES
# ============================================================================

TYPE_NAMES: Dict[str, Any] = {
    "string": str,
    "number": float,
    "integer": int,
    "boolean": bool,
    "object": dict,
    "function": callable,
    "date": datetime.date,
    "array": list,
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_type_tag(name: str, key: str) -> Any:
    """Get the Python type tag for a YAML type name.

    Args:
        name: Type name as written in the YAML file (e.g., "string").
        key: Property the type is declared on, for error reporting.

    Returns:
        A Python type tag, or the keyword string itself for uuid types.

    Raises:
        SchemaError: If the type name is unknown.

    Examples:
        >>> get_type_tag("string", "title")
        <class 'str'>
        >>> get_type_tag("uuid/v4", "id")
        'uuid/v4'
    """
    if name in SUPPORTED_KEYWORDS:
        return name
    if name not in TYPE_NAMES:
        raise SchemaError(f"Unsupported type on {key}: {name}")
    return TYPE_NAMES[name]


def _convert_type(value: Any, key: str) -> Any:
    if isinstance(value, str):
        return get_type_tag(value, key)
    if isinstance(value, list):
        return [_convert_type(item, key) for item in value]
    if isinstance(value, Mapping):
        return _convert_declaration(value)
    return value


def _convert_rule(key: str, rule: Mapping[str, Any]) -> Dict[str, Any]:
    converted = dict(rule)
    converted["type"] = _convert_type(rule["type"], key)
    regex = rule.get("regex")
    if isinstance(regex, str):
        try:
            converted["regex"] = re.compile(regex)
        except re.error as e:
            raise SchemaError(f"Invalid schema for {key}: bad regex {regex!r}: {e}") from e
    return converted


def _convert_declaration(declaration: Mapping[str, Any]) -> Dict[str, Any]:
    converted: Dict[str, Any] = {}
    for key, value in declaration.items():
        key = str(key)
        if isinstance(value, Mapping) and "type" in value:
            converted[key] = _convert_rule(key, value)
        elif isinstance(value, Mapping):
            nested = {k: v for k, v in value.items() if k not in NESTED_META_KEYS}
            converted[key] = _convert_declaration(nested)
            for meta in NESTED_META_KEYS:
                if meta in value:
                    converted[key][meta] = value[meta]
        else:
            converted[key] = _convert_type(value, key)
    return converted


def parse_declaration(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Turn a plain (YAML/JSON shaped) declaration into a compilable one.

    Type names become Python type tags and ``regex`` strings become compiled
    patterns. Everything else is passed through for the compiler to check.

    Raises:
        SchemaError: If a type name is unknown or a regex does not compile.
    """
    if not isinstance(raw, Mapping):
        raise SchemaError(f"Schema declaration must be a mapping, got {type(raw).__name__}")
    return _convert_declaration(raw)


def load_declaration(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a schema declaration from a YAML or JSON file.

    Args:
        path: File containing a mapping of property name to rule.

    Returns:
        Declaration ready to be passed to ``compile_schema``.

    Raises:
        FileNotFoundError: If the file does not exist.
        SchemaError: If the file content is not a valid declaration.
        yaml.YAMLError: If the file is not valid YAML.

    Examples:
        >>> declaration = load_declaration(Path("schemas/user.yaml"))
        >>> schema = compile_schema(declaration)
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return parse_declaration(raw)


def load_data(path: Union[str, Path]) -> Any:
    """Load a data document (YAML or JSON) to validate."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


__all__: List[str] = [
    "DEFAULT_STRICT",
    "ENGINE_DATA_ERROR",
    "NESTED_META_KEYS",
    "TYPE_NAMES",
    "get_type_tag",
    "parse_declaration",
    "load_declaration",
    "load_data",
]
