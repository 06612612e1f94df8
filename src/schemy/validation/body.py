"""Body projection: derive a clean output object from validated data."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .models import CompiledSchema


def project_body(
    data: Mapping[str, Any],
    schema: CompiledSchema,
    include_all: bool = False,
    order_body: bool = True,
) -> Dict[str, Any]:
    """Build an output object from validated data.

    Works on a shallow copy of ``data``; the input is never modified.

    Args:
        data: Data object observed during the last validation run.
        schema: Schema the data was validated against.
        include_all: Keep undeclared keys of a non-strict schema. Strict schemas
            never drop keys here, since undeclared keys already failed validation.
        order_body: Put declared keys first, in declaration order, followed by the
            remaining keys in their original order.

    Returns:
        The projected body as a new dict.

    Examples:
        >>> schema = compile_schema({"a": str, "b": str}, strict=False)
        >>> project_body({"x": 1, "b": "2", "a": "1"}, schema)
        {'a': '1', 'b': '2'}
        >>> project_body({"x": 1, "b": "2", "a": "1"}, schema, include_all=True)
        {'a': '1', 'b': '2', 'x': 1}
    """
    output = dict(data)

    if schema.flex and not include_all:
        output = {key: value for key, value in output.items() if schema.is_declared(key)}

    if not order_body:
        return output

    ordered: Dict[str, Any] = {}
    for key in schema:
        if key in output:
            ordered[key] = output.pop(key)
    ordered.update(output)
    return ordered


__all__ = ["project_body"]
