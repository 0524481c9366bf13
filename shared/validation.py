"""Structural argument validation against SchemaNode descriptors.

Checks the constraint shapes the tool manifests declare: required fields,
enums, numeric bounds, ``oneOf`` type alternatives and defaults. Anything
else is accepted as-is.
"""

from __future__ import annotations

from typing import Any

from shared.errors import ArgumentValidationError
from shared.schemas.tools import SchemaNode


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _matches_type(value: Any, node: SchemaNode) -> bool:
    """Shallow JSON type check, used only for ``oneOf`` alternatives."""
    expected = node.type
    if expected is None:
        return True
    if expected == "string":
        return isinstance(value, str)
    if expected == "integer":
        return _is_number(value) and float(value).is_integer()
    if expected == "number":
        return _is_number(value)
    if expected == "boolean":
        return isinstance(value, bool)
    if expected == "object":
        return isinstance(value, dict)
    if expected == "array":
        if not isinstance(value, list):
            return False
        if node.items is None:
            return True
        return all(_matches_type(item, node.items) for item in value)
    return True


def _describe_alternatives(alternatives: list[SchemaNode]) -> str:
    names = []
    for alt in alternatives:
        if alt.type == "array" and alt.items is not None and alt.items.type:
            names.append(f"array of {alt.items.type}")
        else:
            names.append(alt.type or "any")
    return " or ".join(names)


def _check_field(name: str, value: Any, node: SchemaNode) -> None:
    if node.enum is not None and value not in node.enum:
        allowed = ", ".join(str(v) for v in node.enum)
        raise ArgumentValidationError(name, f"must be one of: {allowed} (got {value!r})")

    if _is_number(value):
        if node.minimum is not None and value < node.minimum:
            raise ArgumentValidationError(name, f"must be >= {node.minimum:g} (got {value})")
        if node.maximum is not None and value > node.maximum:
            raise ArgumentValidationError(name, f"must be <= {node.maximum:g} (got {value})")

    if node.one_of and not any(_matches_type(value, alt) for alt in node.one_of):
        raise ArgumentValidationError(
            name, f"must be {_describe_alternatives(node.one_of)}"
        )


def validate(schema: SchemaNode, arguments: dict[str, Any] | None) -> dict[str, Any]:
    """Check ``arguments`` against ``schema`` and return a filled copy.

    The caller's dict is never modified; absent fields with a declared
    default are present in the returned copy.

    Raises:
        ArgumentValidationError: on the first violated constraint.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ArgumentValidationError("arguments", "must be an object")

    for name in schema.required or []:
        if arguments.get(name) is None:
            raise ArgumentValidationError(name, "is required")

    properties = schema.properties or {}
    resolved = dict(arguments)
    for name, node in properties.items():
        if name in arguments and arguments[name] is not None:
            _check_field(name, arguments[name], node)
        elif node.has_default:
            resolved[name] = node.default
    return resolved
