"""
Schema unifier.

Turns a tool's raw parameter schema into the schema published to model
providers. Many providers only introspect top-level ``properties`` and
``required``, so discriminated unions get a flattened view synthesized next
to the original ``anyOf`` list. The ``anyOf`` list stays authoritative for
validating a concrete call; the flattened view is for display only.
"""

import copy
from typing import Any

from ..exceptions import SchemaMergeError
from .types import ParameterSchema, PlainSchema, UnionSchema


def unify_schema(
    schema: ParameterSchema,
    tool_name: str | None = None,
) -> dict[str, Any]:
    """
    Convert a raw parameter schema into its published JSON schema.

    - Plain schemas pass through.
    - Single-variant unions are unwrapped to that variant.
    - Multi-variant unions are merged (see :func:`merge_union`).

    Args:
        schema: Raw parameter schema.
        tool_name: Tool name for error messages.

    Returns:
        Published JSON schema (a fresh dict).

    Raises:
        SchemaMergeError: If a multi-variant union is malformed.
    """
    if isinstance(schema, PlainSchema):
        return schema.to_json_schema()
    if len(schema.variants) == 1:
        return schema.variants[0].to_json_schema()
    return merge_union(schema, tool_name)


def merge_union(
    schema: UnionSchema,
    tool_name: str | None = None,
) -> dict[str, Any]:
    """
    Merge a discriminated union into one display schema.

    Args:
        schema: Union with two or more variants.
        tool_name: Tool name for error messages.

    Returns:
        ``{"type": "object", "anyOf": [...], "properties": {...},
        "required": [...]}``.

    Raises:
        SchemaMergeError: If a variant lacks the discriminator or its values
            are not all strings.
    """
    key = schema.discriminator
    variants = schema.variants

    properties: dict[str, Any] = {
        key: _merge_discriminator(_discriminator_values(schema, tool_name)),
    }

    for name in _property_order(variants):
        if name == key:
            continue
        distinct: list[dict[str, Any]] = []
        for variant in variants:
            sub_schema = variant.properties.get(name)
            if sub_schema is not None and sub_schema not in distinct:
                distinct.append(sub_schema)
        if len(distinct) == 1:
            properties[name] = copy.deepcopy(distinct[0])
        else:
            properties[name] = {"anyOf": copy.deepcopy(distinct)}

    shared = set(variants[0].required)
    for variant in variants[1:]:
        shared &= set(variant.required)
    shared.discard(key)
    required = [key] + [name for name in variants[0].required if name in shared]

    return {
        "type": "object",
        "anyOf": [variant.to_json_schema() for variant in variants],
        "properties": properties,
        "required": required,
    }


def _property_order(variants: tuple[PlainSchema, ...]) -> list[str]:
    seen: dict[str, None] = {}
    for variant in variants:
        for name in variant.properties:
            seen.setdefault(name, None)
    return list(seen)


def _discriminator_values(
    schema: UnionSchema,
    tool_name: str | None,
) -> list[str]:
    key = schema.discriminator
    values: list[str] = []

    for index, variant in enumerate(schema.variants):
        prop = variant.properties.get(key)
        if prop is None:
            raise SchemaMergeError(
                f"variant {index} has no '{key}' property", tool_name
            )

        if "const" in prop:
            raw = [prop["const"]]
        elif "enum" in prop:
            raw = list(prop["enum"])
        else:
            raise SchemaMergeError(
                f"variant {index} declares '{key}' without const or enum",
                tool_name,
            )

        if not raw or not all(isinstance(value, str) for value in raw):
            raise SchemaMergeError(
                f"variant {index} has non-string '{key}' values: {raw!r}",
                tool_name,
            )
        values.extend(raw)

    return values


def _merge_discriminator(values: list[str]) -> dict[str, Any]:
    distinct = sorted(set(values))
    if len(distinct) == 1:
        return {"type": "string", "const": distinct[0]}
    return {"type": "string", "enum": distinct}
