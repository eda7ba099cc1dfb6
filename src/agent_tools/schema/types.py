"""
Raw parameter schema types.

Tools declare their parameters either as a single object schema
(:class:`PlainSchema`) or as an explicit list of object variants selected by
a discriminator property (:class:`UnionSchema`). Property sub-schemas are
plain JSON-schema dicts.
"""

import copy
from dataclasses import dataclass, field
from typing import Any

DEFAULT_DISCRIMINATOR = "action"


@dataclass(frozen=True)
class PlainSchema:
    """
    Object parameter schema.

    Attributes:
        properties: Property name -> JSON-schema dict.
        required: Names of required properties, in declaration order.
    """

    properties: dict[str, dict[str, Any]] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """
        Normalize and validate the schema.

        Raises:
            ValueError: If a required name is not a declared property.
        """
        object.__setattr__(self, "required", tuple(self.required))
        missing = [name for name in self.required if name not in self.properties]
        if missing:
            raise ValueError(f"Required properties not declared: {missing}")

    def to_json_schema(self) -> dict[str, Any]:
        """
        Convert to a JSON-schema object.

        Returns:
            A fresh dict; mutating it never affects this schema.
        """
        return {
            "type": "object",
            "properties": copy.deepcopy(self.properties),
            "required": list(self.required),
        }


@dataclass(frozen=True)
class UnionSchema:
    """
    Discriminated union of object schemas.

    Attributes:
        variants: Ordered object variants (at least one).
        discriminator: Property whose ``const``/``enum`` selects the variant.
    """

    variants: tuple[PlainSchema, ...]
    discriminator: str = DEFAULT_DISCRIMINATOR

    def __post_init__(self) -> None:
        """
        Normalize and validate the union.

        Raises:
            ValueError: If no variants are given.
        """
        object.__setattr__(self, "variants", tuple(self.variants))
        if not self.variants:
            raise ValueError("UnionSchema requires at least one variant")


ParameterSchema = PlainSchema | UnionSchema
