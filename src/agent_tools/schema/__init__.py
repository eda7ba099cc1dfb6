"""Parameter schema types, union merging and argument validation."""

from .types import DEFAULT_DISCRIMINATOR, ParameterSchema, PlainSchema, UnionSchema
from .unifier import merge_union, unify_schema
from .validation import validate_arguments

__all__ = [
    "DEFAULT_DISCRIMINATOR",
    "ParameterSchema",
    "PlainSchema",
    "UnionSchema",
    "merge_union",
    "unify_schema",
    "validate_arguments",
]
