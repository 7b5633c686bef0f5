"""Schemas package for Pydantic models."""

from passhash.schemas.params import (
    Argon2Algorithm,
    Argon2Params,
    name_to_variant,
    variant_to_name,
)

__all__ = [
    "Argon2Algorithm",
    "Argon2Params",
    "name_to_variant",
    "variant_to_name",
]
