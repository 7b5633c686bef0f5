"""Argon2 algorithm variants and cost parameters.

Example:
```python
params = Argon2Params(
    algorithm=Argon2Algorithm.ARGON2ID,
    salt_length=16,
    key_length=32,
    time_cost=3,
    memory_cost=65536,  # KiB
    parallelism=4,
)
assert variant_to_name(params.algorithm) == "argon2id"
assert name_to_variant("argon2i") is Argon2Algorithm.ARGON2I
```

Critical Notes:
- Only argon2id and argon2i are supported
- Names are matched case-sensitively
- Params are immutable once built
- Cross-field limits are checked when deriving
"""

from enum import IntEnum
from typing import Any, Final, assert_never

from argon2.low_level import ARGON2_VERSION, Type
from pydantic import BaseModel, ConfigDict, Field, field_validator

from passhash.core.errors import UnknownAlgorithmError

# Constants
UINT32_MAX: Final[int] = 2**32 - 1
ARGON2ID_NAME: Final[str] = "argon2id"
ARGON2I_NAME: Final[str] = "argon2i"

DEFAULT_SALT_LENGTH: Final[int] = 16
DEFAULT_KEY_LENGTH: Final[int] = 32
DEFAULT_TIME_COST: Final[int] = 3
DEFAULT_MEMORY_COST: Final[int] = 65536
DEFAULT_PARALLELISM: Final[int] = 4


class Argon2Algorithm(IntEnum):
    """Supported members of the Argon2 family."""

    ARGON2ID = 0
    ARGON2I = 1


def _as_variant(variant: Any) -> Argon2Algorithm:
    if isinstance(variant, bool) or not isinstance(variant, int):
        raise UnknownAlgorithmError(
            "Unknown/unsupported hashing algorithm", details=variant
        )

    try:
        return Argon2Algorithm(variant)
    except ValueError as e:
        raise UnknownAlgorithmError(
            "Unknown/unsupported hashing algorithm", details=variant
        ) from e


def variant_to_name(variant: Argon2Algorithm) -> str:
    """Return the canonical lowercase name of a variant."""
    match _as_variant(variant):
        case Argon2Algorithm.ARGON2ID:
            return ARGON2ID_NAME
        case Argon2Algorithm.ARGON2I:
            return ARGON2I_NAME
        case unreachable:
            assert_never(unreachable)


def name_to_variant(name: str) -> Argon2Algorithm:
    """Return the variant for a canonical name, matched exactly."""
    match name:
        case "argon2id":
            return Argon2Algorithm.ARGON2ID
        case "argon2i":
            return Argon2Algorithm.ARGON2I
        case _:
            raise UnknownAlgorithmError(
                "Unknown/unsupported hashing algorithm", details=name
            )


def variant_to_type(variant: Argon2Algorithm) -> Type:
    """Return the argon2-cffi type selector for a variant."""
    match _as_variant(variant):
        case Argon2Algorithm.ARGON2ID:
            return Type.ID
        case Argon2Algorithm.ARGON2I:
            return Type.I
        case unreachable:
            assert_never(unreachable)


class Argon2Params(BaseModel):
    """Argon2 variant with its cost and shape parameters.

    Fields:
        algorithm: Argon2 variant
        salt_length: Salt size in bytes
        key_length: Derived key size in bytes
        time_cost: Number of iterations
        memory_cost: Memory size in KiB
        parallelism: Number of lanes
        version: Argon2 version the hash was produced under
    """

    model_config = ConfigDict(frozen=True)

    algorithm: Argon2Algorithm = Field(default=Argon2Algorithm.ARGON2ID)
    salt_length: int = Field(default=DEFAULT_SALT_LENGTH, ge=0, le=UINT32_MAX)
    key_length: int = Field(default=DEFAULT_KEY_LENGTH, ge=0, le=UINT32_MAX)
    time_cost: int = Field(default=DEFAULT_TIME_COST, ge=1, le=UINT32_MAX)
    memory_cost: int = Field(default=DEFAULT_MEMORY_COST, ge=1, le=UINT32_MAX)
    parallelism: int = Field(default=DEFAULT_PARALLELISM, ge=1, le=UINT32_MAX)
    version: int = Field(default=ARGON2_VERSION, ge=1, le=UINT32_MAX)

    @field_validator("algorithm", mode="before")
    @classmethod
    def validate_algorithm(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"Unsupported Argon2 algorithm: {v!r}")
        return v
