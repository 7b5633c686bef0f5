"""Library configuration and settings."""

from functools import lru_cache
from typing import Final, Self

from pydantic import Field, PositiveInt, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passhash.core.errors import UnknownAlgorithmError
from passhash.schemas.params import (
    ARGON2ID_NAME,
    DEFAULT_KEY_LENGTH,
    DEFAULT_MEMORY_COST,
    DEFAULT_PARALLELISM,
    DEFAULT_SALT_LENGTH,
    DEFAULT_TIME_COST,
    name_to_variant,
)

# libargon2 input minimums
MIN_SALT_LENGTH: Final[int] = 8
MIN_KEY_LENGTH: Final[int] = 4


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        env_ignore_empty=True,
        validate_default=True,
    )

    # Argon2 settings
    ARGON2_ALGORITHM: str = ARGON2ID_NAME
    ARGON2_TIME_COST: PositiveInt = DEFAULT_TIME_COST
    ARGON2_MEMORY_COST: PositiveInt = DEFAULT_MEMORY_COST
    ARGON2_PARALLELISM: PositiveInt = DEFAULT_PARALLELISM
    ARGON2_HASH_LENGTH: int = Field(default=DEFAULT_KEY_LENGTH, ge=MIN_KEY_LENGTH)
    ARGON2_SALT_LENGTH: int = Field(default=DEFAULT_SALT_LENGTH, ge=MIN_SALT_LENGTH)

    # Password settings
    MAX_PASSWORD_BYTES: PositiveInt = 1024

    @field_validator("ARGON2_ALGORITHM")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        try:
            name_to_variant(v)
        except UnknownAlgorithmError as e:
            raise ValueError(f"Unsupported Argon2 algorithm: {v}") from e
        return v

    @model_validator(mode="after")
    def validate_memory_cost(self) -> Self:
        if self.ARGON2_MEMORY_COST < 8 * self.ARGON2_PARALLELISM:
            raise ValueError("ARGON2_MEMORY_COST must be at least 8 KiB per lane")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
