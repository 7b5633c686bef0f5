"""Password hashing and verification with configured Argon2 defaults."""

from typing import Final

from passhash.core.config import settings
from passhash.core.errors import PasswordTooLongError
from passhash.schemas.params import Argon2Params, name_to_variant
from passhash.services.encoding import decode
from passhash.services.hasher import hash_encoded, verify_argon2

ENCODING: Final[str] = "utf-8"


def default_params() -> Argon2Params:
    """Build hashing parameters from settings."""
    return Argon2Params(
        algorithm=name_to_variant(settings.ARGON2_ALGORITHM),
        salt_length=settings.ARGON2_SALT_LENGTH,
        key_length=settings.ARGON2_HASH_LENGTH,
        time_cost=settings.ARGON2_TIME_COST,
        memory_cost=settings.ARGON2_MEMORY_COST,
        parallelism=settings.ARGON2_PARALLELISM,
    )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash using constant-time comparison."""
    return verify_argon2(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate a secure Argon2 hash with salt."""
    if len(password.encode(ENCODING)) > settings.MAX_PASSWORD_BYTES:
        raise PasswordTooLongError(
            f"Password exceeds {settings.MAX_PASSWORD_BYTES} bytes when encoded"
        )

    return hash_encoded(password, default_params())


def needs_rehash(hashed_password: str) -> bool:
    """Check whether a hash was produced with other than the current defaults.

    Raises:
        MalformedEncodingError: If the hash is malformed
        UnknownAlgorithmError: If the stored algorithm is not supported
    """
    _, _, params = decode(hashed_password)
    return params != default_params()
