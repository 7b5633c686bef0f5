"""Argon2 password hashing with a portable encoded format."""

from passhash.core.errors import (
    DerivationError,
    MalformedEncodingError,
    PasswordHashError,
    PasswordTooLongError,
    RandomSourceError,
    UnknownAlgorithmError,
    VersionMismatchError,
)
from passhash.core.salt import generate_salt
from passhash.core.security import get_password_hash, needs_rehash, verify_password
from passhash.schemas import Argon2Algorithm, Argon2Params, name_to_variant, variant_to_name
from passhash.services import (
    decode,
    derive,
    encode,
    hash_argon2,
    hash_encoded,
    verify_argon2,
)

__all__ = [
    # Params
    "Argon2Algorithm",
    "Argon2Params",
    "name_to_variant",
    "variant_to_name",
    # Hashing
    "generate_salt",
    "derive",
    "encode",
    "decode",
    "hash_argon2",
    "hash_encoded",
    "verify_argon2",
    # Configured defaults
    "get_password_hash",
    "verify_password",
    "needs_rehash",
    # Errors
    "PasswordHashError",
    "UnknownAlgorithmError",
    "MalformedEncodingError",
    "VersionMismatchError",
    "RandomSourceError",
    "DerivationError",
    "PasswordTooLongError",
]
