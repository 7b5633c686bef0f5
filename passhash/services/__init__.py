"""Service layer for hashing, encoding and verification."""

from passhash.services.encoding import decode, encode
from passhash.services.hasher import hash_argon2, hash_encoded, verify_argon2
from passhash.services.kdf import derive

__all__ = [
    "decode",
    "derive",
    "encode",
    "hash_argon2",
    "hash_encoded",
    "verify_argon2",
]
