"""Cryptographically secure salt generation."""

import secrets

from passhash.core.errors import RandomSourceError


def generate_salt(length: int) -> bytes:
    """Generate a random salt of exactly ``length`` bytes.

    Args:
        length: Salt size in bytes, zero yields an empty salt

    Returns:
        Random bytes from the operating system CSPRNG

    Raises:
        ValueError: If length is negative
        RandomSourceError: If the entropy source is unavailable
    """
    if length < 0:
        raise ValueError(f"Salt length must be non-negative, got {length}")

    try:
        return secrets.token_bytes(length)
    except OSError as e:
        raise RandomSourceError(
            "Secure random source unavailable", details=str(e)
        ) from e
