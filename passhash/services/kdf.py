"""Argon2 key derivation on top of argon2-cffi's low-level bindings."""

import logging
from typing import Final

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, hash_secret_raw

from passhash.core.errors import DerivationError, VersionMismatchError
from passhash.schemas.params import Argon2Params, variant_to_name, variant_to_type

# Initialize logger
logger = logging.getLogger(__name__)

# Constants
ENCODING: Final[str] = "utf-8"
MIN_MEMORY_PER_LANE: Final[int] = 8


def derive(password: bytes | str, salt: bytes, params: Argon2Params) -> bytes:
    """Derive a key of ``params.key_length`` bytes from a password and salt.

    Identical inputs always produce an identical key. The salt is used as
    given, this function never generates one.

    Args:
        password: Password bytes, or text encoded as UTF-8
        salt: Salt bytes
        params: Variant and cost parameters

    Returns:
        Derived key bytes

    Raises:
        UnknownAlgorithmError: If params name an unsupported variant
        VersionMismatchError: If params target another Argon2 version
        DerivationError: If the primitive rejects the parameters or input
    """
    secret = password.encode(ENCODING) if isinstance(password, str) else password
    argon2_type = variant_to_type(params.algorithm)

    if params.version != ARGON2_VERSION:
        raise VersionMismatchError(
            "Algorithm version mismatch",
            details={"expected": ARGON2_VERSION, "actual": params.version},
        )

    if params.memory_cost < MIN_MEMORY_PER_LANE * params.parallelism:
        raise DerivationError(
            f"Memory cost must be at least {MIN_MEMORY_PER_LANE} KiB per lane",
            details={
                "memory_cost": params.memory_cost,
                "parallelism": params.parallelism,
            },
        )

    logger.debug(
        "Deriving %s key: m=%d, t=%d, p=%d, len=%d",
        variant_to_name(params.algorithm),
        params.memory_cost,
        params.time_cost,
        params.parallelism,
        params.key_length,
    )

    try:
        return hash_secret_raw(
            secret=secret,
            salt=salt,
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.key_length,
            type=argon2_type,
            version=ARGON2_VERSION,
        )
    except HashingError as e:
        raise DerivationError("Key derivation failed", details=str(e)) from e
