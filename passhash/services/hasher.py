"""Argon2 password hashing and verification.

Example:
```python
params = Argon2Params(time_cost=3, memory_cost=12288, parallelism=4)

# Hash and store
encoded = hash_encoded("HelloWorld", params)

# Verify later
assert verify_argon2("HelloWorld", encoded) is True
assert verify_argon2("wrong", encoded) is False
```

Critical Notes:
- A fresh salt is generated for every hash
- Keys are compared in constant time
- False means wrong password, nothing else
- Corrupt or incompatible hashes raise
"""

import hmac
import logging

from argon2.low_level import ARGON2_VERSION

from passhash.core.errors import VersionMismatchError
from passhash.core.salt import generate_salt
from passhash.schemas.params import Argon2Params
from passhash.services.encoding import decode, encode
from passhash.services.kdf import derive

# Initialize logger
logger = logging.getLogger(__name__)


def hash_argon2(password: bytes | str, params: Argon2Params) -> tuple[bytes, bytes]:
    """Hash a password with a freshly generated salt.

    Args:
        password: Password to hash
        params: Variant and cost parameters

    Returns:
        Tuple of (key, salt)

    Raises:
        RandomSourceError: If no salt could be generated
        UnknownAlgorithmError: If params name an unsupported variant
        VersionMismatchError: If params target another Argon2 version
        DerivationError: If the primitive rejects the parameters
    """
    salt = generate_salt(params.salt_length)
    key = derive(password, salt, params)
    return key, salt


def hash_encoded(password: bytes | str, params: Argon2Params) -> str:
    """Hash a password and return its encoded form."""
    key, salt = hash_argon2(password, params)
    return encode(key, salt, params)


def verify_argon2(password: bytes | str, encoded: str) -> bool:
    """Verify a password against an encoded Argon2 hash.

    Args:
        password: Candidate password
        encoded: Stored encoded hash

    Returns:
        True if the password matches, False otherwise

    Raises:
        MalformedEncodingError: If the stored hash is malformed
        UnknownAlgorithmError: If the stored algorithm is not supported
        VersionMismatchError: If the stored hash uses another Argon2 version
        DerivationError: If the stored parameters cannot be computed
    """
    expected, salt, params = decode(encoded)

    if params.version != ARGON2_VERSION:
        raise VersionMismatchError(
            "Algorithm version mismatch",
            details={"expected": ARGON2_VERSION, "actual": params.version},
        )

    key = derive(password, salt, params)

    if hmac.compare_digest(key, expected):
        return True

    logger.debug("Password verification failed: key mismatch")
    return False
