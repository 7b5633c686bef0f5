"""Canonical string encoding of Argon2 hashes.

Example:
```python
encoded = encode(key, salt, params)
assert encoded == "$argon2id$v=19$m=65536,t=3,p=4$c29tZXNhbHQ$aGFzaA"

key, salt, params = decode(encoded)
assert params.salt_length == len(salt)
assert params.key_length == len(key)
```

Critical Notes:
- Format is fixed: $alg$v=V$m=M,t=T,p=P$salt$hash
- Salt and hash use unpadded standard base64
- Salt/key lengths come from the decoded bytes
- Decoding does not check the version
"""

import base64
import binascii
import re
from typing import Final

from pydantic import ValidationError

from passhash.core.errors import MalformedEncodingError
from passhash.schemas.params import Argon2Params, name_to_variant, variant_to_name

# Constants
DELIMITER: Final[str] = "$"
SEGMENT_COUNT: Final[int] = 6
ENCODING_FORMAT: Final[str] = "${alg}$v={version}$m={memory},t={time},p={parallelism}${salt}${key}"

VERSION_PATTERN: Final[re.Pattern[str]] = re.compile(r"v=([0-9]{1,10})")
COST_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"m=([0-9]{1,10}),t=([0-9]{1,10}),p=([0-9]{1,10})"
)
RAW_B64_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9+/]*")


def b64_encode_raw(data: bytes) -> str:
    """Encode bytes as standard base64 without padding."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64_decode_raw(data: str) -> bytes:
    """Decode standard base64 without padding.

    Raises:
        MalformedEncodingError: If data is not valid unpadded base64
    """
    if not RAW_B64_PATTERN.fullmatch(data) or len(data) % 4 == 1:
        raise MalformedEncodingError("Invalid base64 segment", details=data)

    try:
        return base64.b64decode(data + "=" * (-len(data) % 4), validate=True)
    except binascii.Error as e:
        raise MalformedEncodingError("Invalid base64 segment", details=data) from e


def encode(key: bytes, salt: bytes, params: Argon2Params) -> str:
    """Serialize a derived key, its salt and parameters.

    Raises:
        UnknownAlgorithmError: If params name an unsupported variant
    """
    return ENCODING_FORMAT.format(
        alg=variant_to_name(params.algorithm),
        version=params.version,
        memory=params.memory_cost,
        time=params.time_cost,
        parallelism=params.parallelism,
        salt=b64_encode_raw(salt),
        key=b64_encode_raw(key),
    )


def decode(encoded: str) -> tuple[bytes, bytes, Argon2Params]:
    """Parse an encoded hash into its key, salt and parameters.

    Args:
        encoded: Encoded hash string

    Returns:
        Tuple of (key, salt, params)

    Raises:
        MalformedEncodingError: If the string violates the format
        UnknownAlgorithmError: If the algorithm name is not supported
    """
    segments = encoded.split(DELIMITER)
    if len(segments) != SEGMENT_COUNT:
        raise MalformedEncodingError(
            "Wrong encoding format",
            details=f"expected {SEGMENT_COUNT} segments, got {len(segments)}",
        )

    if segments[0]:
        raise MalformedEncodingError(
            "Wrong encoding format",
            details=f"expected leading {DELIMITER!r}, got {segments[0]!r}",
        )

    _, alg_name, version_part, cost_part, salt_part, key_part = segments

    algorithm = name_to_variant(alg_name)

    version_match = VERSION_PATTERN.fullmatch(version_part)
    if version_match is None:
        raise MalformedEncodingError("Invalid version segment", details=version_part)

    cost_match = COST_PATTERN.fullmatch(cost_part)
    if cost_match is None:
        raise MalformedEncodingError("Invalid parameter segment", details=cost_part)

    salt = b64_decode_raw(salt_part)
    key = b64_decode_raw(key_part)

    memory, time, parallelism = (int(value) for value in cost_match.groups())
    try:
        params = Argon2Params(
            algorithm=algorithm,
            salt_length=len(salt),
            key_length=len(key),
            time_cost=time,
            memory_cost=memory,
            parallelism=parallelism,
            version=int(version_match.group(1)),
        )
    except ValidationError as e:
        raise MalformedEncodingError("Parameter out of range", details=str(e)) from e

    return key, salt, params
