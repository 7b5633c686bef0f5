"""Test configuration and fixtures."""

import pytest

from passhash.schemas.params import Argon2Algorithm, Argon2Params


@pytest.fixture(scope="function")
def fast_params() -> Argon2Params:
    """Cheap argon2id parameters for quick tests."""
    return Argon2Params(
        algorithm=Argon2Algorithm.ARGON2ID,
        salt_length=16,
        key_length=32,
        time_cost=1,
        memory_cost=256,
        parallelism=2,
    )


@pytest.fixture(scope="function")
def fast_params_i(fast_params: Argon2Params) -> Argon2Params:
    """Cheap argon2i parameters for quick tests."""
    return fast_params.model_copy(update={"algorithm": Argon2Algorithm.ARGON2I})


@pytest.fixture(scope="function")
def salt() -> bytes:
    """Fixed salt for deterministic derivations."""
    return bytes(range(16))
