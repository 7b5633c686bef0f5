"""Tests for the Argon2 parameter model."""

import pytest
from argon2.low_level import ARGON2_VERSION, Type
from pydantic import ValidationError

from passhash.core.errors import UnknownAlgorithmError
from passhash.schemas.params import (
    Argon2Algorithm,
    Argon2Params,
    name_to_variant,
    variant_to_name,
    variant_to_type,
)


@pytest.mark.parametrize(
    ("variant", "name"),
    [
        (Argon2Algorithm.ARGON2ID, "argon2id"),
        (Argon2Algorithm.ARGON2I, "argon2i"),
        (0, "argon2id"),
        (1, "argon2i"),
    ],
)
def test_variant_to_name(variant: int, name: str) -> None:
    """Test variants map to their canonical names."""
    assert variant_to_name(variant) == name  # type: ignore[arg-type]


@pytest.mark.parametrize("variant", [2, -1, 255, True, False, 1.0, "1", None])
def test_variant_to_name_unknown(variant: int) -> None:
    """Test unknown variant values are rejected."""
    with pytest.raises(UnknownAlgorithmError):
        variant_to_name(variant)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("name", "variant"),
    [
        ("argon2id", Argon2Algorithm.ARGON2ID),
        ("argon2i", Argon2Algorithm.ARGON2I),
    ],
)
def test_name_to_variant(name: str, variant: Argon2Algorithm) -> None:
    """Test canonical names map to their variants."""
    assert name_to_variant(name) is variant


@pytest.mark.parametrize("name", ["_", "", "argon2d", "Argon2id", "ARGON2I", " argon2id"])
def test_name_to_variant_unknown(name: str) -> None:
    """Test any non-canonical name is rejected."""
    with pytest.raises(UnknownAlgorithmError):
        name_to_variant(name)


def test_variant_to_type() -> None:
    """Test variants map to the argon2-cffi type selectors."""
    assert variant_to_type(Argon2Algorithm.ARGON2ID) is Type.ID
    assert variant_to_type(Argon2Algorithm.ARGON2I) is Type.I

    with pytest.raises(UnknownAlgorithmError):
        variant_to_type(7)  # type: ignore[arg-type]

    with pytest.raises(UnknownAlgorithmError):
        variant_to_type(True)  # type: ignore[arg-type]


def test_params_defaults() -> None:
    """Test default parameters."""
    params = Argon2Params()

    assert params.algorithm is Argon2Algorithm.ARGON2ID
    assert params.salt_length == 16
    assert params.key_length == 32
    assert params.time_cost == 3
    assert params.memory_cost == 65536
    assert params.parallelism == 4
    assert params.version == ARGON2_VERSION


def test_params_immutable() -> None:
    """Test parameters cannot be modified after creation."""
    params = Argon2Params()

    with pytest.raises(ValidationError):
        params.time_cost = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"time_cost": 0},
        {"memory_cost": 0},
        {"parallelism": 0},
        {"salt_length": -1},
        {"key_length": -1},
        {"time_cost": 2**32},
        {"algorithm": 2},
        {"algorithm": True},
        {"algorithm": 1.0},
        {"algorithm": "1"},
        {"algorithm": "argon2i"},
    ],
)
def test_params_invalid(overrides: dict[str, object]) -> None:
    """Test out-of-range fields are rejected."""
    with pytest.raises(ValidationError):
        Argon2Params(**overrides)  # type: ignore[arg-type]


def test_params_zero_salt_length() -> None:
    """Test a zero salt length is a legal parameter."""
    assert Argon2Params(salt_length=0).salt_length == 0


def test_params_accepts_plain_int_variant() -> None:
    """Test plain integer variant values are still accepted."""
    assert Argon2Params(algorithm=1).algorithm is Argon2Algorithm.ARGON2I  # type: ignore[arg-type]
