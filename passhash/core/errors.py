"""Error kinds raised by the hashing and verification pipeline."""

from typing import Any


class AppError(Exception):
    """Base error class for application errors."""

    def __init__(self, message: str, details: Any = None) -> None:
        """Initialize error with message and optional details.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details


class PasswordHashError(AppError):
    """Base error class for password hashing errors."""


class UnknownAlgorithmError(PasswordHashError):
    """Error raised when an algorithm name or value is not supported."""


class MalformedEncodingError(PasswordHashError):
    """Error raised when an encoded hash does not follow the canonical format."""


class VersionMismatchError(PasswordHashError):
    """Error raised when a hash was produced by another Argon2 version."""


class RandomSourceError(PasswordHashError):
    """Error raised when the secure random source is unavailable."""


class DerivationError(PasswordHashError):
    """Error raised when the key derivation rejects its input."""


class PasswordTooLongError(PasswordHashError):
    """Error raised when a password exceeds the configured byte limit."""
