# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Custom exception hierarchy for PhantomMask.

Provides specific exception types for different error categories,
enabling better error handling and clearer error messages.

None of these exceptions ever carry key material: messages and details
only describe lengths and roles, never the offending bytes or strings.
"""

from __future__ import annotations

from typing import Any


class PhantomMaskException(Exception):  # noqa: N818
    """Base exception for all PhantomMask errors.

    All PhantomMask-specific exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PhantomMaskException):
    """Exception for validation errors.

    Raised when:
    - A required field is missing or empty
    - An application identifier is empty
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConfigException(PhantomMaskException):
    """Exception for configuration errors.

    Raised when:
    - Environment variables hold invalid values
    - Service configuration is incomplete
    """

    def __init__(self, message: str, setting: str | None = None):
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)
        self.setting = setting


class CryptoError(PhantomMaskException):
    """Base exception for derivation, signing and encoding failures."""

    pass


class InvalidKeyLength(CryptoError):
    """A decoded key does not have the fixed length its role requires.

    Raised before any cryptographic computation touches the buffer.
    ``actual`` is None when the encoded input was rejected as too long
    without decoding it.
    """

    def __init__(self, role: str, expected: int, actual: int | None):
        got = actual if actual is not None else f"more than {expected}"
        message = f"{role[:1].upper()}{role[1:]} must be {expected} bytes, got {got}"
        super().__init__(message, {"role": role, "expected": expected, "actual": actual})
        self.role = role
        self.expected = expected
        self.actual = actual


class InvalidSignatureLength(CryptoError):
    """A decoded signature is not 64 bytes.

    Only surfaces from the decoding helpers; ``verify`` turns it into False.
    """

    def __init__(self, expected: int, actual: int | None):
        got = actual if actual is not None else f"more than {expected}"
        message = f"Signature must be {expected} bytes, got {got}"
        super().__init__(message, {"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual


class DecodeError(CryptoError):
    """Input string is not valid base58."""

    def __init__(self, message: str, value_length: int | None = None):
        details = {}
        if value_length is not None:
            details["value_length"] = value_length
        super().__init__(message, details)
        self.value_length = value_length


class UnknownCryptoError(CryptoError):
    """Unexpected failure inside the primitive library.

    Never raised in correct usage; its presence indicates a bug.
    """

    def __init__(self, operation: str, cause: BaseException | None = None):
        message = f"Unexpected failure during {operation}"
        if cause is not None:
            message = f"{message}: {type(cause).__name__}"
        super().__init__(message, {"operation": operation})
        self.operation = operation
        self.cause = cause
