# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Base58 encoding of keys and signatures.

Raw Bitcoin-alphabet base58: no checksum, no version byte (this is not
base58check). Every key and signature crosses the API boundary in this
form and is decoded back to a fixed-length byte sequence before use.
"""

from __future__ import annotations

from functools import lru_cache

import base58

from ..core.exceptions import DecodeError, InvalidKeyLength, InvalidSignatureLength, ValidationException

# =============================================================================
# CONSTANTS
# =============================================================================

BASE58_ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")
_ALPHABET_SET = frozenset(BASE58_ALPHABET)

PRIVATE_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64

# Inputs longer than the encoding of this many times the expected length
# are rejected without decoding
_DECODE_LIMIT_FACTOR = 4


# =============================================================================
# BASE58
# =============================================================================


def encode(data: bytes) -> str:
    """Encode bytes to a base58 string.

    Leading zero bytes are preserved as leading '1' characters, so the
    encoding round-trips exactly for fixed-length buffers.
    """
    return base58.b58encode(bytes(data)).decode("ascii")


def _check_alphabet(value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"base58 value must be str, not {type(value).__name__}")

    # Checked up front: the library silently strips trailing whitespace
    if not _ALPHABET_SET.issuperset(value):
        raise DecodeError("Invalid base58 encoding: contains characters outside the alphabet", len(value))


def _b58decode(value: str) -> bytes:
    try:
        return base58.b58decode(value)
    except ValueError as e:
        raise DecodeError(f"Invalid base58 encoding: {type(e).__name__}", len(value)) from e


def decode(value: str) -> bytes:
    """Decode a base58 string to bytes.

    Raises:
        DecodeError: If the string contains any character outside the
            base58 alphabet (whitespace included).
        TypeError: If value is not a str.
    """
    _check_alphabet(value)
    return _b58decode(value)


@lru_cache(maxsize=None)
def max_encoded_length(byte_length: int) -> int:
    """Longest base58 string that decodes to at most byte_length bytes."""
    return len(encode(b"\xff" * byte_length))


def _length_error(expected_len: int, actual: int | None, role: str) -> Exception:
    if role == "signature":
        return InvalidSignatureLength(expected_len, actual)
    return InvalidKeyLength(role, expected_len, actual)


def decode_fixed(value: str, expected_len: int, role: str = "key") -> bytes:
    """Decode a base58 string and require an exact byte length.

    Strings too long to decode to even four times expected_len bytes are
    rejected before decoding, since base58 decoding is quadratic in the
    input length. Shorter wrong-length inputs report their exact length.

    Args:
        value: base58 string.
        expected_len: Required length of the decoded bytes.
        role: Human-readable role used in the error message, e.g.
            "master private key". The role "signature" raises
            InvalidSignatureLength instead of InvalidKeyLength.

    Raises:
        DecodeError: If value is not valid base58.
        InvalidKeyLength: If a key decodes to the wrong length.
        InvalidSignatureLength: If a signature decodes to the wrong length.
    """
    _check_alphabet(value)
    if len(value) > max_encoded_length(expected_len * _DECODE_LIMIT_FACTOR):
        raise _length_error(expected_len, None, role)

    data = _b58decode(value)
    if len(data) != expected_len:
        raise _length_error(expected_len, len(data), role)
    return data


def decode_private_key(value: str, role: str = "private key") -> bytes:
    """Decode a 32-byte private key."""
    return decode_fixed(value, PRIVATE_KEY_LENGTH, role)


def decode_public_key(value: str) -> bytes:
    """Decode a 32-byte ed25519 public key."""
    return decode_fixed(value, PUBLIC_KEY_LENGTH, "public key")


def decode_signature(value: str) -> bytes:
    """Decode a 64-byte ed25519 signature."""
    return decode_fixed(value, SIGNATURE_LENGTH, "signature")


# =============================================================================
# TEXT
# =============================================================================


def utf8_bytes(text: str, field: str) -> bytes:
    """Encode an app id or message as UTF-8, exactly as given.

    Raises:
        ValidationException: If text holds lone surrogates (e.g. from
            undecodable command-line arguments) and has no UTF-8 form.
    """
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValidationException(f"{field} must be valid Unicode text", field=field) from e
