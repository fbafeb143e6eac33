# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Configured cryptographic primitives: ed25519 and HMAC-SHA512.

The ed25519 implementation is the ``cryptography`` package's OpenSSL
binding, which is linked against one fixed SHA-512 implementation. Nothing
here mutates shared state: there is no hash hook to install and every
function is a pure function of its arguments.

All functions operate on raw bytes. Length validation belongs to the
callers (derivation, signing, encoding); these helpers assume well-sized
buffers and only guard against the library rejecting them.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..core.exceptions import UnknownCryptoError

SEED_LENGTH = 32
HMAC_SHA512_LENGTH = 64

# Field prime of edwards25519
_P = 2**255 - 19

# y-coordinate of an order-8 point; its negation is the other one
_ORDER8_Y = int.from_bytes(
    bytes.fromhex("26e8958fc2b227b045c3f489f2ef98f0d5dfac05d3c63339b13802886d53fc05"),
    "little",
)

# y-coordinates (mod p) of the eight points whose order divides 8
_SMALL_ORDER_Y = frozenset({0, 1, _P - 1, _ORDER8_Y, _P - _ORDER8_Y})


def hmac_sha512(key: bytes, message: bytes) -> bytes:
    """Compute HMAC-SHA512(key, message), 64 bytes."""
    return hmac.new(key, message, hashlib.sha512).digest()


def generate_private_key() -> bytes:
    """Return 32 random bytes suitable as an ed25519 private key (seed).

    Only the protocol self-check and tests use this; custody of real
    master keys is the caller's concern.
    """
    return secrets.token_bytes(SEED_LENGTH)


def _load_private_key(private_key: bytes) -> Ed25519PrivateKey:
    try:
        return Ed25519PrivateKey.from_private_bytes(private_key)
    except ValueError as e:
        raise UnknownCryptoError("ed25519 key loading", e) from e


def public_key_from_private(private_key: bytes) -> bytes:
    """Derive the 32-byte ed25519 public key for a 32-byte private key.

    The private key is the RFC 8032 seed; scalar clamping happens inside
    the primitive.
    """
    key = _load_private_key(private_key)
    return key.public_key().public_bytes(
        encoding=Encoding.Raw,
        format=PublicFormat.Raw,
    )


def sign(message: bytes, private_key: bytes) -> bytes:
    """Produce a deterministic RFC 8032 ed25519 signature (64 bytes)."""
    key = _load_private_key(private_key)
    return key.sign(message)


def has_small_order(point: bytes) -> bool:
    """Return True if an encoded point lies in the order-8 torsion subgroup.

    The sign bit is ignored and non-canonical y encodings are reduced mod p,
    so every encoding of a small-order point is caught.
    """
    y = (int.from_bytes(point, "little") & ((1 << 255) - 1)) % _P
    return y in _SMALL_ORDER_Y


def verify(signature: bytes, message: bytes, public_key: bytes) -> bool:
    """Check an ed25519 signature.

    Returns False for invalid signatures, for public keys the library
    refuses to load, and for small-order public keys or R values; never
    raises for malformed bytes. No derived key is ever small-order.
    """
    if len(public_key) != 32 or len(signature) != 64:
        return False
    if has_small_order(public_key) or has_small_order(signature[:32]):
        return False
    try:
        key = Ed25519PublicKey.from_public_bytes(public_key)
        key.verify(signature, message)
        return True
    except (InvalidSignature, ValueError):
        return False
