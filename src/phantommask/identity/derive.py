# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Per-application identity derivation.

From one 32-byte master private key, derive a distinct ed25519 key pair for
every application identifier:

    H = HMAC-SHA512(key=master_private_key,
                    msg=b"PhantomMask-v1-app:" + app_id.encode("utf-8"))
    derived_private_key = H[:32]
    derived_public_key  = ed25519_public_key(derived_private_key)

Properties:
- Same master key + same app id -> same identity (deterministic)
- Same master key + different app id -> different, unlinkable identity
- No randomness, no state, no storage

The upper 32 bytes of H are discarded. Using the full 64 bytes, or any
other slice, changes every derived identity and breaks interoperability
with other implementations of the protocol.

App ids are encoded as UTF-8 exactly as given; no Unicode normalization
is applied, so visually identical ids in different normal forms derive
different identities.
"""

from __future__ import annotations

import logging

from ..core.exceptions import InvalidKeyLength, ValidationException
from ..crypto import primitives
from ..crypto.encoding import PRIVATE_KEY_LENGTH, decode_private_key, encode, utf8_bytes
from .models import AppIdentity, DerivedKeyPair

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "PhantomMask-v1"

# Protocol constant; the trailing colon is part of it
DOMAIN_SEPARATOR = f"{PROTOCOL_VERSION}-app:"

MASTER_KEY_ROLE = "master private key"


def domain_message(app_id: str) -> bytes:
    """Build the domain-separated HMAC input for an application identifier."""
    if not isinstance(app_id, str):
        raise TypeError(f"app_id must be str, not {type(app_id).__name__}")
    if not app_id:
        raise ValidationException("appId must be a non-empty string", field="appId")
    return utf8_bytes(DOMAIN_SEPARATOR + app_id, "appId")


def derive_private_key(master_private_key: bytes, app_id: str) -> bytes:
    """Compute the 32-byte derived private key for app_id.

    Raises:
        InvalidKeyLength: If master_private_key is not 32 bytes.
        ValidationException: If app_id is empty or not valid Unicode.
    """
    if len(master_private_key) != PRIVATE_KEY_LENGTH:
        raise InvalidKeyLength(MASTER_KEY_ROLE, PRIVATE_KEY_LENGTH, len(master_private_key))

    digest = primitives.hmac_sha512(bytes(master_private_key), domain_message(app_id))
    return digest[:PRIVATE_KEY_LENGTH]


def derive(master_private_key: bytes, app_id: str) -> DerivedKeyPair:
    """Derive the ed25519 key pair for app_id under master_private_key.

    Args:
        master_private_key: 32-byte master secret.
        app_id: Non-empty application identifier.

    Returns:
        DerivedKeyPair with the 32-byte private and public keys.

    Raises:
        InvalidKeyLength: If master_private_key is not 32 bytes.
        ValidationException: If app_id is empty or not valid Unicode.
    """
    private_key = derive_private_key(master_private_key, app_id)
    public_key = primitives.public_key_from_private(private_key)

    logger.debug("Derived identity for app id of %d chars: %s", len(app_id), encode(public_key))
    return DerivedKeyPair(private_key=private_key, public_key=public_key)


def derive_app_identity(master_private_key: str, app_id: str) -> AppIdentity:
    """Derive a per-app identity from a base58-encoded master private key.

    Args:
        master_private_key: base58 master private key (32 bytes once decoded).
        app_id: Application identifier string.

    Returns:
        AppIdentity with base58 private and public keys.

    Raises:
        DecodeError: If master_private_key is not valid base58.
        InvalidKeyLength: If it does not decode to exactly 32 bytes.
        ValidationException: If app_id is empty or not valid Unicode.
    """
    master_bytes = decode_private_key(master_private_key, MASTER_KEY_ROLE)
    return derive(master_bytes, app_id).to_app_identity()
