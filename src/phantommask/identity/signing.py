# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Message signing and verification with derived identities.

Signing is strict: a malformed key is caller misuse and raises.
Verification is total: any malformed or adversarial input simply yields
False, so it is safe to call on fully untrusted triples.
"""

from __future__ import annotations

import logging

from ..core.exceptions import CryptoError, InvalidKeyLength, ValidationException
from ..crypto import primitives
from ..crypto.encoding import (
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    decode_private_key,
    decode_public_key,
    decode_signature,
    utf8_bytes,
)
from .models import SignatureResult, SignedMessage

logger = logging.getLogger(__name__)

DERIVED_KEY_ROLE = "derived private key"


def sign(derived_private_key: bytes, message: bytes) -> SignatureResult:
    """Sign message with a 32-byte private key.

    Signing is deterministic: the same key and message always produce the
    same signature.

    Returns:
        SignatureResult with the 64-byte signature and the signer's public key.

    Raises:
        InvalidKeyLength: If derived_private_key is not 32 bytes.
    """
    if len(derived_private_key) != PRIVATE_KEY_LENGTH:
        raise InvalidKeyLength(DERIVED_KEY_ROLE, PRIVATE_KEY_LENGTH, len(derived_private_key))

    private_key = bytes(derived_private_key)
    public_key = primitives.public_key_from_private(private_key)
    signature = primitives.sign(bytes(message), private_key)
    return SignatureResult(signature=signature, public_key=public_key)


def verify(signature: bytes, message: bytes, public_key: bytes) -> bool:
    """Return True iff signature is a valid ed25519 signature of message.

    Wrong-length signatures or keys and corrupt curve points return False.
    """
    if len(signature) != SIGNATURE_LENGTH or len(public_key) != PUBLIC_KEY_LENGTH:
        return False
    return primitives.verify(bytes(signature), bytes(message), bytes(public_key))


def sign_message(derived_private_key: str, message: str) -> SignedMessage:
    """Sign a UTF-8 message with a base58-encoded derived private key.

    Raises:
        DecodeError: If derived_private_key is not valid base58.
        InvalidKeyLength: If it does not decode to exactly 32 bytes.
        ValidationException: If message is not valid Unicode text.
    """
    private_key = decode_private_key(derived_private_key, DERIVED_KEY_ROLE)
    return sign(private_key, utf8_bytes(message, "message")).to_signed_message()


def verify_signature(signature: str, message: str, public_key: str) -> bool:
    """Verify a base58 signature over a UTF-8 message.

    Never raises for string inputs: bad base58, wrong lengths and invalid
    curve points all return False.
    """
    try:
        signature_bytes = decode_signature(signature)
        public_key_bytes = decode_public_key(public_key)
        message_bytes = utf8_bytes(message, "message")
    except (CryptoError, ValidationException) as e:
        logger.debug("Signature rejected before verification: %s", type(e).__name__)
        return False

    return verify(signature_bytes, message_bytes, public_key_bytes)
