"""Encoding and primitive layers: base58 codecs, ed25519 and HMAC-SHA512."""

from .encoding import (
    BASE58_ALPHABET,
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    decode,
    decode_fixed,
    decode_private_key,
    decode_public_key,
    decode_signature,
    encode,
    max_encoded_length,
    utf8_bytes,
)
from .primitives import (
    generate_private_key,
    has_small_order,
    hmac_sha512,
    public_key_from_private,
)

__all__ = [
    "BASE58_ALPHABET",
    "PRIVATE_KEY_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "encode",
    "decode",
    "decode_fixed",
    "decode_private_key",
    "decode_public_key",
    "decode_signature",
    "max_encoded_length",
    "utf8_bytes",
    "generate_private_key",
    "has_small_order",
    "hmac_sha512",
    "public_key_from_private",
]
