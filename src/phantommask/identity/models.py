"""Value types produced by derivation and signing.

Byte-level results (:class:`DerivedKeyPair`, :class:`SignatureResult`) are
what the core computes; string-level results (:class:`AppIdentity`,
:class:`SignedMessage`) are their base58 forms handed to collaborators.
All of them are immutable and live only for the duration of a call chain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..crypto.encoding import encode

# ---------------------------------------------------------------------------
# Byte-level results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DerivedKeyPair:
    """Per-application ed25519 key pair derived from a master key.

    Attributes:
        private_key: 32-byte derived private key (ed25519 seed).
        public_key: 32-byte ed25519 public key.
    """

    private_key: bytes = field(repr=False)
    public_key: bytes

    def to_app_identity(self) -> AppIdentity:
        return AppIdentity(
            private_key=encode(self.private_key),
            public_key=encode(self.public_key),
        )


@dataclass(frozen=True)
class SignatureResult:
    """A 64-byte signature together with the signer's 32-byte public key."""

    signature: bytes
    public_key: bytes

    def to_signed_message(self) -> SignedMessage:
        return SignedMessage(
            signature=encode(self.signature),
            public_key=encode(self.public_key),
        )


# ---------------------------------------------------------------------------
# String-level results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AppIdentity:
    """base58-encoded derived identity.

    ``to_dict`` includes the private key and is meant for trusted local
    callers such as the CLI. HTTP responses use ``public_dict``.
    """

    private_key: str = field(repr=False)
    public_key: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "privateKey": self.private_key,
            "publicKey": self.public_key,
        }

    def public_dict(self) -> dict[str, Any]:
        return {"publicKey": self.public_key}


@dataclass(frozen=True)
class SignedMessage:
    """base58-encoded signature and the public key that verifies it."""

    signature: str
    public_key: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "signature": self.signature,
            "publicKey": self.public_key,
        }
