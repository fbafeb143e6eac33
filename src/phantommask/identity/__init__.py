"""Identity derivation and signing for PhantomMask v1.

One master private key yields an unlimited number of per-application
ed25519 identities. Identities for different application identifiers are
unlinkable without the master key.

Key concepts:
- **derive**: master key + app id -> :class:`DerivedKeyPair` (HMAC-SHA512,
  domain separated by ``"PhantomMask-v1-app:"``).
- **sign / verify**: deterministic ed25519 over raw message bytes.
- **derive_app_identity / sign_message / verify_signature**: the same
  operations on base58 strings, as used by the HTTP API and CLI.
"""

from phantommask.identity.derive import (
    DOMAIN_SEPARATOR,
    PROTOCOL_VERSION,
    derive,
    derive_app_identity,
    derive_private_key,
)
from phantommask.identity.models import (
    AppIdentity,
    DerivedKeyPair,
    SignatureResult,
    SignedMessage,
)
from phantommask.identity.selftest import CheckResult, run_protocol_checks
from phantommask.identity.signing import (
    sign,
    sign_message,
    verify,
    verify_signature,
)

__all__ = [
    "PROTOCOL_VERSION",
    "DOMAIN_SEPARATOR",
    "derive",
    "derive_private_key",
    "derive_app_identity",
    "sign",
    "verify",
    "sign_message",
    "verify_signature",
    "AppIdentity",
    "DerivedKeyPair",
    "SignatureResult",
    "SignedMessage",
    "CheckResult",
    "run_protocol_checks",
]
