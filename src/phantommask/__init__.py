# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""PhantomMask v1 - deterministic per-application identities from one master key.

A master private key and an application identifier deterministically yield
an ed25519 key pair:

  master key + app id
    -> HMAC-SHA512 with the "PhantomMask-v1-app:" domain separator
    -> first 32 bytes = derived private key
    -> ed25519 public key

Derived identities are reproducible, unlinkable across app ids without the
master key, and fully capable of signing.

Entry points:
  phantommask          CLI (derive, sign, verify, test)
  phantommask-server   HTTP API (Starlette + uvicorn)
"""

__version__ = "1.0.0"

from .identity import (
    derive_app_identity as derive_app_identity,
)
from .identity import (
    sign_message as sign_message,
)
from .identity import (
    verify_signature as verify_signature,
)
