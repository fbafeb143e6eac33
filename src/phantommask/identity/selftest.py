"""Protocol self-check: determinism, unlinkability and signing.

Each check uses a fresh random master key, so a pass demonstrates the
protocol properties rather than a single memorised vector. The pinned
interoperability vector lives in the test suite.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.exceptions import PhantomMaskException
from ..crypto.encoding import encode
from ..crypto.primitives import generate_private_key
from .derive import derive_app_identity
from .signing import sign_message, verify_signature

logger = logging.getLogger(__name__)

MasterKeyFactory = Callable[[], bytes]


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one protocol check."""

    name: str
    passed: bool
    detail: str

    def to_dict(self) -> dict:
        return {"name": self.name, "passed": self.passed, "detail": self.detail}


def _check_determinism(master_key: str) -> CheckResult:
    first = derive_app_identity(master_key, "test-app")
    second = derive_app_identity(master_key, "test-app")
    passed = first == second
    detail = (
        "Same master key + same app ID -> same identity"
        if passed
        else "Repeated derivation produced different identities"
    )
    return CheckResult("determinism", passed, detail)


def _check_unlinkability(master_key: str) -> CheckResult:
    alpha = derive_app_identity(master_key, "app-alpha")
    beta = derive_app_identity(master_key, "app-beta")
    passed = alpha.public_key != beta.public_key
    detail = (
        "Same master key + different app ID -> different identity"
        if passed
        else "Different app IDs produced the same public key"
    )
    return CheckResult("unlinkability", passed, detail)


def _check_signing(master_key: str) -> CheckResult:
    identity = derive_app_identity(master_key, "signing-app")
    message = "Test message"
    signed = sign_message(identity.private_key, message)
    passed = signed.public_key == identity.public_key and verify_signature(
        signed.signature, message, signed.public_key
    )
    detail = (
        "Derived identity can sign and verify messages"
        if passed
        else "Signature from derived identity did not verify"
    )
    return CheckResult("signing", passed, detail)


_CHECKS = (_check_determinism, _check_unlinkability, _check_signing)


def run_protocol_checks(
    master_key_factory: MasterKeyFactory = generate_private_key,
) -> list[CheckResult]:
    """Run every protocol check and return their results in order.

    A check that raises is reported as failed rather than aborting the run.
    """
    results = []
    for check in _CHECKS:
        master_key = encode(master_key_factory())
        try:
            result = check(master_key)
        except PhantomMaskException as e:
            result = CheckResult(check.__name__.removeprefix("_check_"), False, e.message)
        logger.debug("Protocol check %s: %s", result.name, "pass" if result.passed else "FAIL")
        results.append(result)
    return results
