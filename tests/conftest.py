"""Global test fixtures for the PhantomMask test suite."""

from __future__ import annotations

import random
from types import SimpleNamespace

import pytest

from phantommask.crypto.encoding import encode

# ============================================================================
# Pinned interoperability vector
# ============================================================================
#
# master key = 32 zero bytes, app id = "test-app"
#   HMAC-SHA512 = 454ee516...c9512414 | b911e587...baffc6c8
#   private key = first 32 bytes of the HMAC
#   signature   = ed25519 signature of b"hello" with that private key

ZERO_MASTER_KEY = bytes(32)
ZERO_MASTER_KEY_B58 = "1" * 32
VECTOR_APP_ID = "test-app"
VECTOR_HMAC_HEX = (
    "454ee5165ad578b95efbb8d5ac011f2291d0367adbe452067caedf4bc9512414"
    "b911e587ca605c125b9c91d572a38beb7f495bfe9b8f3357fd68b1d2baffc6c8"
)
VECTOR_PRIVATE_KEY_HEX = "454ee5165ad578b95efbb8d5ac011f2291d0367adbe452067caedf4bc9512414"
VECTOR_PUBLIC_KEY_HEX = "d339cb5144b1339b61c4528cae39f23ef33dd8d438c542cf2af1438c809f191d"
VECTOR_PRIVATE_KEY_B58 = "5fYuZMkpr5XHksCj3AZrQuEq4sXJaJ6A3fsW8vZhzKe3"
VECTOR_PUBLIC_KEY_B58 = "FDY8zHc525vfaf9ZTKCHYCD5KPi3NsB19voBC7rwGGHA"
VECTOR_MESSAGE = "hello"
VECTOR_SIGNATURE_HEX = (
    "18abfdd52d79458bcd6e0c63f768b9c9140832f7f3ddcd8c18bc350db0a26832"
    "f1e04502d831cb69eccd69161cf5c2b70e928ee3a2d1f1907dd1a872ddf4a905"
)
VECTOR_SIGNATURE_B58 = "VcMjHUioRQrrvP1XZurGnb1QtRAiDs8J2gc1toEmCF1BV88H4jjhGyPvXsHjFbjhWoH7oAdkvcQ7VWAbxQ8N72U"


@pytest.fixture
def vector() -> SimpleNamespace:
    """The pinned cross-implementation derivation/signing vector."""
    return SimpleNamespace(
        master_key=ZERO_MASTER_KEY,
        master_key_b58=ZERO_MASTER_KEY_B58,
        app_id=VECTOR_APP_ID,
        hmac=bytes.fromhex(VECTOR_HMAC_HEX),
        private_key=bytes.fromhex(VECTOR_PRIVATE_KEY_HEX),
        public_key=bytes.fromhex(VECTOR_PUBLIC_KEY_HEX),
        private_key_b58=VECTOR_PRIVATE_KEY_B58,
        public_key_b58=VECTOR_PUBLIC_KEY_B58,
        message=VECTOR_MESSAGE,
        signature=bytes.fromhex(VECTOR_SIGNATURE_HEX),
        signature_b58=VECTOR_SIGNATURE_B58,
    )


@pytest.fixture(autouse=True)
def clean_settings():
    """Reset config singletons between tests."""
    import phantommask.core.config as core_config
    import phantommask.server.config as server_config

    core_config._config = None
    server_config._settings = None
    yield
    core_config._config = None
    server_config._settings = None


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so property-style tests are reproducible."""
    return random.Random(0x5EED)


@pytest.fixture
def master_key(rng: random.Random) -> bytes:
    """A fixed, non-trivial 32-byte master key."""
    return rng.randbytes(32)


@pytest.fixture
def master_key_b58(master_key: bytes) -> str:
    return encode(master_key)
