"""PhantomMask Core - exceptions, configuration and logging shared by every layer."""

from .config import CoreSettings, clear_config_cache, get_config
from .exceptions import (
    ConfigException,
    CryptoError,
    DecodeError,
    InvalidKeyLength,
    InvalidSignatureLength,
    PhantomMaskException,
    UnknownCryptoError,
    ValidationException,
)
from .logging import (
    OperationLogger,
    configure_logging,
    get_logger,
    operation_logger,
    redact,
)

__all__ = [
    # Config
    "CoreSettings",
    "get_config",
    "clear_config_cache",
    # Exceptions
    "PhantomMaskException",
    "ValidationException",
    "ConfigException",
    "CryptoError",
    "InvalidKeyLength",
    "InvalidSignatureLength",
    "DecodeError",
    "UnknownCryptoError",
    # Logging
    "configure_logging",
    "get_logger",
    "redact",
    "OperationLogger",
    "operation_logger",
]
