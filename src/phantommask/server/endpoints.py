# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""REST endpoints for identity derivation, signing and verification.

These handlers are a thin shim over :mod:`phantommask.identity`:
- request shape is validated with pydantic before the core is invoked
- /derive returns only the public key; derived private keys never leave
  the server
- request bodies are never logged
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from pydantic import BaseModel, ValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse

from phantommask.core.exceptions import PhantomMaskException
from phantommask.core.logging import correlation_context, operation_logger
from phantommask.identity import derive_app_identity, sign_message, verify_signature

from .config import get_settings
from .errors import (
    DERIVATION_FAILED,
    SIGNING_FAILED,
    VALIDATION_INVALID_FORMAT,
    error_response,
    field_too_long_error,
    internal_error,
    invalid_json_error,
    missing_field_error,
    operation_failed_error,
)
from .models import (
    DeriveRequest,
    DeriveResponse,
    SignRequest,
    SignResponse,
    VerifyRequest,
    VerifyResponse,
)

logger = logging.getLogger(__name__)


def _validation_error_response(exc: ValidationError) -> JSONResponse:
    """Map the first pydantic error to a 400 response naming the field.

    Missing, empty and non-string fields all report the same way.
    """
    first = exc.errors()[0]
    loc = first.get("loc") or ()
    if not loc:
        return error_response(VALIDATION_INVALID_FORMAT, "Request body must be a JSON object")
    if first.get("type") == "string_too_long":
        return field_too_long_error(str(loc[0]), first["ctx"]["max_length"])
    return missing_field_error(str(loc[0]))


async def _parse_body(request: Request, model: type[BaseModel]) -> tuple[Any, JSONResponse | None]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None, invalid_json_error()

    try:
        return model.model_validate(body), None
    except ValidationError as e:
        return None, _validation_error_response(e)


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(by_alias=True)


# =============================================================================
# Derivation
# =============================================================================


async def derive_endpoint(request: Request) -> JSONResponse:
    """POST /api/v1/derive - Derive a per-app public identity.

    Request Body (JSON):
        {"masterPrivateKey": "<base58>", "appId": "my-app"}

    Returns:
        200: {"publicKey": "<base58>"}
        400: Missing or malformed field
        500: Derivation failed (e.g. key is not 32 bytes)
    """
    body, error = await _parse_body(request, DeriveRequest)
    if error is not None:
        return error

    with correlation_context():
        operation_logger.log_call("derive", {"appIdLength": len(body.app_id)})
        start = time.perf_counter()
        try:
            identity = derive_app_identity(body.master_private_key, body.app_id)
        except PhantomMaskException as e:
            operation_logger.log_result("derive", False, (time.perf_counter() - start) * 1000)
            logger.info("Derivation rejected: %s", type(e).__name__)
            return operation_failed_error(DERIVATION_FAILED, "Derivation", e.message)
        except Exception as e:
            logger.exception("Unexpected derivation failure")
            return internal_error("Derivation failed", exc=e, debug=get_settings().debug)

        operation_logger.log_result("derive", True, (time.perf_counter() - start) * 1000)
        return JSONResponse(_dump(DeriveResponse(public_key=identity.public_key)))


# =============================================================================
# Signing
# =============================================================================


async def sign_endpoint(request: Request) -> JSONResponse:
    """POST /api/v1/sign - Sign a message with a derived private key.

    Request Body (JSON):
        {"derivedPrivateKey": "<base58>", "message": "Hello"}

    Returns:
        200: {"signature": "<base58>", "publicKey": "<base58>"}
        400: Missing or malformed field
        500: Signing failed (e.g. key is not 32 bytes)
    """
    body, error = await _parse_body(request, SignRequest)
    if error is not None:
        return error

    with correlation_context():
        operation_logger.log_call("sign", {"messageLength": len(body.message)})
        start = time.perf_counter()
        try:
            signed = sign_message(body.derived_private_key, body.message)
        except PhantomMaskException as e:
            operation_logger.log_result("sign", False, (time.perf_counter() - start) * 1000)
            logger.info("Signing rejected: %s", type(e).__name__)
            return operation_failed_error(SIGNING_FAILED, "Signing", e.message)
        except Exception as e:
            logger.exception("Unexpected signing failure")
            return internal_error("Signing failed", exc=e, debug=get_settings().debug)

        operation_logger.log_result("sign", True, (time.perf_counter() - start) * 1000)
        return JSONResponse(_dump(SignResponse(signature=signed.signature, public_key=signed.public_key)))


# =============================================================================
# Verification
# =============================================================================


async def verify_endpoint(request: Request) -> JSONResponse:
    """POST /api/v1/verify - Check a signature.

    Request Body (JSON):
        {"signature": "<base58>", "message": "Hello", "publicKey": "<base58>"}

    Returns:
        200: {"valid": true|false}; malformed signatures or keys are
             reported as invalid, not as errors
        400: Missing or malformed field
    """
    body, error = await _parse_body(request, VerifyRequest)
    if error is not None:
        return error

    valid = verify_signature(body.signature, body.message, body.public_key)
    operation_logger.log_result("verify", True)
    return JSONResponse(_dump(VerifyResponse(valid=valid)))
