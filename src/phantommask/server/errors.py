# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Standardized REST error responses for the PhantomMask API.

All REST endpoints use these helpers for a consistent error format:
{
    "success": false,
    "error": {
        "code": "ERROR_CODE",
        "message": "Human readable message"
    }
}

Messages never echo request values: a field may hold a private key.
"""

from __future__ import annotations

import logging
import sys
import uuid

from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

# =============================================================================
# STANDARD ERROR CODES
# =============================================================================

# Validation errors (400)
VALIDATION_MISSING_FIELD = "VALIDATION_MISSING_FIELD"
VALIDATION_INVALID_FORMAT = "VALIDATION_INVALID_FORMAT"
VALIDATION_INVALID_JSON = "VALIDATION_INVALID_JSON"

# Protocol failures (500)
DERIVATION_FAILED = "DERIVATION_FAILED"
SIGNING_FAILED = "SIGNING_FAILED"

# Server errors (500)
INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# ERROR RESPONSE HELPERS
# =============================================================================


def error_response(
    code: str,
    message: str,
    status_code: int = 400,
) -> JSONResponse:
    """Create a standardized error response.

    Args:
        code: Error code (e.g., VALIDATION_MISSING_FIELD)
        message: Human-readable error message
        status_code: HTTP status code (default 400)
    """
    return JSONResponse(
        {
            "success": False,
            "error": {
                "code": code,
                "message": message,
            },
        },
        status_code=status_code,
    )


def missing_field_error(field_name: str) -> JSONResponse:
    """Create a 400 error for a missing or empty required field."""
    return error_response(
        VALIDATION_MISSING_FIELD,
        f"Invalid request: {field_name} is required and must be a string",
        status_code=400,
    )


def field_too_long_error(field_name: str, max_length: int) -> JSONResponse:
    """Create a 400 error for a field longer than the API accepts."""
    return error_response(
        VALIDATION_INVALID_FORMAT,
        f"Invalid request: {field_name} must be at most {max_length} characters",
        status_code=400,
    )


def invalid_json_error() -> JSONResponse:
    """Create a 400 error for invalid JSON body."""
    return error_response(VALIDATION_INVALID_JSON, "Invalid JSON body", status_code=400)


def operation_failed_error(code: str, operation: str, reason: str) -> JSONResponse:
    """Create a 500 error for a derivation or signing failure.

    Args:
        code: DERIVATION_FAILED or SIGNING_FAILED.
        operation: "Derivation" or "Signing", used as the message prefix.
        reason: Failure message from the core (never contains key material).
    """
    return error_response(code, f"{operation} failed: {reason}", status_code=500)


def internal_error(
    message: str = "Internal server error",
    exc: BaseException | None = None,
    debug: bool = False,
) -> JSONResponse:
    """Create a 500 internal error response.

    Always includes a request_id for log correlation. With debug enabled the
    exception type is included; exception text never is.

    Args:
        message: Base error message.
        exc: Optional exception. If None, the exception being handled is used.
        debug: Include the exception type name in the body.
    """
    request_id = uuid.uuid4().hex[:12]

    error_body: dict = {
        "code": INTERNAL_ERROR,
        "message": message,
        "request_id": request_id,
    }

    if exc is None:
        exc = sys.exc_info()[1]

    if exc is not None:
        logger.error("request_id=%s %s", request_id, type(exc).__name__)
        if debug:
            error_body["exception"] = type(exc).__name__

    return JSONResponse(
        {"success": False, "error": error_body},
        status_code=500,
    )
