# SPDX-License-Identifier: MIT
# Copyright (c) 2026 PhantomMask Contributors

"""Pydantic models for the PhantomMask REST API.

Field names on the wire are camelCase; every field is a required,
non-empty string. Validation happens here, before any core call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_REQUEST_CONFIG = ConfigDict(populate_by_name=True, strict=True, extra="ignore")

# Upper bounds on request strings; an encoded key or signature is at most 88 characters
MAX_ENCODED_LENGTH = 256
MAX_TEXT_LENGTH = 65536

# =============================================================================
# Request Models
# =============================================================================


class DeriveRequest(BaseModel):
    """Request model for POST /api/v1/derive."""

    model_config = _REQUEST_CONFIG

    master_private_key: str = Field(
        ...,
        alias="masterPrivateKey",
        min_length=1,
        max_length=MAX_ENCODED_LENGTH,
        description="base58 master private key",
    )
    app_id: str = Field(
        ...,
        alias="appId",
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Application identifier",
    )


class SignRequest(BaseModel):
    """Request model for POST /api/v1/sign."""

    model_config = _REQUEST_CONFIG

    derived_private_key: str = Field(
        ...,
        alias="derivedPrivateKey",
        min_length=1,
        max_length=MAX_ENCODED_LENGTH,
        description="base58 derived private key",
    )
    message: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Message to sign (UTF-8)",
    )


class VerifyRequest(BaseModel):
    """Request model for POST /api/v1/verify."""

    model_config = _REQUEST_CONFIG

    signature: str = Field(
        ...,
        min_length=1,
        max_length=MAX_ENCODED_LENGTH,
        description="base58 signature",
    )
    message: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Signed message (UTF-8)",
    )
    public_key: str = Field(
        ...,
        alias="publicKey",
        min_length=1,
        max_length=MAX_ENCODED_LENGTH,
        description="base58 public key",
    )


# =============================================================================
# Response Models
# =============================================================================


class DeriveResponse(BaseModel):
    """Derived identity as returned over HTTP: public key only."""

    public_key: str = Field(
        ...,
        serialization_alias="publicKey",
    )


class SignResponse(BaseModel):
    """Signature and signer public key."""

    signature: str
    public_key: str = Field(
        ...,
        serialization_alias="publicKey",
    )


class VerifyResponse(BaseModel):
    """Verification outcome."""

    valid: bool
