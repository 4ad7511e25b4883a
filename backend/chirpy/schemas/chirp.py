"""
Chirpy Backend — Chirp Schemas
================================

What:  JSON contracts for chirp validation, plus the shared error body.
How:   Routes decode raw request bodies into the *Params models (see
       chirpy.routes.decoding) and return the *Response models.

Decoding is lenient about shape (unknown keys ignored, missing or null keys
take their defaults, key case ignored when no exact match exists; see
chirpy.schemas.base) but strict about types: {"body": 42} is a decode error.
"""

from pydantic import BaseModel, Field

from chirpy.schemas.base import RequestParams


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ChirpParams(RequestParams):
    """Body of POST /api/validate_chirp."""
    body: str = Field(default="", description="Raw chirp text")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CleanedChirpResponse(BaseModel):
    """
    What:  Moderated chirp text.
    Who:   Returned by POST /api/validate_chirp with HTTP 200.

    Returned whether or not anything was redacted; banned words appear as
    "****" in cleaned_body.
    """
    cleaned_body: str = Field(description="Chirp body with banned words replaced by ****")


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    Example:
        {"error": "Chirp is too long"}
    """
    error: str = Field(description="Human-readable error message")
