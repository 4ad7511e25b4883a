"""
Chirpy Backend — Chirp Validation Route
=========================================

What:  POST /api/validate_chirp: length check and banned-word redaction.
How:   Decodes {"body": ...}, delegates to ChirpModerator, returns
       {"cleaned_body": ...}.

Responses:
    200: cleaned body (whether or not anything was redacted)
    400: {"error": "Chirp is too long"} (ChirpTooLongError → global handler)
    500: {"error": "Something went wrong"} (RequestDecodeError → global handler)
"""

import logging

from fastapi import APIRouter, Request

from chirpy.routes.decoding import decode_json_body
from chirpy.schemas.chirp import ChirpParams, CleanedChirpResponse, ErrorResponse
from chirpy.services.moderation import chirp_moderator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chirps"])


@router.post(
    "/validate_chirp",
    response_model=CleanedChirpResponse,
    responses={
        200: {"description": "Chirp accepted, banned words masked", "model": CleanedChirpResponse},
        400: {"description": "Chirp exceeds the maximum length", "model": ErrorResponse},
        500: {"description": "Request body could not be decoded", "model": ErrorResponse},
    },
    summary="Validate and clean a chirp",
)
async def validate_chirp(request: Request) -> CleanedChirpResponse:
    params = await decode_json_body(request, ChirpParams)

    result = chirp_moderator.moderate(params.body)
    if result.flagged:
        # Flagged chirps keep status 200; only the body changes
        logger.info("Chirp contained banned words and was redacted")

    return CleanedChirpResponse(cleaned_body=result.cleaned_body)
