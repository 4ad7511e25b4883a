"""
Chirpy Backend — Readiness Route
==================================

What:  GET /api/healthz for load balancer and container readiness probes.
How:   Returns plain-text "OK" without touching the database; a process that
       can answer HTTP can moderate chirps, which needs no dependencies.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/healthz", response_class=PlainTextResponse, summary="Readiness probe")
async def readiness() -> PlainTextResponse:
    return PlainTextResponse("OK")
