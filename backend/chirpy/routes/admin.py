"""
Chirpy Backend — Admin Routes
===============================

What:  GET /admin/metrics (hit count page) and POST /admin/reset (zero it).
How:   The RequestCounter is owned by the app instance (app.state.hit_counter)
       and injected with Depends(get_hit_counter).

Access control for reset belongs in front of this router (proxy or future
auth); the counter itself never refuses a reset.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from chirpy.services.hit_counter import RequestCounter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


def get_hit_counter(request: Request) -> RequestCounter:
    """FastAPI dependency returning the counter owned by the running app."""
    return request.app.state.hit_counter


@router.get("/metrics", response_class=HTMLResponse, summary="Show file server hit count")
async def get_metrics(counter: RequestCounter = Depends(get_hit_counter)) -> HTMLResponse:
    return HTMLResponse(METRICS_TEMPLATE.format(hits=counter.value()))


@router.post("/reset", response_class=PlainTextResponse, summary="Reset the hit counter")
async def reset_metrics(counter: RequestCounter = Depends(get_hit_counter)) -> PlainTextResponse:
    previous = counter.value()
    counter.reset()
    logger.info("Hit counter reset (was %d)", previous)
    return PlainTextResponse("OK")
