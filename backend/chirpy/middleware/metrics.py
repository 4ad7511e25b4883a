"""
Chirpy Backend — Hit Counting Middleware
==========================================

What:  Wraps any ASGI app so that every request to it increments a RequestCounter.
How:   Starlette BaseHTTPMiddleware: increment, then call_next, then return the
       wrapped handler's response untouched.
Who:   create_app() wraps the /app static file mount with it; any other
       handler (including a whole FastAPI app) can be wrapped the same way.

Ordering:
    The increment happens before delegation, so the counter reflects
    requests received, not requests completed. Exceptions from the wrapped
    handler propagate unchanged; the hit has already been counted.

Usage:
    counter = RequestCounter()
    app.mount("/app", instrument(StaticFiles(directory="static"), counter))
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from chirpy.services.hit_counter import RequestCounter

logger = logging.getLogger(__name__)


class HitCounterMiddleware(BaseHTTPMiddleware):
    """Counts every inbound request before handing it to the wrapped app."""

    def __init__(self, app: ASGIApp, counter: RequestCounter):
        super().__init__(app)
        self.counter = counter

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        hits = self.counter.increment()
        logger.debug("Hit #%d: %s %s", hits, request.method, request.url.path)
        return await call_next(request)


def instrument(app: ASGIApp, counter: RequestCounter) -> ASGIApp:
    """Return `app` wrapped so each call increments `counter` exactly once."""
    return HitCounterMiddleware(app, counter=counter)
