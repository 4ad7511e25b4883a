# Middleware package init
"""
Chirpy Backend — Middleware Package
=====================================

What:  Cross-cutting concerns applied around request handlers.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler
                                       → /app mount → [Hit Counter] → StaticFiles

    - Request ID: correlation ID for log lines and the X-Request-ID header
    - Logging: method, path, status and duration of each request
    - Hit Counter: applied per mount via instrument(), not app-wide, so only
      the routes it wraps are counted
"""
