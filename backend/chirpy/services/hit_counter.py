"""
Chirpy Backend — Request Hit Counter
======================================

What:  Thread-safe integer counting how many times instrumented routes were hit.
How:   A lock guards every read-modify-write, so increments arriving from the
       event loop and from Starlette's threadpool are never lost.
Who:   Incremented by HitCounterMiddleware, read by GET /admin/metrics,
       zeroed by POST /admin/reset.

Each application instance owns its own counter (stored on app.state by
create_app), so tests can build independent apps without shared state.
Values are not persisted across restarts.
"""

import threading


class RequestCounter:
    """Monotonic hit counter with an unconditional reset."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one hit and return the new total."""
        with self._lock:
            self._value += 1
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = 0

    def value(self) -> int:
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"<RequestCounter(value={self.value()})>"
