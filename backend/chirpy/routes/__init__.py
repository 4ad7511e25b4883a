# Routes package init
"""
Chirpy Backend — API Routes Package
=====================================

Route Inventory:
    - chirps.py:  POST /api/validate_chirp  (moderate a chirp)
    - users.py:   POST /api/users           (create a user)
    - health.py:  GET  /api/healthz         (readiness probe)
    - admin.py:   GET  /admin/metrics       (hit count page)
                  POST /admin/reset         (zero the hit counter)

Static files under /app/ are mounted in main.create_app(), not here.

Routes stay thin: decode the request, call a service, shape the response.
Errors are raised as ChirpyError subclasses and rendered by the global
handlers in main.py.
"""
