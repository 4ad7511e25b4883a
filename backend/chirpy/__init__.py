"""
Chirpy Backend — Application Package Initializer
=================================================

What: Marks the `chirpy` directory as a Python package.
Who:  Imported by uvicorn (chirpy.main:app), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │     Middleware (hit counter, logs)  │  ← cross-cutting, wraps handlers
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← decode JSON, encode responses
    ├─────────────────────────────────────┤
    │   Services (moderation, counters)   │  ← pure logic, no HTTP
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
