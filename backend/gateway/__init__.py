"""
Board Gateway - Application Package Initializer
================================================

What: Marks the `gateway` directory as a Python package.
Who:  Used by uvicorn (`gateway.main:app`), Alembic and pytest.

Architecture Note:
    The gateway is a thin layered service over the hosted Postgres database:

    ┌─────────────────────────────────────┐
    │      Routes (/v1/... API Layer)     │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (limits, hashing, auth)  │  ← Row-count ceilings, derived fields
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
