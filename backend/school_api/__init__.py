"""
School Records API: Application Package Initializer
=====================================================

What: Marks the `school_api` directory as a Python package.
Why:  Enables module imports like `from school_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a strict three-layer pass-through:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Forwarding)       │  ← Seam between API and storage
    ├─────────────────────────────────────┤
    │     Repositories (Data Access)      │  ← One SQLAlchemy query per call
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async engine + session factory
    └─────────────────────────────────────┘

    Requests flow top to bottom and responses come back unchanged in shape.
"""

__version__ = "1.0.0"
