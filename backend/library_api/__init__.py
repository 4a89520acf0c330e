"""
Library API Backend — Application Package Initializer
=====================================================

What: Marks the `library_api` directory as a Python package.
Who:  Imported by uvicorn (`library_api.main:app`), Alembic and pytest.

Architecture Note:
    The service is a thin layered CRUD backend for book records:

    ┌─────────────────────────────────────┐
    │        Routes (HTTP Layer)          │  ← verbs, paths, status codes
    ├─────────────────────────────────────┤
    │        Services (Book Service)      │  ← not-found semantics, error containment
    ├─────────────────────────────────────┤
    │   Repositories (Storage Adapter)    │  ← save / find / delete
    ├─────────────────────────────────────┤
    │  Models & Schemas / Database        │  ← SQLAlchemy ORM + Pydantic, async sessions
    └─────────────────────────────────────┘

    Each layer only talks to the one directly below it.
"""

__version__ = "1.0.0"
