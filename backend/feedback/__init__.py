"""
Feedback Tracker Backend — Application Package Initializer
===========================================================

What: Marks the `feedback` directory as a Python package.
Why:  Enables module imports like `from feedback.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    Each tracked measurement (blood pressure, points, weight) flows through
    the same layered stack:

    ┌─────────────────────────────────────┐
    │        Routes (Resource Layer)      │  ← HTTP verbs, status codes, headers
    ├─────────────────────────────────────┤
    │         Services (Orchestration)    │  ← save / find / delete
    ├─────────────────────────────────────┤
    │     Mappers (Entity ⇄ DTO)          │  ← pure, stateless translation
    ├─────────────────────────────────────┤
    │     Repositories (Persistence)      │  ← async SQLAlchemy queries
    └─────────────────────────────────────┘

    The layers are written once and parameterized by an entity descriptor
    (see feedback.descriptors), so the three verticals share one implementation.
"""

__version__ = "1.0.0"
