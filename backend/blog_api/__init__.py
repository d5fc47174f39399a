"""
Blog API - Application Package
================================

What:  A small CRUD service over blog posts with a vote counter.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Presence checks, response shaping
    ├─────────────────────────────────────┤
    │      Repositories (Storage Access)  │  ← One SQL statement per operation
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes receive a repository through FastAPI's dependency injection, so
    tests can swap the database for an in-memory fake.
"""

__version__ = "1.0.0"
