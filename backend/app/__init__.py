"""
Community Board Backend — Application Package Initializer
===========================================================

Architecture Note:
    This backend follows a layered architecture, one vertical slice per
    resource (users, boards, comments):

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Orchestration)    │  ← lookups, NotFound, mapping
    ├─────────────────────────────────────┤
    │   Schemas (Mappers) & Repositories  │  ← payload ⇄ entity, store access
    ├─────────────────────────────────────┤
    │   Models & Database (Persistence)   │  ← SQLAlchemy ORM, async sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
