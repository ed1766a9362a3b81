"""
Notes API - Application Package
=================================

What: In-memory REST service for short text notes (create, read, update,
      delete, list).
Who:  Imported by uvicorn (`uvicorn notes_api.main:app`), pytest, and the
      route/service modules.

Architecture Note:
    ┌─────────────────────────────────────┐
    │        Routes (Controller)          │  ← HTTP verbs/paths, JSON envelopes
    ├─────────────────────────────────────┤
    │        Services (Validation)        │  ← Input rules, existence checks
    ├─────────────────────────────────────┤
    │        Store (In-Memory Table)      │  ← Keyed notes, copy-in/copy-out
    └─────────────────────────────────────┘

    Each layer only talks to the one directly below it. The store instance
    is owned by the application object and injected into the service per
    request, so every app (and every test) gets its own table.
"""

__version__ = "1.0.0"
