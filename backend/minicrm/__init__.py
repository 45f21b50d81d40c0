"""
MiniCRM Backend — Application Package Initializer
===================================================

What: Marks the `minicrm` directory as a Python package.
Who:  Imported by uvicorn (`minicrm.main:app`), pytest, and every module in the tree.

Architecture Note:
    The backend is a thin layered CRUD service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← path/method matching, status codes
    ├─────────────────────────────────────┤
    │        Services (Data Mapping)      │  ← one statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Resources: companies, contacts, activities, deals, plus a dashboard of
    aggregate counts. There is no business logic beyond create-time
    null-coalescing.
"""

__version__ = "1.0.0"
