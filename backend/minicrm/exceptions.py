"""
MiniCRM Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the few failure outcomes the API has.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` JSON bodies.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    MiniCRMError (base)        → 500 Internal Server Error
    ├── NotFoundError          → 404 Not Found ("Company not found")
    └── DatabaseError          → 500 Internal Server Error (driver message)

The taxonomy is deliberately flat: malformed bodies, constraint violations
and connectivity failures all surface as the same 500 shape.
"""

from typing import Any, Dict, Optional


class MiniCRMError(Exception):
    """
    Base exception for all MiniCRM application errors.

    Attributes:
        message:  Text returned in the `error` field of the response
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(MiniCRMError):
    """
    Raised when a single-entity lookup by id finds no row.

    When:    GET /api/companies/{id} or GET /api/contacts/{id} with no such row.
    HTTP:    404 Not Found

    The message is the entity name followed by "not found", e.g.
    `NotFoundError("Company", 7).message == "Company not found"`.
    """

    def __init__(
        self,
        entity: str = "Resource",
        entity_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity"] = entity
        if entity_id is not None:
            ctx["entity_id"] = entity_id
        super().__init__(message=f"{entity} not found", context=ctx)
        self.entity = entity
        self.entity_id = entity_id


class DatabaseError(MiniCRMError):
    """
    Raised when a statement fails against the store.

    When:    Constraint violation (e.g. a required column bound as NULL),
             lost connection, bad parameter type.
    HTTP:    500 Internal Server Error

    `from_exception` keeps the driver's own message when there is one, so the
    client sees "NOT NULL constraint failed: companies.name" rather than the
    full SQLAlchemy statement dump.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @classmethod
    def from_exception(cls, exc: BaseException, **context: Any) -> "DatabaseError":
        cause = getattr(exc, "orig", None) or exc
        message = str(cause).strip() or "Internal server error"
        context["error_type"] = type(exc).__name__
        return cls(message=message, context=context)
