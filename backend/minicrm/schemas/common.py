"""
MiniCRM Backend — Shared Response Envelopes & Field Types
===========================================================

What:  Bodies and field types shared by every resource.
       CreatedResponse  → 201 from POST   {"id": 12, "message": "Company created successfully"}
       MessageResponse  → 200 from PUT/DELETE
       ErrorResponse    → 404 / 500       {"error": "Company not found"}

       PayloadModel     → base of every POST/PUT body
       Number           → a numeric output field written the way JSON
                          clients wrote it: 1000 stays 1000, 12.5 stays 12.5
"""

from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, Field


def _integral_to_int(value: Any) -> Any:
    # REAL columns hand back 1000.0 for a stored 1000
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


Number = Annotated[Union[int, float], BeforeValidator(_integral_to_int)]


class PayloadModel(BaseModel):
    """
    Request body base.

    Text fields accept JSON numbers and store their string form, the same
    as a TEXT column would. Other type mismatches (objects, lists, booleans
    for text) still fail parsing and answer 500.
    """

    model_config = {"coerce_numbers_to_str": True}


class CreatedResponse(BaseModel):
    id: int = Field(description="Identifier assigned by the store")
    message: str = Field(description="Human-readable success message")


class MessageResponse(BaseModel):
    message: str = Field(description="Human-readable success message")


class ErrorResponse(BaseModel):
    """
    Single error shape for every failure.

    The taxonomy is flat: lookup misses and unmatched routes return 404,
    everything else returns 500, and both carry only this one field.
    """
    error: str = Field(description="Error description")
