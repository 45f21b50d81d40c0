"""MiniCRM Backend — Company schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from minicrm.schemas.common import PayloadModel


class CompanyCreate(PayloadModel):
    name: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None


class CompanyUpdate(PayloadModel):
    """Full replacement: omitted fields are written as NULL."""
    name: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None


class CompanyRead(BaseModel):
    id: int
    name: str
    website: Optional[str] = None
    industry: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
