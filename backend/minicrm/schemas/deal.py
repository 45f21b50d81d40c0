"""
MiniCRM Backend — Deal schemas
================================

DealUpdate has no company_id: a deal's company is fixed at creation.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from minicrm.schemas.common import Number, PayloadModel


class DealCreate(PayloadModel):
    company_id: Optional[int] = None
    title: Optional[str] = None
    value: Optional[float] = None
    stage: Optional[str] = None
    close_date: Optional[date] = None


class DealUpdate(PayloadModel):
    """Full replacement of the editable fields: omitted ones are written as NULL."""
    title: Optional[str] = None
    value: Optional[float] = None
    stage: Optional[str] = None
    close_date: Optional[date] = None


class DealRead(BaseModel):
    id: int
    company_id: Optional[int] = None
    title: str
    value: Optional[Number] = None
    stage: Optional[str] = None
    close_date: Optional[date] = None
    created_at: datetime
    company_name: Optional[str] = None

    model_config = {"from_attributes": True}
