"""MiniCRM Backend — Activity schemas (create and read only)."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from minicrm.schemas.common import PayloadModel


class ActivityCreate(PayloadModel):
    contact_id: Optional[int] = None
    type: Optional[str] = None
    subject: Optional[str] = None
    notes: Optional[str] = None


class ActivityRead(BaseModel):
    id: int
    contact_id: int
    type: str
    subject: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
