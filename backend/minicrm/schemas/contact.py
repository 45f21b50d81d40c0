"""
MiniCRM Backend — Contact schemas
===================================

ContactRead is a contact row plus `company_name` from a LEFT JOIN on
companies (null when company_id is null or dangling). ContactDetail adds
the contact's activities, newest first.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from minicrm.schemas.activity import ActivityRead
from minicrm.schemas.common import PayloadModel


class ContactCreate(PayloadModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company_id: Optional[int] = None


class ContactUpdate(PayloadModel):
    """Full replacement: omitted fields are written as NULL."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company_id: Optional[int] = None


class ContactRead(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company_id: Optional[int] = None
    created_at: datetime
    company_name: Optional[str] = None

    model_config = {"from_attributes": True}


class ContactDetail(ContactRead):
    activities: List[ActivityRead] = Field(default_factory=list)
