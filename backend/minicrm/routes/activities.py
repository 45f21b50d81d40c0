"""
MiniCRM Backend — Activity Route Handlers
===========================================

What:  GET /api/contacts/{id}/activities and POST /api/activities.

Listing activities of a contact that does not exist returns an empty list,
not a 404.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import get_db_session
from minicrm.schemas.activity import ActivityCreate, ActivityRead
from minicrm.schemas.common import CreatedResponse
from minicrm.services.activity_service import activity_service

router = APIRouter(prefix="/api", tags=["Activities"])


@router.get(
    "/contacts/{contact_id:int}/activities",
    response_model=List[ActivityRead],
    summary="List a contact's activities, newest first",
)
async def list_contact_activities(
    contact_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[ActivityRead]:
    return await activity_service.list_for_contact(db, contact_id)


@router.post(
    "/activities",
    status_code=201,
    response_model=CreatedResponse,
    summary="Log an activity against a contact",
)
async def create_activity(
    payload: ActivityCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return await activity_service.create_activity(db, payload)
