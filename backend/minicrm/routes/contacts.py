"""
MiniCRM Backend — Contact Route Handlers
==========================================

What:  /api/contacts collection and item endpoints. Listing and fetching
       include `company_name`; fetching one contact also embeds its
       activities.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import get_db_session
from minicrm.schemas.common import CreatedResponse, ErrorResponse, MessageResponse
from minicrm.schemas.contact import ContactCreate, ContactDetail, ContactRead, ContactUpdate
from minicrm.services.contact_service import contact_service


router = APIRouter(prefix="/api", tags=["Contacts"])


@router.get(
    "/contacts",
    response_model=List[ContactRead],
    summary="List contacts with company name, newest first",
)
async def list_contacts(db: AsyncSession = Depends(get_db_session)) -> List[ContactRead]:
    return await contact_service.list_contacts(db)


@router.get(
    "/contacts/{contact_id:int}",
    response_model=ContactDetail,
    responses={404: {"description": "Contact not found", "model": ErrorResponse}},
    summary="Get a contact with its activities",
)
async def get_contact(
    contact_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ContactDetail:
    return await contact_service.get_contact(db, contact_id)


@router.post(
    "/contacts",
    status_code=201,
    response_model=CreatedResponse,
    summary="Create a contact",
)
async def create_contact(
    payload: ContactCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return await contact_service.create_contact(db, payload)


@router.put(
    "/contacts/{contact_id:int}",
    response_model=MessageResponse,
    summary="Replace a contact's fields",
)
async def update_contact(
    contact_id: int,
    payload: ContactUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await contact_service.update_contact(db, contact_id, payload)


@router.delete(
    "/contacts/{contact_id:int}",
    response_model=MessageResponse,
    summary="Delete a contact",
)
async def delete_contact(
    contact_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await contact_service.delete_contact(db, contact_id)
