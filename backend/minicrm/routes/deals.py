"""
MiniCRM Backend — Deal Route Handlers
=======================================

What:  GET/POST /api/deals and PUT /api/deals/{id}. There is no single-deal
       GET and no DELETE; those paths answer 404.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import get_db_session
from minicrm.schemas.common import CreatedResponse, MessageResponse
from minicrm.schemas.deal import DealCreate, DealRead, DealUpdate
from minicrm.services.deal_service import deal_service

router = APIRouter(prefix="/api", tags=["Deals"])


@router.get(
    "/deals",
    response_model=List[DealRead],
    summary="List deals with company name, newest first",
)
async def list_deals(db: AsyncSession = Depends(get_db_session)) -> List[DealRead]:
    return await deal_service.list_deals(db)


@router.post(
    "/deals",
    status_code=201,
    response_model=CreatedResponse,
    summary="Create a deal (stage defaults to 'lead')",
)
async def create_deal(
    payload: DealCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return await deal_service.create_deal(db, payload)


@router.put(
    "/deals/{deal_id:int}",
    response_model=MessageResponse,
    summary="Replace a deal's title, value, stage and close date",
)
async def update_deal(
    deal_id: int,
    payload: DealUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await deal_service.update_deal(db, deal_id, payload)
