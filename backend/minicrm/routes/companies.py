"""
MiniCRM Backend — Company Route Handlers
==========================================

What:  /api/companies collection and item endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import get_db_session
from minicrm.schemas.common import CreatedResponse, ErrorResponse, MessageResponse
from minicrm.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from minicrm.services.company_service import company_service


router = APIRouter(prefix="/api", tags=["Companies"])


@router.get(
    "/companies",
    response_model=List[CompanyRead],
    summary="List companies, newest first",
)
async def list_companies(db: AsyncSession = Depends(get_db_session)) -> List[CompanyRead]:
    return await company_service.list_companies(db)


@router.get(
    "/companies/{company_id:int}",
    response_model=CompanyRead,
    responses={404: {"description": "Company not found", "model": ErrorResponse}},
    summary="Get a single company by ID",
)
async def get_company(
    company_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> CompanyRead:
    return await company_service.get_company(db, company_id)


@router.post(
    "/companies",
    status_code=201,
    response_model=CreatedResponse,
    summary="Create a company",
)
async def create_company(
    payload: CompanyCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CreatedResponse:
    return await company_service.create_company(db, payload)


@router.put(
    "/companies/{company_id:int}",
    response_model=MessageResponse,
    summary="Replace a company's fields",
    description="Every field is written; fields left out of the body are set to null.",
)
async def update_company(
    company_id: int,
    payload: CompanyUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await company_service.update_company(db, company_id, payload)


@router.delete(
    "/companies/{company_id:int}",
    response_model=MessageResponse,
    summary="Delete a company",
    description="Contacts and deals referencing the company are left as they are.",
)
async def delete_company(
    company_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await company_service.delete_company(db, company_id)
