"""
MiniCRM Backend — Company Service
===================================

What:  Maps each company operation to a single SQL statement.
How:   Builds SQLAlchemy statements against the Company model, executes them
       on the request's session, and returns Pydantic response models.
Who:   Called by the /api/companies route handlers.

Statement per operation:
    list    SELECT * FROM companies ORDER BY created_at DESC
    get     SELECT * FROM companies WHERE id = ?
    create  INSERT INTO companies (name, website, industry) VALUES (?, ?, ?)
    update  UPDATE companies SET name = ?, website = ?, industry = ? WHERE id = ?
    delete  DELETE FROM companies WHERE id = ?

Deleting a company leaves contacts and deals that reference it untouched.
"""

import logging
from typing import List

from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import is_storable_id
from minicrm.exceptions import DatabaseError, NotFoundError
from minicrm.models.company import Company
from minicrm.schemas.common import CreatedResponse, MessageResponse
from minicrm.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate

logger = logging.getLogger(__name__)


class CompanyService:
    """
    Stateless data mapper for the companies table.

    Error Handling Strategy:
        A missing row on get() raises NotFoundError. Every other failure is
        wrapped in DatabaseError with the driver's message, so the route
        layer only ever sees the two application exceptions.
    """

    async def list_companies(self, db: AsyncSession) -> List[CompanyRead]:
        try:
            result = await db.execute(
                select(Company).order_by(desc(Company.created_at), desc(Company.id))
            )
            return [CompanyRead.model_validate(c) for c in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing companies: %s", e, exc_info=True)
            raise DatabaseError.from_exception(e) from e

    async def get_company(self, db: AsyncSession, company_id: int) -> CompanyRead:
        """
        Fetch one company by id.

        Raises:
            NotFoundError: No row with this id (→ 404 "Company not found")
            DatabaseError: Query execution failed (→ 500)
        """
        if not is_storable_id(company_id):
            raise NotFoundError("Company", company_id)

        try:
            result = await db.execute(select(Company).where(Company.id == company_id))
            company = result.scalar_one_or_none()

            if company is None:
                raise NotFoundError("Company", company_id)

            return CompanyRead.model_validate(company)

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error fetching company %s: %s", company_id, e)
            raise DatabaseError.from_exception(e, company_id=company_id) from e

    async def create_company(self, db: AsyncSession, payload: CompanyCreate) -> CreatedResponse:
        """
        Insert a company; the store assigns id and created_at.

        Optional fields that are absent or empty are bound as NULL. `name` is
        passed through as-is, so a missing name fails on the NOT NULL
        constraint and surfaces as DatabaseError.
        """
        try:
            company = Company(
                name=payload.name,
                website=payload.website or None,
                industry=payload.industry or None,
            )
            db.add(company)
            await db.flush()  # Assigns the id without committing
            logger.info("Company created: %s", company.id)
            return CreatedResponse(id=company.id, message="Company created successfully")
        except Exception as e:
            logger.error("Database error creating company: %s", e)
            raise DatabaseError.from_exception(e) from e

    async def update_company(
        self, db: AsyncSession, company_id: int, payload: CompanyUpdate
    ) -> MessageResponse:
        """Replace every editable field. Fields missing from the body become NULL."""
        if not is_storable_id(company_id):
            return MessageResponse(message="Company updated successfully")
        try:
            await db.execute(
                update(Company)
                .where(Company.id == company_id)
                .values(
                    name=payload.name,
                    website=payload.website,
                    industry=payload.industry,
                )
            )
            return MessageResponse(message="Company updated successfully")
        except Exception as e:
            logger.error("Database error updating company %s: %s", company_id, e)
            raise DatabaseError.from_exception(e, company_id=company_id) from e

    async def delete_company(self, db: AsyncSession, company_id: int) -> MessageResponse:
        if not is_storable_id(company_id):
            return MessageResponse(message="Company deleted successfully")
        try:
            await db.execute(delete(Company).where(Company.id == company_id))
            return MessageResponse(message="Company deleted successfully")
        except Exception as e:
            logger.error("Database error deleting company %s: %s", company_id, e)
            raise DatabaseError.from_exception(e, company_id=company_id) from e


company_service = CompanyService()
