"""
MiniCRM Backend — Dashboard Service
=====================================

What:  Four scalar aggregates for the dashboard.

    SELECT COUNT(*) FROM contacts
    SELECT COUNT(*) FROM companies
    SELECT COUNT(*) FROM deals
    SELECT SUM(value) FROM deals WHERE stage != 'closed-lost'

Each is read independently and defaults to 0 when the store returns NULL
(SUM over no rows). A deal whose stage is NULL is not counted in the sum,
since `NULL != 'closed-lost'` is not true in SQL.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.exceptions import DatabaseError
from minicrm.models.company import Company
from minicrm.models.contact import Contact
from minicrm.models.deal import CLOSED_LOST_STAGE, Deal
from minicrm.schemas.dashboard import DashboardStats

logger = logging.getLogger(__name__)


class DashboardService:

    async def get_stats(self, db: AsyncSession) -> DashboardStats:
        try:
            contacts = await self._scalar(db, select(func.count()).select_from(Contact))
            companies = await self._scalar(db, select(func.count()).select_from(Company))
            deals = await self._scalar(db, select(func.count()).select_from(Deal))
            pipeline_value = await self._scalar(
                db,
                select(func.sum(Deal.value)).where(Deal.stage != CLOSED_LOST_STAGE),
            )
            return DashboardStats(
                contacts=contacts or 0,
                companies=companies or 0,
                deals=deals or 0,
                pipeline_value=pipeline_value or 0,
            )
        except Exception as e:
            logger.error("Database error computing dashboard stats: %s", e, exc_info=True)
            raise DatabaseError.from_exception(e) from e

    @staticmethod
    async def _scalar(db: AsyncSession, statement):
        result = await db.execute(statement)
        return result.scalar()


dashboard_service = DashboardService()
