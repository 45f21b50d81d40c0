"""
MiniCRM Backend — Deal Service
================================

What:  List, create and update deals.
How:   Listing joins companies for company_name (LEFT OUTER JOIN). New deals
       default to stage "lead". Updates rewrite title, value, stage and
       close_date; the company of a deal is fixed at creation.
Who:   Called by the /api/deals route handlers.
"""

import logging
from typing import List

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import is_storable_id
from minicrm.exceptions import DatabaseError
from minicrm.models.company import Company
from minicrm.models.deal import DEFAULT_STAGE, Deal
from minicrm.schemas.common import CreatedResponse, MessageResponse
from minicrm.schemas.deal import DealCreate, DealRead, DealUpdate

logger = logging.getLogger(__name__)


class DealService:

    async def list_deals(self, db: AsyncSession) -> List[DealRead]:
        try:
            result = await db.execute(
                select(Deal.__table__, Company.name.label("company_name"))
                .outerjoin(Company, Deal.company_id == Company.id)
                .order_by(desc(Deal.created_at), desc(Deal.id))
            )
            return [DealRead.model_validate(dict(row)) for row in result.mappings().all()]
        except Exception as e:
            logger.error("Database error listing deals: %s", e, exc_info=True)
            raise DatabaseError.from_exception(e) from e

    async def create_deal(self, db: AsyncSession, payload: DealCreate) -> CreatedResponse:
        """
        Insert a deal.

        A missing or empty stage becomes "lead"; a missing or zero value and a
        missing close_date become NULL. company_id is bound as given.
        """
        try:
            deal = Deal(
                company_id=payload.company_id,
                title=payload.title,
                value=payload.value or None,
                stage=payload.stage or DEFAULT_STAGE,
                close_date=payload.close_date or None,
            )
            db.add(deal)
            await db.flush()
            logger.info("Deal created: %s (stage=%s)", deal.id, deal.stage)
            return CreatedResponse(id=deal.id, message="Deal created successfully")
        except Exception as e:
            logger.error("Database error creating deal: %s", e)
            raise DatabaseError.from_exception(e) from e

    async def update_deal(
        self, db: AsyncSession, deal_id: int, payload: DealUpdate
    ) -> MessageResponse:
        if not is_storable_id(deal_id):
            return MessageResponse(message="Deal updated successfully")
        try:
            await db.execute(
                update(Deal)
                .where(Deal.id == deal_id)
                .values(
                    title=payload.title,
                    value=payload.value,
                    stage=payload.stage,
                    close_date=payload.close_date,
                )
            )
            return MessageResponse(message="Deal updated successfully")
        except Exception as e:
            logger.error("Database error updating deal %s: %s", deal_id, e)
            raise DatabaseError.from_exception(e, deal_id=deal_id) from e


deal_service = DealService()
