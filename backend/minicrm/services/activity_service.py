"""
MiniCRM Backend — Activity Service
====================================

What:  Inserts activities and lists them per contact, newest first.
Who:   Called by POST /api/activities, GET /api/contacts/{id}/activities,
       and ContactService.get_contact (embedded activity list).

The contact a new activity names is not checked for existence.
"""

import logging
from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import is_storable_id
from minicrm.exceptions import DatabaseError
from minicrm.models.activity import Activity
from minicrm.schemas.activity import ActivityCreate, ActivityRead
from minicrm.schemas.common import CreatedResponse

logger = logging.getLogger(__name__)


class ActivityService:

    async def list_for_contact(self, db: AsyncSession, contact_id: int) -> List[ActivityRead]:
        """SELECT * FROM activities WHERE contact_id = ? ORDER BY created_at DESC"""
        if not is_storable_id(contact_id):
            return []
        try:
            result = await db.execute(
                select(Activity)
                .where(Activity.contact_id == contact_id)
                .order_by(desc(Activity.created_at), desc(Activity.id))
            )
            return [ActivityRead.model_validate(a) for a in result.scalars().all()]
        except Exception as e:
            logger.error("Database error listing activities for contact %s: %s", contact_id, e)
            raise DatabaseError.from_exception(e, contact_id=contact_id) from e

    async def create_activity(self, db: AsyncSession, payload: ActivityCreate) -> CreatedResponse:
        """contact_id and type are required by the table, subject and notes default to NULL."""
        try:
            activity = Activity(
                contact_id=payload.contact_id,
                type=payload.type,
                subject=payload.subject or None,
                notes=payload.notes or None,
            )
            db.add(activity)
            await db.flush()
            logger.info("Activity created: %s (contact %s)", activity.id, activity.contact_id)
            return CreatedResponse(id=activity.id, message="Activity created successfully")
        except Exception as e:
            logger.error("Database error creating activity: %s", e)
            raise DatabaseError.from_exception(e) from e


activity_service = ActivityService()
