"""
MiniCRM Backend — Contact Service
===================================

What:  CRUD for contacts, with each row joined to its company's name.
How:   Contact reads use one SELECT with a LEFT OUTER JOIN on companies, so a
       contact whose company_id is NULL or points at a deleted company still
       lists, with company_name = NULL.
Who:   Called by the /api/contacts route handlers.

Fetching one contact issues two statements: the joined contact row, then its
activities. They run without a shared transaction snapshot; an activity
written between the two may or may not appear.
"""

import logging
from typing import List

from sqlalchemy import delete, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import is_storable_id
from minicrm.exceptions import DatabaseError, NotFoundError
from minicrm.models.company import Company
from minicrm.models.contact import Contact
from minicrm.schemas.common import CreatedResponse, MessageResponse
from minicrm.schemas.contact import ContactCreate, ContactDetail, ContactRead, ContactUpdate
from minicrm.services.activity_service import activity_service

logger = logging.getLogger(__name__)


def _contacts_with_company_name():
    """SELECT contacts.*, companies.name AS company_name FROM contacts LEFT JOIN companies"""
    return select(
        Contact.__table__,
        Company.name.label("company_name"),
    ).outerjoin(Company, Contact.company_id == Company.id)


class ContactService:

    async def list_contacts(self, db: AsyncSession) -> List[ContactRead]:
        try:
            result = await db.execute(
                _contacts_with_company_name().order_by(
                    desc(Contact.created_at), desc(Contact.id)
                )
            )
            return [ContactRead.model_validate(dict(row)) for row in result.mappings().all()]
        except Exception as e:
            logger.error("Database error listing contacts: %s", e, exc_info=True)
            raise DatabaseError.from_exception(e) from e

    async def get_contact(self, db: AsyncSession, contact_id: int) -> ContactDetail:
        """
        Fetch one contact with company name and its activities (newest first).

        Raises:
            NotFoundError: No contact with this id (→ 404 "Contact not found")
            DatabaseError: Either query failed (→ 500)
        """
        if not is_storable_id(contact_id):
            raise NotFoundError("Contact", contact_id)

        try:
            result = await db.execute(
                _contacts_with_company_name().where(Contact.id == contact_id)
            )
            row = result.mappings().first()

            if row is None:
                raise NotFoundError("Contact", contact_id)

        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Database error fetching contact %s: %s", contact_id, e)
            raise DatabaseError.from_exception(e, contact_id=contact_id) from e

        activities = await activity_service.list_for_contact(db, contact_id)
        return ContactDetail.model_validate({**dict(row), "activities": activities})

    async def create_contact(self, db: AsyncSession, payload: ContactCreate) -> CreatedResponse:
        try:
            contact = Contact(
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email or None,
                phone=payload.phone or None,
                company_id=payload.company_id or None,
            )
            db.add(contact)
            await db.flush()
            logger.info("Contact created: %s", contact.id)
            return CreatedResponse(id=contact.id, message="Contact created successfully")
        except Exception as e:
            logger.error("Database error creating contact: %s", e)
            raise DatabaseError.from_exception(e) from e

    async def update_contact(
        self, db: AsyncSession, contact_id: int, payload: ContactUpdate
    ) -> MessageResponse:
        """Replace every editable field. Fields missing from the body become NULL."""
        if not is_storable_id(contact_id):
            return MessageResponse(message="Contact updated successfully")
        try:
            await db.execute(
                update(Contact)
                .where(Contact.id == contact_id)
                .values(
                    first_name=payload.first_name,
                    last_name=payload.last_name,
                    email=payload.email,
                    phone=payload.phone,
                    company_id=payload.company_id,
                )
            )
            return MessageResponse(message="Contact updated successfully")
        except Exception as e:
            logger.error("Database error updating contact %s: %s", contact_id, e)
            raise DatabaseError.from_exception(e, contact_id=contact_id) from e

    async def delete_contact(self, db: AsyncSession, contact_id: int) -> MessageResponse:
        # Activities of the contact are kept
        if not is_storable_id(contact_id):
            return MessageResponse(message="Contact deleted successfully")
        try:
            await db.execute(delete(Contact).where(Contact.id == contact_id))
            return MessageResponse(message="Contact deleted successfully")
        except Exception as e:
            logger.error("Database error deleting contact %s: %s", contact_id, e)
            raise DatabaseError.from_exception(e, contact_id=contact_id) from e


contact_service = ContactService()
