"""
MiniCRM Backend — ORM Models
==============================

Importing this package registers every table on `Base.metadata`, which the
test suite uses to create the schema.

Tables:
    companies   ← referenced by contacts.company_id, deals.company_id
    contacts    ← referenced by activities.contact_id
    activities
    deals

References between tables are plain integer columns: the store enforces
no foreign keys and deletes never cascade.
"""

from minicrm.models.activity import Activity
from minicrm.models.company import Company
from minicrm.models.contact import Contact
from minicrm.models.deal import Deal

__all__ = ["Activity", "Company", "Contact", "Deal"]
