"""MiniCRM Backend — Dashboard schema."""

from pydantic import BaseModel, Field

from minicrm.schemas.common import Number


class DashboardStats(BaseModel):
    """
    Four independent aggregates, each 0 when the store returns no value.

    The reads are not wrapped in a transaction, so under concurrent writes
    the numbers need not describe a single point in time.
    """
    contacts: int = Field(default=0, description="Number of contacts")
    companies: int = Field(default=0, description="Number of companies")
    deals: int = Field(default=0, description="Number of deals")
    pipeline_value: Number = Field(
        default=0,
        description="Sum of deal value over every stage except 'closed-lost'",
    )
