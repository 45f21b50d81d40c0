"""
MiniCRM Backend — Activity SQLAlchemy Model
=============================================

What:  ORM model representing the `activities` table (calls, emails,
       meetings logged against a contact).

Activities are only ever inserted and listed per contact; there is no
update or delete operation for them.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from minicrm.database import Base


class Activity(Base):
    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Required, but only by NOT NULL: the contact need not exist
    contact_id: Mapped[int] = mapped_column(Integer, nullable=False)

    type: Mapped[str] = mapped_column(String(64), nullable=False)
    subject: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_activities_contact_created", "contact_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, contact_id={self.contact_id}, type='{self.type}')>"
