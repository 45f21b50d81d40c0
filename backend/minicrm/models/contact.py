"""
MiniCRM Backend — Contact SQLAlchemy Model
============================================

What:  ORM model representing the `contacts` table.

company_id is a weak reference: it may name a company that was deleted or
never existed. Listing joins it with LEFT OUTER JOIN, so such contacts show
`company_name = null`.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from minicrm.database import Base


class Contact(Base):
    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    # No ForeignKey(): existence is not enforced and deletes do not cascade
    company_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_contacts_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<Contact(id={self.id}, name='{self.first_name} {self.last_name}', "
            f"company_id={self.company_id})>"
        )
