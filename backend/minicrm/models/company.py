"""
MiniCRM Backend — Company SQLAlchemy Model
============================================

What:  ORM model representing the `companies` table.
Who:   Used by CompanyService for CRUD and joined by the contact/deal listings
       for `company_name`.

Table Design:
    - Integer autoincrement id, assigned by the store on insert
    - name required; website and industry nullable
    - created_at set by the store (CURRENT_TIMESTAMP), never updated
    - Index on created_at: every listing is newest first
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from minicrm.database import Base


class Company(Base):
    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    website: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    industry: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_companies_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name='{self.name}')>"
