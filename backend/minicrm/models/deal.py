"""
MiniCRM Backend — Deal SQLAlchemy Model
=========================================

What:  ORM model representing the `deals` table (sales pipeline entries).

Stage values are free text. "lead" is the default for new deals and
"closed-lost" is the one stage the dashboard leaves out of pipeline value;
no other stage has meaning to the API.
"""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Date, DateTime, Float, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from minicrm.database import Base

DEFAULT_STAGE = "lead"
CLOSED_LOST_STAGE = "closed-lost"


class Deal(Base):
    __tablename__ = "deals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Weak reference to companies.id
    company_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    stage: Mapped[Optional[str]] = mapped_column(
        String(64),
        nullable=True,
        server_default=text(f"'{DEFAULT_STAGE}'"),
    )
    close_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_deals_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Deal(id={self.id}, title='{self.title}', stage='{self.stage}')>"
