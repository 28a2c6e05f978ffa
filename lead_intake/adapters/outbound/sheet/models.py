"""SQLAlchemy ORM models for sheet rows."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class SheetRowModel(Base):
    """SQLAlchemy model for sheet_rows table (one row per sheet row, header included)."""

    __tablename__ = "sheet_rows"
    __table_args__ = (
        UniqueConstraint("spreadsheet_id", "sheet_name", "row_number", name="uq_sheet_row"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    spreadsheet_id = Column(String, nullable=False, index=True)
    sheet_name = Column(String, nullable=False)
    row_number = Column(Integer, nullable=False)  # 1 is the header row
    values = Column(JSON, nullable=False)  # list of cell strings
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
