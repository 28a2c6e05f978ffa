"""Postgres-backed sheet store adapter."""

from dataclasses import dataclass

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lead_intake.application.ports.sheet_store import SheetStore
from lead_intake.domain.errors import LeadPersistenceError
from lead_intake.infrastructure.db import get_db_session
from lead_intake.infrastructure.logging.logger import logger

from .models import SheetRowModel


@dataclass(frozen=True)
class SheetLocation:
    """Address of a sheet: spreadsheet identifier and sheet/tab name."""

    spreadsheet_id: str
    sheet_name: str


class PostgresSheetStore(SheetStore):
    """Postgres implementation of the lead sheet."""

    def __init__(self, location: SheetLocation) -> None:
        """
        Initialize Postgres sheet store.

        Args:
            location: Sheet to read and append to
        """
        self._location = location

    def _query(self, db: Session):
        return db.query(SheetRowModel).filter(
            SheetRowModel.spreadsheet_id == self._location.spreadsheet_id,
            SheetRowModel.sheet_name == self._location.sheet_name,
        )

    def _last_row_number(self, db: Session) -> int:
        last = (
            db.query(func.max(SheetRowModel.row_number))
            .filter(
                SheetRowModel.spreadsheet_id == self._location.spreadsheet_id,
                SheetRowModel.sheet_name == self._location.sheet_name,
            )
            .scalar()
        )
        return last or 0

    async def row_count(self) -> int:
        """
        Count the rows written so far.

        Returns:
            Number of rows, header included

        Raises:
            LeadPersistenceError: If the database cannot be read
        """
        db: Session = get_db_session()
        try:
            return self._last_row_number(db)
        except SQLAlchemyError as e:
            logger.error(f"Database error while counting rows of {self._location}: {str(e)}")
            raise LeadPersistenceError(f"Could not read sheet: {e}") from e
        finally:
            db.close()

    async def read_header(self) -> list[str]:
        """
        Read row 1.

        Returns:
            Header cells, or an empty list for an empty sheet

        Raises:
            LeadPersistenceError: If the database cannot be read
        """
        db: Session = get_db_session()
        try:
            model = self._query(db).filter(SheetRowModel.row_number == 1).first()
            return list(model.values) if model else []
        except SQLAlchemyError as e:
            logger.error(f"Database error while reading header of {self._location}: {str(e)}")
            raise LeadPersistenceError(f"Could not read sheet header: {e}") from e
        finally:
            db.close()

    async def append_row(self, values: list[str]) -> int:
        """
        Append a row below the last one.

        Args:
            values: Cell values

        Returns:
            Row number of the appended row

        Raises:
            LeadPersistenceError: If the row cannot be written
        """
        db: Session = get_db_session()
        try:
            row_number = self._last_row_number(db) + 1
            db.add(
                SheetRowModel(
                    spreadsheet_id=self._location.spreadsheet_id,
                    sheet_name=self._location.sheet_name,
                    row_number=row_number,
                    values=list(values),
                )
            )
            db.commit()
            return row_number
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while appending to {self._location}: {str(e)}")
            raise LeadPersistenceError(f"Could not append row: {e}") from e
        finally:
            db.close()

    async def rows(self) -> list[list[str]]:
        """
        Read every row.

        Returns:
            All rows ordered by row number, header first
        """
        db: Session = get_db_session()
        try:
            models = self._query(db).order_by(SheetRowModel.row_number).all()
            return [list(model.values) for model in models]
        except SQLAlchemyError as e:
            logger.error(f"Database error while listing rows of {self._location}: {str(e)}")
            return []
        finally:
            db.close()
