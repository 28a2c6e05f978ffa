"""Append leads to the sheet store."""

from dataclasses import dataclass, field

from lead_intake.application.dtos.lead_record import LeadRecord
from lead_intake.application.ports.sheet_store import SheetStore


@dataclass(frozen=True)
class SavedRow:
    """Where a lead ended up in the sheet."""

    row_number: int
    header_created: bool
    dropped_fields: list[str] = field(default_factory=list)


def project_onto_header(header: list[str], record: LeadRecord) -> list[str]:
    """
    Line a record up with the header columns.

    Args:
        header: Header row
        record: Lead record

    Returns:
        One cell per header column; missing fields become ""
    """
    return [record.get(column) or "" for column in header]


class SaveLeadToSheet:
    """Appends a lead below the sheet's fixed header row.

    The first lead ever written defines the header from its own keys. Later
    leads are projected onto that header, so a field the header lacks is not
    stored.
    """

    def __init__(self, sheet_store: SheetStore) -> None:
        """
        Initialize use case.

        Args:
            sheet_store: Sheet to append to
        """
        self._sheet_store = sheet_store

    async def execute(self, record: LeadRecord) -> SavedRow:
        """
        Append a lead.

        Args:
            record: Lead record, keys in submission order

        Returns:
            Row placement details
        """
        header_created = False
        if await self._sheet_store.row_count() == 0:
            await self._sheet_store.append_row(list(record.keys()))
            header_created = True

        header = await self._sheet_store.read_header()
        row_number = await self._sheet_store.append_row(project_onto_header(header, record))

        known = set(header)
        return SavedRow(
            row_number=row_number,
            header_created=header_created,
            dropped_fields=[key for key in record if key not in known],
        )
