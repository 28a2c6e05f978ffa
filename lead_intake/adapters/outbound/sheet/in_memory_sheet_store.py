"""In-memory sheet store adapter."""

from lead_intake.application.ports.sheet_store import SheetStore


class InMemorySheetStore(SheetStore):
    """In-memory implementation of the lead sheet."""

    def __init__(self) -> None:
        """Initialize an empty sheet."""
        self._rows: list[list[str]] = []

    async def row_count(self) -> int:
        """
        Count the rows written so far.

        Returns:
            Number of rows, header included
        """
        return len(self._rows)

    async def read_header(self) -> list[str]:
        """
        Read row 1.

        Returns:
            Header cells, or an empty list for an empty sheet
        """
        return list(self._rows[0]) if self._rows else []

    async def append_row(self, values: list[str]) -> int:
        """
        Append a row.

        Args:
            values: Cell values

        Returns:
            Row number of the appended row
        """
        self._rows.append(list(values))
        return len(self._rows)

    async def rows(self) -> list[list[str]]:
        """
        Read every row.

        Returns:
            Copies of all rows, header first
        """
        return [list(row) for row in self._rows]
