"""Sheet store port."""

from abc import ABC, abstractmethod


class SheetStore(ABC):
    """Port interface for the append-only lead sheet.

    Row 1 holds the header; every later row is one lead. Rows are never
    updated or deleted.
    """

    @abstractmethod
    async def row_count(self) -> int:
        """
        Count the rows written so far, header included.

        Returns:
            Number of rows (0 for an empty sheet)
        """
        pass

    @abstractmethod
    async def read_header(self) -> list[str]:
        """
        Read row 1.

        Returns:
            Header cells, or an empty list for an empty sheet
        """
        pass

    @abstractmethod
    async def append_row(self, values: list[str]) -> int:
        """
        Append a row below the last one.

        Args:
            values: Cell values

        Returns:
            Row number of the appended row (1-based)
        """
        pass

    @abstractmethod
    async def rows(self) -> list[list[str]]:
        """
        Read every row, header first.

        Returns:
            All rows (used for debug/demo purposes)
        """
        pass
