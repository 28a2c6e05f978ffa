"""Sheet store adapters."""

from lead_intake.adapters.outbound.sheet.in_memory_sheet_store import InMemorySheetStore
from lead_intake.adapters.outbound.sheet.postgres_sheet_store import PostgresSheetStore

__all__ = [
    "InMemorySheetStore",
    "PostgresSheetStore",
]
