"""Create sheet_rows table

Revision ID: 001
Revises:
Create Date: 2024-06-01 00:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "sheet_rows",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("spreadsheet_id", sa.String(), nullable=False),
        sa.Column("sheet_name", sa.String(), nullable=False),
        sa.Column("row_number", sa.Integer(), nullable=False),
        sa.Column("values", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("spreadsheet_id", "sheet_name", "row_number", name="uq_sheet_row"),
    )
    op.create_index(
        op.f("ix_sheet_rows_spreadsheet_id"),
        "sheet_rows",
        ["spreadsheet_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_sheet_rows_spreadsheet_id"), table_name="sheet_rows")
    op.drop_table("sheet_rows")
