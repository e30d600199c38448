"""Create ledger state and history tables.

Revision ID: 0001_ledger_tables
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

from titleledger.adapters.sqlalchemy.mappings import UTCDateTime

revision = "0001_ledger_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "ledger_state",
        sa.Column("key", sa.String(length=255), nullable=False),
        sa.Column("value", sa.LargeBinary(), nullable=False),
        sa.PrimaryKeyConstraint("key", name=op.f("pk_ledger_state")),
    )
    op.create_table(
        "ledger_history",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("key", sa.String(length=255), nullable=False),
        sa.Column("tx_id", sa.String(length=64), nullable=False),
        sa.Column("value", sa.LargeBinary(), nullable=True),
        sa.Column("recorded_at", UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_ledger_history")),
    )
    op.create_index("ix_ledger_history_key_id", "ledger_history", ["key", "id"])


def downgrade() -> None:
    op.drop_index("ix_ledger_history_key_id", table_name="ledger_history")
    op.drop_table("ledger_history")
    op.drop_table("ledger_state")
