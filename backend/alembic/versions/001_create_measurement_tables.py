"""Create users and measurement tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `users`, `blood_pressures`, `points` and `weights`.
How:   BIGINT identity keys; each measurement references users.id and is
       indexed on date (newest-first listings) and user_id (personal listings).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Tables whose rows must always name their owner
_OWNER_REQUIRED = {"blood_pressures"}

_MEASUREMENTS = {
    "blood_pressures": [
        sa.Column("systolic", sa.Integer(), nullable=True),
        sa.Column("diastolic", sa.Integer(), nullable=True),
    ],
    "points": [
        sa.Column("points", sa.Integer(), nullable=True),
    ],
    "weights": [
        sa.Column("weight", sa.Float(), nullable=True),
    ],
}


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("login", sa.String(100), nullable=False),
        sa.Column("email", sa.String(254), nullable=True),
        sa.Column("activated", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("login"),
    )

    for table, columns in _MEASUREMENTS.items():
        op.create_table(
            table,
            sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
            sa.Column("date", sa.Date(), nullable=True),
            *columns,
            sa.Column("user_id", sa.BigInteger(), nullable=table not in _OWNER_REQUIRED),
            sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(f"idx_{table}_date", table, ["date"])
        op.create_index(f"idx_{table}_user_id", table, ["user_id"])


def downgrade() -> None:
    """Drop every table. Destructive: all measurements are lost."""
    for table in reversed(list(_MEASUREMENTS)):
        op.drop_index(f"idx_{table}_user_id", table_name=table)
        op.drop_index(f"idx_{table}_date", table_name=table)
        op.drop_table(table)
    op.drop_table("users")
