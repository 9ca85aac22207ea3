"""Initial schema: prescriber_availability, bookings.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "prescriber_availability",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("prescriber_id", sa.String(), nullable=False),
        sa.Column("availability", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_prescriber_availability_prescriber_id"),
        "prescriber_availability",
        ["prescriber_id"],
        unique=True,
    )

    # No unique constraint on (prescriber_id, date, time): concurrent bookings are not guarded.
    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("prescriber_id", sa.String(), nullable=False),
        sa.Column("date", sa.String(), nullable=False),
        sa.Column("time", sa.String(), nullable=False),
        sa.Column("reason", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_bookings_prescriber_id"), "bookings", ["prescriber_id"], unique=False)
    op.create_index(op.f("ix_bookings_date"), "bookings", ["date"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_bookings_date"), table_name="bookings")
    op.drop_index(op.f("ix_bookings_prescriber_id"), table_name="bookings")
    op.drop_table("bookings")
    op.drop_index(op.f("ix_prescriber_availability_prescriber_id"), table_name="prescriber_availability")
    op.drop_table("prescriber_availability")
