"""Initial schema — patients table.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

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
        "patients",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("medical_id", sa.String(50), nullable=False, unique=True),
        sa.Column("device_id", sa.BigInteger, nullable=True),
        sa.Column("diabetes_type", sa.String(20), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("weight", sa.Float, nullable=True),
        sa.Column("height", sa.Float, nullable=True),
        sa.Column("emergency_contact", sa.String(255), nullable=True),
    )
    op.create_index("ix_patients_device_id", "patients", ["device_id"])


def downgrade() -> None:
    op.drop_index("ix_patients_device_id", table_name="patients")
    op.drop_table("patients")
