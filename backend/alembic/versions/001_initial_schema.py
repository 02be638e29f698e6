"""Initial schema — pledges.

Revision ID: 001_initial
Revises: None
Create Date: 2025-07-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "pledges",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("mobile", sa.Text, nullable=False),
        sa.Column("state", sa.Text, nullable=False, server_default=""),
        sa.Column("profile_type", sa.String(50), nullable=False),
        sa.Column("commitments", sa.JSON, nullable=False),
        sa.Column("message", sa.Text, nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_pledges_profile_type", "pledges", ["profile_type"])
    op.create_index("ix_pledges_created_at", "pledges", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_pledges_created_at", table_name="pledges")
    op.drop_index("ix_pledges_profile_type", table_name="pledges")
    op.drop_table("pledges")
