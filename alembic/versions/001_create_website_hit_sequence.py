"""Create the website_hit_sequence table.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "website_hit_sequence",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("sequence_name", sa.String(255), unique=True, nullable=False),
        sa.Column(
            "sequence_count", sa.BigInteger, nullable=False, server_default="0"
        ),
        sa.CheckConstraint(
            "sequence_count >= 0", name="ck_sequence_count_non_negative"
        ),
    )


def downgrade() -> None:
    op.drop_table("website_hit_sequence")
