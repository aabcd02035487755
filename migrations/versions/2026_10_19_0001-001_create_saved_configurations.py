"""Create saved_configurations table

Adds:
- saved_configurations: bucket snapshots addressed by share code

Revision ID: 001
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "saved_configurations",
        sa.Column("code", sa.String(32), primary_key=True, comment="Opaque share code"),
        sa.Column("buckets", sa.JSON(), nullable=False, comment="Serialized buckets (selectedPhotos / photoConfigs)"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("saved_configurations")
