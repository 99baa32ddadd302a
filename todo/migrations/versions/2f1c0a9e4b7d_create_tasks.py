"""create_tasks

Revision ID: 2f1c0a9e4b7d
Revises:
Create Date: 2026-10-19 10:02:11.418230

"""
from alembic import op
import sqlalchemy as sa



revision = '2f1c0a9e4b7d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("tasks")
