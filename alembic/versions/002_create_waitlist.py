"""create waitlist

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "002"
down_revision = "001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "waitlist",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("source", sa.String(length=100), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f("ix_waitlist_id"), "waitlist", ["id"], unique=False)
    op.create_index(op.f("ix_waitlist_email"), "waitlist", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_waitlist_email"), table_name="waitlist")
    op.drop_index(op.f("ix_waitlist_id"), table_name="waitlist")
    op.drop_table("waitlist")
