"""create tags, grants, vcs, mentors and their tag link tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("type", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("name", "type", name="uq_tags_name_type"),
    )
    op.create_index(op.f("ix_tags_id"), "tags", ["id"], unique=False)
    op.create_index(op.f("ix_tags_type"), "tags", ["type"], unique=False)

    op.create_table(
        "grants",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("organization", sa.String(), nullable=True),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("status", sa.String(), nullable=True),
        sa.Column("amount_max", sa.String(), nullable=True),
        sa.Column("dpiit_required", sa.Boolean(), nullable=True),
        sa.Column("patent_required", sa.Boolean(), nullable=True),
        sa.Column("prototype_required", sa.Boolean(), nullable=True),
        sa.Column("technical_cofounder_required", sa.Boolean(), nullable=True),
        sa.Column("full_time_commitment", sa.Boolean(), nullable=True),
        sa.Column("tech_focus_required", sa.Boolean(), nullable=True),
        sa.Column("women_led_focus", sa.Boolean(), nullable=True),
        sa.Column("student_focus", sa.Boolean(), nullable=True),
        sa.Column("mentorship_included", sa.Boolean(), nullable=True),
        sa.Column("workspace_provided", sa.Boolean(), nullable=True),
        sa.Column("network_access", sa.Boolean(), nullable=True),
        sa.Column("application_deadline", sa.Date(), nullable=True),
        sa.Column("application_link", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f("ix_grants_id"), "grants", ["id"], unique=False)

    op.create_table(
        "vcs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("website", sa.String(), nullable=True),
        sa.Column("linkedin", sa.String(), nullable=True),
        sa.Column("country_based_of", sa.String(), nullable=True),
        sa.Column("about", sa.Text(), nullable=True),
        sa.Column("key_person", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(op.f("ix_vcs_id"), "vcs", ["id"], unique=False)
    op.create_index(op.f("ix_vcs_country_based_of"), "vcs", ["country_based_of"], unique=False)

    op.create_table(
        "mentors",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("photo_url", sa.String(), nullable=True),
        sa.Column("superpower", sa.String(), nullable=True),
        sa.Column("about", sa.Text(), nullable=True),
        sa.Column("languages", sa.JSON(), nullable=True),
        sa.Column("rate_tier", sa.String(), nullable=True),
        sa.Column("linkedin_url", sa.String(), nullable=True),
        sa.Column("calendly_url", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        "grant_tags",
        sa.Column("grant_id", sa.Integer(), sa.ForeignKey("grants.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("tag_id", sa.Integer(), sa.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_table(
        "vc_tags",
        sa.Column("vc_id", sa.Integer(), sa.ForeignKey("vcs.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("tag_id", sa.Integer(), sa.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_table(
        "mentor_tags",
        sa.Column("mentor_id", sa.String(length=36), sa.ForeignKey("mentors.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("tag_id", sa.Integer(), sa.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_index("ix_grant_tags_tag_id", "grant_tags", ["tag_id"], unique=False)
    op.create_index("ix_vc_tags_tag_id", "vc_tags", ["tag_id"], unique=False)
    op.create_index("ix_mentor_tags_tag_id", "mentor_tags", ["tag_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_mentor_tags_tag_id", table_name="mentor_tags")
    op.drop_index("ix_vc_tags_tag_id", table_name="vc_tags")
    op.drop_index("ix_grant_tags_tag_id", table_name="grant_tags")
    op.drop_table("mentor_tags")
    op.drop_table("vc_tags")
    op.drop_table("grant_tags")
    op.drop_table("mentors")
    op.drop_index(op.f("ix_vcs_country_based_of"), table_name="vcs")
    op.drop_index(op.f("ix_vcs_id"), table_name="vcs")
    op.drop_table("vcs")
    op.drop_index(op.f("ix_grants_id"), table_name="grants")
    op.drop_table("grants")
    op.drop_index(op.f("ix_tags_type"), table_name="tags")
    op.drop_index(op.f("ix_tags_id"), table_name="tags")
    op.drop_table("tags")
