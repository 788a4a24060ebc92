"""Promotion calendar tables and admin accounts.

Revision ID: 20260105_promotions_initial
Revises:
Create Date: 2026-01-05
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20260105_promotions_initial"
down_revision = None
branch_labels = None
depends_on = None


def _promotion_columns():
    return [
        sa.Column("icon", sa.String(255), nullable=True),
        sa.Column("link", sa.String(1024), nullable=True),
        sa.Column("button", sa.String(255), nullable=True),
        sa.Column("button_color", sa.String(32), nullable=True),
        sa.Column("category", sa.String(64), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("rich_html", sa.Text(), nullable=True),
        sa.Column("translations", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    ]


def upgrade():
    op.create_table(
        "admin_user",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_admin_user_email", "admin_user", ["email"])

    op.create_table(
        "weekly_promotion",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("weekday", sa.Integer(), nullable=False),
        *_promotion_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("weekday", name="uq_weekly_promotion_weekday"),
    )

    op.create_table(
        "weekly_plan",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("weekday", sa.Integer(), nullable=False),
        *_promotion_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("year", "month", "weekday", name="uq_weekly_plan_year_month_weekday"),
    )
    op.create_index("ix_weekly_plan_year_month", "weekly_plan", ["year", "month"])

    op.create_table(
        "special_promotion",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("month", sa.Integer(), nullable=False),
        sa.Column("day", sa.Integer(), nullable=False),
        *_promotion_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_special_promotion_year_month_active",
        "special_promotion",
        ["year", "month", "active"],
    )

    op.create_table(
        "calendar_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("bg_image_url", sa.String(1024), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade():
    op.drop_table("calendar_settings")
    op.drop_index("ix_special_promotion_year_month_active", table_name="special_promotion")
    op.drop_table("special_promotion")
    op.drop_index("ix_weekly_plan_year_month", table_name="weekly_plan")
    op.drop_table("weekly_plan")
    op.drop_table("weekly_promotion")
    op.drop_index("ix_admin_user_email", table_name="admin_user")
    op.drop_table("admin_user")
