"""create useraccount

Revision ID: 4f1c2a9e7b31
Revises: 
Create Date: 2026-10-19 10:02:11.482915

"""
from alembic import op
import sqlalchemy as sa



revision = '4f1c2a9e7b31'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "useraccount",
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("avatar", sa.String(), nullable=False),
        sa.Column("cover_image", sa.String(), nullable=False),
        sa.Column("watch_history", sa.JSON(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("refresh_token", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index("ix_useraccount_username", "useraccount", ["username"], unique=True)
    op.create_index("ix_useraccount_email", "useraccount", ["email"], unique=True)
    op.create_index("ix_useraccount_full_name", "useraccount", ["full_name"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_useraccount_full_name", table_name="useraccount")
    op.drop_index("ix_useraccount_email", table_name="useraccount")
    op.drop_index("ix_useraccount_username", table_name="useraccount")
    op.drop_table("useraccount")
