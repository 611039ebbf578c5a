"""create tweet

Revision ID: 9b7e3d1c5a20
Revises: 4f1c2a9e7b31
Create Date: 2026-10-20 14:37:52.104618

"""
from alembic import op
import sqlalchemy as sa



revision = '9b7e3d1c5a20'
down_revision = '4f1c2a9e7b31'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tweet",
        sa.Column("tweet_id", sa.Uuid(), nullable=False),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("content", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["useraccount.user_id"]),
        sa.PrimaryKeyConstraint("tweet_id"),
    )
    op.create_index("ix_tweet_owner_id", "tweet", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_tweet_owner_id", table_name="tweet")
    op.drop_table("tweet")
