"""tour_collaboration

Add what participants do on a tour once they have joined:
- tours.updated_at (drives the "new activity" marker)
- Votes (one like per participant and tour)
- Comments
- Tags shared across tours, and their assignment to tours
- Tour activity (when each participant last opened a tour)

Revision ID: 8e4b7d2c5a13
Revises: 3c1f0a2b9d47
Create Date: 2026-10-26 09:41:07.552310

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8e4b7d2c5a13"
down_revision: Union[str, Sequence[str], None] = "3c1f0a2b9d47"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "tours",
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("tour_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["tour_id"], ["tours.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("tour_id", "user_id", name="pk_votes"),
    )

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("tour_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["tour_id"], ["tours.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(content) BETWEEN 1 AND 5000",
            name="ck_comments_content_length",
        ),
    )
    op.create_index(
        "idx_comments_tour_created", "comments", ["tour_id", "created_at"]
    )

    # ========================================================================
    # TAGS and TOUR_TAGS tables
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_tags_name_lower", "tags", [sa.text("lower(name)")], unique=True
    )

    op.create_table(
        "tour_tags",
        sa.Column("tour_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["tour_id"], ["tours.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("tour_id", "tag_id", name="pk_tour_tags"),
    )

    # ========================================================================
    # TOUR_ACTIVITY table
    # ========================================================================
    op.create_table(
        "tour_activity",
        sa.Column("tour_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("last_viewed_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["tour_id"], ["tours.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("tour_id", "user_id", name="pk_tour_activity"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("tour_activity")
    op.drop_table("tour_tags")
    op.drop_index("uq_tags_name_lower", table_name="tags")
    op.drop_table("tags")
    op.drop_index("idx_comments_tour_created", table_name="comments")
    op.drop_table("comments")
    op.drop_table("votes")
    op.drop_column("tours", "updated_at")
