"""initial_schema

Create the schema for Meme Replicator:
- Users (email-anchored, lazily assigned unique handle)
- Memes (short ideas with a running score, baseline 100)
- Interactions (refute/refine/praise ledger, one per meme, user and type)

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-18 09:12:44.201533

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("handle", sa.String(32), nullable=True),  # Assigned lazily
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("last_login_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("handle", name="uq_users_handle"),
    )

    # ========================================================================
    # MEMES table
    # ========================================================================
    op.create_table(
        "memes",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=True),  # Legacy rows: NULL
        sa.Column("author", sa.Text(), nullable=False, server_default="Anonymous"),
        sa.Column("score", sa.Integer(), nullable=False, server_default="100"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "length(btrim(content)) > 0", name="ck_memes_content_not_blank"
        ),
    )
    op.create_index(
        "idx_memes_created_at", "memes", [sa.text("created_at DESC")]
    )
    op.create_index("idx_memes_score", "memes", [sa.text("score DESC")])
    op.create_index("idx_memes_user_id", "memes", ["user_id"])

    # ========================================================================
    # INTERACTIONS table (score ledger)
    # ========================================================================
    op.create_table(
        "interactions",
        sa.Column("id", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("meme_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=True),  # Legacy rows: NULL
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["meme_id"], ["memes.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "type IN ('refute', 'refine', 'praise')", name="ck_interactions_type"
        ),
        sa.UniqueConstraint(
            "meme_id", "user_id", "type", name="uq_interactions_meme_user_type"
        ),
    )
    op.create_index(
        "idx_interactions_meme_created",
        "interactions",
        ["meme_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_interactions_user_id", "interactions", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("interactions")
    op.drop_table("memes")
    op.drop_table("users")
