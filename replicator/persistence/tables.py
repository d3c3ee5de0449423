"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("email", String(320), nullable=False),
    Column("handle", String(32), nullable=True),  # Assigned lazily
    Column("name", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("email", name="uq_users_email"),
    UniqueConstraint("handle", name="uq_users_handle"),
)

# ============================================================================
# MEMES TABLE
# ============================================================================
memes_table = Table(
    "memes",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("content", Text, nullable=False),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,  # Legacy rows have no owner
    ),
    Column("author", Text, nullable=False, server_default="Anonymous"),
    Column("score", Integer, nullable=False, server_default="100"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(btrim(content)) > 0", name="ck_memes_content_not_blank"),
)

Index("idx_memes_created_at", memes_table.c.created_at.desc())
Index("idx_memes_score", memes_table.c.score.desc())
Index("idx_memes_user_id", memes_table.c.user_id)

# ============================================================================
# INTERACTIONS TABLE (score ledger)
# ============================================================================
interactions_table = Table(
    "interactions",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column(
        "meme_id",
        BigInteger,
        ForeignKey("memes.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,  # Legacy rows have no owner
    ),
    Column("type", String(16), nullable=False),
    Column("comment", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "type IN ('refute', 'refine', 'praise')", name="ck_interactions_type"
    ),
    UniqueConstraint(
        "meme_id", "user_id", "type", name="uq_interactions_meme_user_type"
    ),
)

Index(
    "idx_interactions_meme_created",
    interactions_table.c.meme_id,
    interactions_table.c.created_at.desc(),
)
Index("idx_interactions_user_id", interactions_table.c.user_id)
