"""SQLAlchemy table definitions for VOTP.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

PARENT_FOREIGN_KEY = "fk_comments_parent_id"

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
# Accounts are managed elsewhere; comments only need the id to exist.
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("content", Text, nullable=False),
    Column("url", Text, nullable=False),  # As supplied by the author
    Column("normalized_url", Text, nullable=False),
    Column("url_hash", String(64), nullable=False),  # Grouping key
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE", name="fk_comments_user_id"),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE", name=PARENT_FOREIGN_KEY),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 5000", name="content_length_bounds"
    ),
)

Index("idx_comments_url_hash", comments_table.c.url_hash)
Index("idx_comments_normalized_url", comments_table.c.normalized_url)
Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
