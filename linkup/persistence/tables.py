"""SQLAlchemy table definitions for LinkUp.

Used with SQLAlchemy Core; they match the schema defined in Alembic
migrations. Set-valued fields (follow edges, likes) are ``uuid[]``
columns changed only through single-statement array updates.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("handle", String(255), nullable=False, unique=True),
    Column("email", String(320), nullable=False, unique=True),  # Lowercased
    Column("password_hash", Text, nullable=True),  # NULL for external sign-in
    Column("role", String(20), nullable=False, server_default="user"),
    Column("banned", Boolean, nullable=False, server_default="false"),
    Column("display_name", String(100), nullable=True),
    Column("bio", Text, nullable=True),
    Column("location", String(100), nullable=True),
    Column("birth_date", Date, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("cover_url", Text, nullable=True),
    Column("followers", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("following", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('user', 'admin')", name="check_user_role"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column("image_url", Text, nullable=True),  # Hosted on ImgBB
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "length(content) > 0 OR image_url IS NOT NULL", name="check_post_has_body"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("type", String(20), nullable=False),
    Column("sender_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("receiver_id", UUID, ForeignKey("users.id"), nullable=False),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="SET NULL"), nullable=True
    ),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "type IN ('follow', 'like', 'comment')", name="check_notification_type"
    ),
    CheckConstraint("sender_id <> receiver_id", name="check_notification_not_self"),
)

Index(
    "idx_notifications_receiver_created",
    notifications_table.c.receiver_id,
    notifications_table.c.created_at.desc(),
)
