"""SQLAlchemy table definitions for quotevote.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(64), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),  # bcrypt hash
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUOTES TABLE
# ============================================================================
quotes_table = Table(
    "quotes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column("author", String(255), nullable=False, server_default="Unknown"),
    # Cached counts of the votes table, kept in step by the vote engine
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="check_upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="check_downvotes_non_negative"),
    CheckConstraint("length(trim(text)) > 0", name="check_text_not_blank"),
)

Index("idx_quotes_upvotes", quotes_table.c.upvotes)
Index("idx_quotes_downvotes", quotes_table.c.downvotes)
Index("idx_quotes_created_at", quotes_table.c.created_at)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "quote_id", UUID, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "vote_type",
        Enum("upvote", "downvote", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "quote_id", name="unique_user_quote_vote"),
)

Index("idx_votes_quote_id", votes_table.c.quote_id, votes_table.c.vote_type)
