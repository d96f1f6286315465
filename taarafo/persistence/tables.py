"""SQLAlchemy table definitions for Taarafo.

Repositories use SQLAlchemy Core against these tables and map rows to the
immutable domain models by hand (see mappers.py).
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("content", Text, nullable=False),
    Column("author", String(255), nullable=False),
    Column("created_date", TIMESTAMP(timezone=True), nullable=False),
    Column("updated_date", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_posts_created_date", posts_table.c.created_date.desc())
