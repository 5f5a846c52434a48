"""SQLAlchemy table definitions.

The schema is owned by the backend; these definitions mirror the columns the
client reads and writes.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# DATE INVITATIONS TABLE
# ============================================================================
date_invitations_table = Table(
    "date_invitations",
    metadata,
    Column(
        "id", UUID(as_uuid=False), primary_key=True, server_default="gen_random_uuid()"
    ),
    Column("sender_id", UUID(as_uuid=False), nullable=False),
    Column("recipient_id", UUID(as_uuid=False), nullable=False),
    Column("venue_id", Text, nullable=True),
    Column("title", Text, nullable=False),
    Column("message", Text, nullable=True),
    Column("proposed_date", TIMESTAMP(timezone=True), nullable=True),
    # 'pending', 'accepted', 'declined', 'cancelled'
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_date_invitations_recipient_id", date_invitations_table.c.recipient_id)
