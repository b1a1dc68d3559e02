"""SQLAlchemy table definitions for Paire.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the identity subsystem; read by the protocol)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),  # Lower-cased
    Column("display_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PARTNERSHIP INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "partnership_invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("token", String(255), nullable=False, unique=True),  # URL-safe token
    Column(
        "inviter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("invitee_email", String(255), nullable=False),  # Lower-cased
    Column(
        "status",
        Enum(
            "pending",
            "accepted",
            "expired",
            "revoked",
            name="invitation_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "accepted_by_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
)

# Pending-invitation lookups for the invitee
Index(
    "idx_invitations_invitee_status",
    invitations_table.c.invitee_email,
    invitations_table.c.status,
)
Index("idx_invitations_inviter_id", invitations_table.c.inviter_id)

# ============================================================================
# PARTNERSHIPS TABLE
# ============================================================================
partnerships_table = Table(
    "partnerships",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user1_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user2_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("user1_id <> user2_id", name="ck_partnerships_distinct_users"),
)

# ============================================================================
# PARTNERSHIP MEMBERS TABLE
# One row per member; the unique user_id is what makes a user belong to at
# most one partnership, even under concurrent acceptance.
# ============================================================================
partnership_members_table = Table(
    "partnership_members",
    metadata,
    Column(
        "partnership_id",
        UUID,
        ForeignKey("partnerships.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    PrimaryKeyConstraint("partnership_id", "user_id"),
    UniqueConstraint("user_id", name="uq_partnership_members_user"),
)
