"""SQLAlchemy table definitions for the tour planner.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("email", String(254), nullable=False, unique=True),  # Lowercased
    Column("display_name", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

# ============================================================================
# TOURS TABLE
# ============================================================================
tours_table = Table(
    "tours",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(255), nullable=False),
    Column("destination", String(255), nullable=True),
    Column("description", Text, nullable=True),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column(
        "status",
        Enum("planning", "confirmed", "archived", name="tour_status", create_type=False),
        nullable=False,
        server_default="planning",
    ),
    Column("voting_locked", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint("end_date >= start_date", name="ck_tours_date_range"),
)

Index("idx_tours_owner_id", tours_table.c.owner_id)

# ============================================================================
# PARTICIPANTS TABLE
# ============================================================================
participants_table = Table(
    "participants",
    metadata,
    Column("tour_id", UUID, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("email", String(254), nullable=False),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    PrimaryKeyConstraint("tour_id", "user_id", name="pk_participants"),
)

Index("idx_participants_user_id", participants_table.c.user_id)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("tour_id", UUID, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False),
    Column(
        "inviter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("email", String(254), nullable=False),  # Lowercased
    Column(
        "status",
        Enum(
            "pending",
            "accepted",
            "declined",
            name="invitation_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column("token", String(64), nullable=False, unique=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index(
    "idx_invitations_tour_created",
    invitations_table.c.tour_id,
    invitations_table.c.created_at,
)
Index(
    "idx_invitations_email_status",
    invitations_table.c.email,
    invitations_table.c.status,
)

# ============================================================================
# INVITATION OTP TABLE
# ============================================================================
invitation_otps_table = Table(
    "invitation_otps",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("email", String(254), nullable=False),
    Column("otp_token", String(64), nullable=False, unique=True),
    Column("invitation_token", String(64), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("used", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_invitation_otps_expires_at", invitation_otps_table.c.expires_at)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("tour_id", UUID, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    PrimaryKeyConstraint("tour_id", "user_id", name="pk_votes"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("tour_id", UUID, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 5000", name="ck_comments_content_length"
    ),
)

Index("idx_comments_tour_created", comments_table.c.tour_id, comments_table.c.created_at)

# ============================================================================
# TAGS TABLES
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False),
)

# Case-insensitive uniqueness; also the conflict target of get-or-create
Index("uq_tags_name_lower", func.lower(tags_table.c.name), unique=True)

tour_tags_table = Table(
    "tour_tags",
    metadata,
    Column("tour_id", UUID, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    PrimaryKeyConstraint("tour_id", "tag_id", name="pk_tour_tags"),
)

# ============================================================================
# TOUR ACTIVITY TABLE
# ============================================================================
tour_activity_table = Table(
    "tour_activity",
    metadata,
    Column("tour_id", UUID, ForeignKey("tours.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("last_viewed_at", TIMESTAMP(timezone=True), nullable=False),
    PrimaryKeyConstraint("tour_id", "user_id", name="pk_tour_activity"),
)
