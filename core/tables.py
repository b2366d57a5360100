"""SQLAlchemy Core table definitions."""

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
    func,
)

metadata = MetaData()

# Keyed by the identity provider's subject claim
user_points = Table(
    "user_points",
    metadata,
    Column("user_id", Text, primary_key=True),
    Column("points", Integer, nullable=False, server_default="0"),
    Column("updated_at", DateTime(timezone=True), server_default=func.now()),
)

badges = Table(
    "badges",
    metadata,
    Column("badge_id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Text, nullable=False, index=True),
    Column("badge_name", Text, nullable=False),
    Column("awarded_at", DateTime(timezone=True), server_default=func.now()),
    UniqueConstraint("user_id", "badge_name", name="uq_badges_user_badge"),
)

# One row per completed lesson; the lesson catalogue itself lives elsewhere
user_progress = Table(
    "user_progress",
    metadata,
    Column("progress_id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Text, nullable=False, index=True),
    Column("lesson_id", Text, nullable=False),
    Column("completed_at", DateTime(timezone=True), server_default=func.now()),
    UniqueConstraint("user_id", "lesson_id", name="uq_user_progress_user_lesson"),
)
