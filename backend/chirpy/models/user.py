"""
Chirpy Backend — User SQLAlchemy Model
========================================

What:  ORM model for the `users` table.
Who:   Used by UserService and by Alembic for schema management.

Column types are dialect-neutral (Uuid, DateTime with timezone) so the same
model runs against PostgreSQL in deployment and SQLite in tests. Insert values
for id and the timestamps come from UserService.create_user.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from chirpy.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """A registered Chirpy user, identified by a unique email address."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        onupdate=_utcnow,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
