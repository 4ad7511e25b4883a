"""
Chirpy Backend — User Service
===============================

What:  Creates user records.
How:   Builds a User with its id and timestamps assigned up front, adds it
       to the request's session and flushes so constraint violations surface
       here rather than at commit.
Who:   Called by POST /api/users.

Error translation:
    Blank email                      → ValidationError (400)
    IntegrityError (duplicate email) → ValidationError (400)
    Any other SQLAlchemyError        → DatabaseError (500)
"""

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.exceptions import DatabaseError, ValidationError
from chirpy.models.user import User
from chirpy.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """Stateless; receives the session for each call."""

    async def create_user(self, db: AsyncSession, email: str) -> UserResponse:
        if not email.strip():
            raise ValidationError(message="Email is required", field="email")

        now = datetime.now(timezone.utc)
        user = User(id=uuid.uuid4(), email=email, created_at=now, updated_at=now)
        db.add(user)
        try:
            await db.flush()
        except IntegrityError as e:
            logger.warning("Rejected duplicate user email")
            raise ValidationError(
                message="A user with this email already exists",
                field="email",
            ) from e
        except SQLAlchemyError as e:
            raise DatabaseError(
                message="Failed to create user",
                context={"error": str(e)},
            ) from e

        logger.info("Created user %s", user.id)
        return UserResponse.model_validate(user)


# Singleton instance
user_service = UserService()
