"""
Chirpy Backend — User Schemas
===============================

What:  Request and response models for POST /api/users.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from chirpy.schemas.base import RequestParams


class UserCreateParams(RequestParams):
    """
    Body of POST /api/users. Unknown keys are ignored.

    A missing email decodes to "" and is rejected by UserService with 400.
    """
    email: str = Field(default="", description="Email address of the new user")


class UserResponse(BaseModel):
    """Returned by POST /api/users with HTTP 201."""
    id: uuid.UUID = Field(description="Unique user identifier (UUID)")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last update timestamp (UTC)")
    email: str = Field(description="User email address")

    model_config = {"from_attributes": True}
