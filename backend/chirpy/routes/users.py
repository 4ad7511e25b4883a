"""
Chirpy Backend — User Routes
==============================

What:  POST /api/users: register a user by email.
How:   Decodes {"email": ...} and delegates to UserService with a
       per-request database session.
"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chirpy.database import get_db_session
from chirpy.routes.decoding import decode_json_body
from chirpy.schemas.chirp import ErrorResponse
from chirpy.schemas.user import UserCreateParams, UserResponse
from chirpy.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.post(
    "/users",
    status_code=201,
    response_model=UserResponse,
    responses={
        201: {"description": "User created", "model": UserResponse},
        400: {"description": "Email already registered", "model": ErrorResponse},
        500: {"description": "Malformed body or database failure", "model": ErrorResponse},
    },
    summary="Create a user",
)
async def create_user(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> UserResponse:
    params = await decode_json_body(request, UserCreateParams)
    return await user_service.create_user(db=db, email=params.email)
