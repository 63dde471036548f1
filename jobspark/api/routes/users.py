"""
User CRUD API
Registration, lookup, listing and authenticated profile updates
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status

from jobspark.api.deps import get_current_claims, get_user_service
from jobspark.schemas.user import (
    MessageResponse,
    ProfileUpdateRequest,
    RegisterResponse,
    UserCreateRequest,
)
from jobspark.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/user",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "User created, or a user with this email already exists"},
        400: {"model": MessageResponse},
    },
)
async def register_user(
    request: UserCreateRequest,
    service: UserService = Depends(get_user_service),
):
    """
    Register a user.

    A duplicate email still answers 201, with a message body instead of
    the insert acknowledgement.
    """
    result = await service.register(request.displayName, request.email, request.avatar)
    if not result.created:
        return MessageResponse(message=result.message)
    return RegisterResponse(insertedId=result.inserted_id)


@router.get("/users")
async def list_users(
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, description="Omit to return every user"),
    service: UserService = Depends(get_user_service),
):
    return await service.list_all(skip=skip, limit=limit)


@router.get("/user/{email}", responses={404: {"model": MessageResponse}})
async def get_user(email: str, service: UserService = Depends(get_user_service)):
    return await service.get_by_email(email)


@router.patch(
    "/user/{email}",
    responses={
        400: {"model": MessageResponse},
        401: {"model": MessageResponse},
        403: {"model": MessageResponse},
        404: {"model": MessageResponse},
    },
)
async def update_profile(
    email: str,
    request: ProfileUpdateRequest,
    claims: Dict[str, Any] = Depends(get_current_claims),
    service: UserService = Depends(get_user_service),
):
    """
    Replace the user's profile and recompute progress.

    **Auth**: session cookie required
    """
    logger.debug(f"Profile update for {email} by {claims.get('email')}")
    return await service.update_profile(email, request.profile)
