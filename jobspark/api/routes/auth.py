"""Session credential endpoints."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Response

from jobspark.core.security import clear_auth_cookie, create_access_token, set_auth_cookie
from jobspark.schemas.user import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/jwt", response_model=SuccessResponse)
async def issue_token(response: Response, claims: Dict[str, Any] = Body(default={})):
    """
    Sign the posted identity claim and set it as the session cookie.

    The claim is free-form; whatever the client posts is what the auth
    guard hands back to protected routes.
    """
    token = create_access_token(claims)
    set_auth_cookie(response, token)
    logger.info(f"Issued session token for {claims.get('email', 'anonymous')}")
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    """Clear the session cookie. Safe to call without a session."""
    clear_auth_cookie(response)
    return SuccessResponse()
