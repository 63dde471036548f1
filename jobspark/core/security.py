"""Session credentials: JWT issuing, cookie transport and the auth guard."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Request, Response
from jose import JWTError, jwt

from jobspark.config import settings
from jobspark.core.exceptions import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token carrying an arbitrary identity claim."""
    to_encode = dict(data)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and verify JWT token. Raises ForbiddenError if it does not verify."""
    try:
        return jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            # Claims are client-supplied; only signature and expiry are enforced
            options={
                "verify_aud": False,
                "verify_iss": False,
                "verify_sub": False,
                "verify_jti": False,
            },
        )
    except JWTError as e:
        logger.info(f"Rejected session token: {e}")
        raise ForbiddenError()


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )


async def get_current_claims(request: Request) -> Dict[str, Any]:
    """
    Auth guard dependency.

    Reads the session cookie, verifies it and stores the decoded claim on
    request.state.user.

    Raises:
        UnauthorizedError: no cookie present (401)
        ForbiddenError: cookie present but invalid or expired (403)
    """
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token:
        raise UnauthorizedError()

    claims = decode_token(token)
    request.state.user = claims
    return claims
