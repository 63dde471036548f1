"""
API Dependencies
Store and service wiring plus the auth guard for protected routes
"""

from fastapi import Depends, Request

from jobspark.core.security import get_current_claims
from jobspark.repositories.base import UserRepository
from jobspark.services.user_service import UserService

__all__ = ["get_current_claims", "get_user_repository", "get_user_service"]


def get_user_repository(request: Request) -> UserRepository:
    """The store built during application startup."""
    return request.app.state.user_repository


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    return UserService(repository)
