"""Domain services."""

from .profile_scorer import score
from .user_service import UserService

__all__ = ["score", "UserService"]
