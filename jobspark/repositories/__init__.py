"""User store implementations."""

from .base import UserRepository
from .factory import create_user_repository
from .memory import InMemoryUserRepository
from .mongo import MongoUserRepository

__all__ = [
    "UserRepository",
    "MongoUserRepository",
    "InMemoryUserRepository",
    "create_user_repository",
]
