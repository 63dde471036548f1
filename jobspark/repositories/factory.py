"""
User repository factory
Returns the MongoDB or in-memory store based on STORAGE_TYPE
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from jobspark.config import Settings

from .base import UserRepository
from .memory import InMemoryUserRepository
from .mongo import MongoUserRepository

logger = logging.getLogger(__name__)


def create_user_repository(
    settings: Settings, database: Optional[AsyncIOMotorDatabase] = None
) -> UserRepository:
    """
    Build the configured user store.

    STORAGE_TYPE=mongodb (default) needs a connected database;
    STORAGE_TYPE=memory keeps everything in process.
    """
    storage_type = settings.STORAGE_TYPE.lower()

    if storage_type == "memory":
        logger.info("Using in-memory user storage")
        return InMemoryUserRepository()

    if storage_type == "mongodb":
        if database is None:
            raise ValueError("A connected MongoDB database is required when STORAGE_TYPE=mongodb")
        logger.info(
            f"Using MongoDB user storage ({settings.MONGODB_DATABASE}.{settings.MONGODB_USERS_COLLECTION})"
        )
        return MongoUserRepository(database[settings.MONGODB_USERS_COLLECTION])

    raise ValueError(f"Unknown STORAGE_TYPE: {settings.STORAGE_TYPE}")
