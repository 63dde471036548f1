"""MongoDB client lifecycle."""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.server_api import ServerApi

from jobspark.config import Settings

logger = logging.getLogger(__name__)


class MongoDB:
    """
    Owns the single long-lived AsyncIOMotorClient for the process.

    The client pools its own connections; handlers share it read-only
    after connect() and never replace it.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self.client is not None

    async def connect(self) -> AsyncIOMotorDatabase:
        """Connect to MongoDB and verify the deployment answers a ping."""
        if self.db is not None:
            return self.db

        try:
            self.client = AsyncIOMotorClient(
                self.settings.MONGODB_URI,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
                maxPoolSize=self.settings.MONGODB_MAX_POOL_SIZE,
                minPoolSize=self.settings.MONGODB_MIN_POOL_SIZE,
                serverSelectionTimeoutMS=self.settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            )
            self.db = self.client[self.settings.MONGODB_DATABASE]
            await self.client.admin.command("ping")
            logger.info(f"Connected to MongoDB: {self.settings.MONGODB_DATABASE}")
            return self.db
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            await self.close()
            raise

    async def ping(self) -> bool:
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self.client is not None:
            self.client.close()
            logger.info("MongoDB connection closed")
        self.client = None
        self.db = None
