"""MongoDB implementation of the user store."""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from jobspark.core.exceptions import ConflictError, InternalError

from .base import UserRepository

logger = logging.getLogger(__name__)


def _stringify_object_ids(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: _stringify_object_ids(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_stringify_object_ids(item) for item in value]
    return value


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Render every ObjectId as a string so documents are JSON-safe.

    Application records are stored as written by clients and may embed
    references to other documents.
    """
    if document is None:
        return None
    return _stringify_object_ids(document)


class MongoUserRepository(UserRepository):
    """
    User documents in a MongoDB collection.

    The unique index on `email` is the authoritative duplicate guard; the
    service's existence check only saves a round trip on the common path.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def ensure_indexes(self) -> None:
        try:
            await self.collection.create_index("email", unique=True)
            logger.info("MongoDB indexes ensured (unique: email)")
        except PyMongoError as e:
            # Existing duplicates block the unique index; the app can still serve
            logger.warning(f"Index creation error: {e}")

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        try:
            document = await self.collection.find_one({"email": email})
        except PyMongoError as e:
            logger.error(f"Error fetching user {email}: {e}")
            raise InternalError(detail=str(e))
        return serialize_document(document)

    async def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        try:
            cursor = self.collection.find()
            if skip:
                cursor = cursor.skip(skip)
            if limit is not None:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}")
            raise InternalError(detail=str(e))
        return [serialize_document(doc) for doc in documents]

    async def insert_one(self, document: Dict[str, Any]) -> str:
        try:
            # insert_one mutates its argument with the generated _id
            result = await self.collection.insert_one(dict(document))
        except DuplicateKeyError:
            logger.info(f"Duplicate registration rejected by index: {document.get('email')}")
            raise ConflictError()
        except PyMongoError as e:
            logger.error(f"Error inserting user: {e}")
            raise InternalError(detail=str(e))
        return str(result.inserted_id)

    async def update_by_email(
        self, email: str, fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        try:
            document = await self.collection.find_one_and_update(
                {"email": email},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"Error updating user {email}: {e}")
            raise InternalError(detail=str(e))
        return serialize_document(document)
