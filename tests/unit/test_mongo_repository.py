"""
Unit tests for the MongoDB user store.

Uses AsyncMock for Motor collections to avoid real DB dependencies.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, OperationFailure, ServerSelectionTimeoutError

from jobspark.core.exceptions import ConflictError, InternalError
from jobspark.repositories.mongo import MongoUserRepository, serialize_document


@pytest.fixture
def mock_collection() -> MagicMock:
    """Mock Motor AsyncIOMotorCollection."""
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def repository(mock_collection: MagicMock) -> MongoUserRepository:
    return MongoUserRepository(mock_collection)


def test_serialize_document_stringifies_object_id():
    oid = ObjectId()
    assert serialize_document({"_id": oid, "email": "a@x.com"}) == {
        "_id": str(oid),
        "email": "a@x.com",
    }
    assert serialize_document(None) is None


def test_serialize_document_stringifies_nested_object_ids():
    job_id = ObjectId()
    document = {
        "_id": ObjectId(),
        "applications": [{"jobId": job_id, "status": "applied", "notes": [{"by": job_id}]}],
    }

    serialized = serialize_document(document)

    assert serialized["applications"][0]["jobId"] == str(job_id)
    assert serialized["applications"][0]["notes"][0]["by"] == str(job_id)
    assert serialized["applications"][0]["status"] == "applied"
    assert isinstance(document["applications"][0]["jobId"], ObjectId)


async def test_ensure_indexes_creates_unique_email_index(repository, mock_collection):
    await repository.ensure_indexes()
    mock_collection.create_index.assert_awaited_once_with("email", unique=True)


async def test_ensure_indexes_tolerates_failure(repository, mock_collection):
    mock_collection.create_index.side_effect = OperationFailure("E11000 duplicate key")
    await repository.ensure_indexes()


async def test_find_by_email(repository, mock_collection):
    oid = ObjectId()
    mock_collection.find_one.return_value = {"_id": oid, "email": "ada@x.com"}

    user = await repository.find_by_email("ada@x.com")

    mock_collection.find_one.assert_awaited_once_with({"email": "ada@x.com"})
    assert user == {"_id": str(oid), "email": "ada@x.com"}


async def test_find_by_email_missing(repository, mock_collection):
    mock_collection.find_one.return_value = None
    assert await repository.find_by_email("nobody@x.com") is None


async def test_find_by_email_driver_error(repository, mock_collection):
    mock_collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
    with pytest.raises(InternalError) as exc_info:
        await repository.find_by_email("ada@x.com")
    assert "no servers" in exc_info.value.detail


async def test_find_all_unbounded(repository, mock_collection):
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[{"_id": ObjectId(), "email": "a@x.com"}])
    mock_collection.find.return_value = cursor

    users = await repository.find_all()

    cursor.skip.assert_not_called()
    cursor.limit.assert_not_called()
    cursor.to_list.assert_awaited_once_with(length=None)
    assert users[0]["email"] == "a@x.com"
    assert isinstance(users[0]["_id"], str)


async def test_find_all_paged(repository, mock_collection):
    cursor = MagicMock()
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    mock_collection.find.return_value = cursor

    await repository.find_all(skip=20, limit=10)

    cursor.skip.assert_called_once_with(20)
    cursor.limit.assert_called_once_with(10)
    cursor.to_list.assert_awaited_once_with(length=10)


async def test_insert_one_returns_id(repository, mock_collection):
    oid = ObjectId()
    mock_collection.insert_one.return_value = MagicMock(inserted_id=oid)
    document = {"email": "ada@x.com"}

    inserted_id = await repository.insert_one(document)

    assert inserted_id == str(oid)
    assert "_id" not in document


async def test_insert_duplicate_raises_conflict(repository, mock_collection):
    mock_collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")
    with pytest.raises(ConflictError):
        await repository.insert_one({"email": "ada@x.com"})


async def test_update_by_email_sets_fields(repository, mock_collection):
    oid = ObjectId()
    mock_collection.find_one_and_update.return_value = {
        "_id": oid,
        "email": "ada@x.com",
        "progress": 20,
    }

    updated = await repository.update_by_email("ada@x.com", {"progress": 20})

    mock_collection.find_one_and_update.assert_awaited_once_with(
        {"email": "ada@x.com"},
        {"$set": {"progress": 20}},
        return_document=ReturnDocument.AFTER,
    )
    assert updated["_id"] == str(oid)


async def test_update_by_email_no_match(repository, mock_collection):
    mock_collection.find_one_and_update.return_value = None
    assert await repository.update_by_email("nobody@x.com", {"progress": 0}) is None
