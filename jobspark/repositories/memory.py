"""In-memory user store for local development and tests."""

import copy
from typing import Any, Dict, List, Optional

from bson import ObjectId

from jobspark.core.exceptions import ConflictError

from .base import UserRepository


class InMemoryUserRepository(UserRepository):
    """
    Dict keyed by email with the same semantics as the Mongo store.

    Documents are deep-copied in and out so callers can't mutate stored state.
    """

    def __init__(self) -> None:
        self._users: Dict[str, Dict[str, Any]] = {}

    async def ensure_indexes(self) -> None:
        return None

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        document = self._users.get(email)
        return copy.deepcopy(document) if document is not None else None

    async def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        documents = list(self._users.values())[skip:]
        if limit is not None:
            documents = documents[:limit]
        return copy.deepcopy(documents)

    async def insert_one(self, document: Dict[str, Any]) -> str:
        email = document.get("email")
        if email in self._users:
            raise ConflictError()
        inserted_id = str(ObjectId())
        self._users[email] = {"_id": inserted_id, **copy.deepcopy(document)}
        return inserted_id

    async def update_by_email(
        self, email: str, fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        document = self._users.get(email)
        if document is None:
            return None
        document.update(copy.deepcopy(fields))
        return copy.deepcopy(document)

    def clear(self) -> None:
        self._users.clear()

    def count(self) -> int:
        return len(self._users)
