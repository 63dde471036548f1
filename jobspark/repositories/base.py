"""User store interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class UserRepository(ABC):
    """
    Collection of user documents keyed by email.

    Documents are plain dicts shaped like the stored MongoDB document, with
    `_id` rendered as a string.
    """

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the unique email index (no-op where not applicable)."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Point lookup. Returns None when absent."""

    @abstractmethod
    async def find_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Scan in insertion order. limit=None returns everything after skip."""

    @abstractmethod
    async def insert_one(self, document: Dict[str, Any]) -> str:
        """
        Insert a new document and return its id.

        Raises:
            ConflictError: a document with the same email already exists
        """

    @abstractmethod
    async def update_by_email(
        self, email: str, fields: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Merge `fields` into the document for `email` ($set semantics).

        Returns the updated document, or None when no document matched.
        """
