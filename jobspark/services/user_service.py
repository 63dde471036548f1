"""User registration, lookup and profile updates."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from jobspark.config import settings
from jobspark.core.exceptions import (
    ConflictError,
    InternalError,
    JobSparkError,
    NotFoundError,
    ValidationError,
)
from jobspark.repositories.base import UserRepository
from jobspark.services.profile_scorer import missing_fields, score

logger = logging.getLogger(__name__)

BASELINE_PROGRESS = 10
DEFAULT_ROLE = "user"


def empty_profile() -> Dict[str, Any]:
    return {
        "headline": None,
        "bio": None,
        "location": None,
        "skills": [],
        "experience": [],
        "education": [],
        "jobPreferences": {
            "jobTypes": [],
            "locations": [],
            "salary": {"min": None, "max": None},
            "remote": None,
        },
    }


def empty_stats() -> Dict[str, int]:
    return {
        "applied": 0,
        "inProgress": 0,
        "interviews": 0,
        "offers": 0,
        "rejected": 0,
    }


def build_user_document(display_name: str, email: str, avatar: Optional[str]) -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    return {
        "name": display_name,
        "email": email,
        "avatar": avatar or "",
        "role": DEFAULT_ROLE,
        "progress": BASELINE_PROGRESS,
        "stats": empty_stats(),
        "applications": [],
        "profile": empty_profile(),
        "createdAt": now,
        "updatedAt": now,
    }


@dataclass
class RegistrationResult:
    """Outcome of register(): either a new document id or a soft conflict."""

    created: bool
    inserted_id: Optional[str] = None
    message: Optional[str] = None


class UserService:
    """Mediates all access to the user store."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def register(
        self,
        display_name: Optional[str],
        email: Optional[str],
        avatar: Optional[str] = None,
    ) -> RegistrationResult:
        """
        Create a user document once per email.

        A duplicate email is not an error for callers: it returns a result
        with created=False and leaves the stored document untouched.

        Raises:
            ValidationError: display name or email missing
        """
        if not email or not display_name:
            raise ValidationError("Email and Display Name are required.")

        try:
            if await self.repository.find_by_email(email) is not None:
                logger.info(f"Registration skipped, user exists: {email}")
                return RegistrationResult(created=False, message=ConflictError.message)

            inserted_id = await self.repository.insert_one(
                build_user_document(display_name, email, avatar)
            )
        except ConflictError as e:
            # Lost the race against a concurrent registration
            return RegistrationResult(created=False, message=e.message)
        except JobSparkError:
            raise
        except Exception as e:
            logger.error(f"Error registering user {email}: {e}", exc_info=True)
            raise InternalError(detail=str(e))

        logger.info(f"Registered user {email} ({inserted_id})")
        return RegistrationResult(created=True, inserted_id=inserted_id)

    async def get_by_email(self, email: str) -> Dict[str, Any]:
        """Raises NotFoundError when no document has this email."""
        try:
            user = await self.repository.find_by_email(email)
        except JobSparkError:
            raise
        except Exception as e:
            logger.error(f"Error fetching user {email}: {e}", exc_info=True)
            raise InternalError("Internal server error!", detail=str(e))

        if user is None:
            raise NotFoundError()
        return user

    async def list_all(self, skip: int = 0, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        if limit is not None:
            limit = max(1, min(limit, settings.MAX_PAGE_SIZE))
        try:
            return await self.repository.find_all(skip=max(skip, 0), limit=limit)
        except JobSparkError:
            raise
        except Exception as e:
            logger.error(f"Error listing users: {e}", exc_info=True)
            raise InternalError("internal server error!", detail=str(e))

    async def update_profile(self, email: Optional[str], profile: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Replace the user's profile and recompute progress from it.

        profile and progress are written in one $set so they never diverge.

        Raises:
            ValidationError: email or profile missing
            NotFoundError: no document has this email
        """
        if not email or profile is None:
            raise ValidationError("Email and profile are required.")

        progress = score(profile)
        try:
            updated = await self.repository.update_by_email(
                email,
                {
                    "profile": profile,
                    "progress": progress,
                    "updatedAt": datetime.now(timezone.utc),
                },
            )
        except JobSparkError:
            raise
        except Exception as e:
            logger.error(f"Error updating profile for {email}: {e}", exc_info=True)
            raise InternalError(detail=str(e))

        if updated is None:
            raise NotFoundError()

        logger.info(
            f"Updated profile for {email}: progress={progress}, "
            f"missing={missing_fields(profile)}"
        )
        return updated
