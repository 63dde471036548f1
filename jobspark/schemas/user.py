"""User schemas."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """
    Registration payload.

    Fields are optional here so a missing name or email surfaces as the
    service's 400 message rather than a schema error.
    """

    model_config = ConfigDict(extra="ignore")

    displayName: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Unique user email")
    photoUrl: Optional[str] = Field(None, description="Avatar URL from the identity provider")
    dbPhoto: Optional[str] = Field(None, description="Avatar uploaded to our own storage")

    @property
    def avatar(self) -> Optional[str]:
        return self.photoUrl or self.dbPhoto


class ProfileUpdateRequest(BaseModel):
    """Profile document is stored as submitted, unknown keys included."""

    profile: Optional[Dict[str, Any]] = None


class RegisterResponse(BaseModel):
    acknowledged: bool = True
    insertedId: str


class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool = True
