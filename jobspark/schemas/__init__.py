"""Request and response schemas."""

from .user import (
    MessageResponse,
    ProfileUpdateRequest,
    RegisterResponse,
    SuccessResponse,
    UserCreateRequest,
)

__all__ = [
    "MessageResponse",
    "ProfileUpdateRequest",
    "RegisterResponse",
    "SuccessResponse",
    "UserCreateRequest",
]
