"""Auth schemas."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


class SignUpRequest(Credentials):
    first_name: str = ""
    last_name: str = ""


class SignInRequest(Credentials):
    next: str | None = Field(default=None, description="Path to return to after sign-in")


class RefreshRequest(BaseModel):
    refresh_token: str


class PasswordResetRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)


class PasswordUpdateRequest(BaseModel):
    password: str = Field(..., min_length=6)


class SessionResponse(BaseModel):
    access_token: str
    refresh_token: str
    expires_in: int | None = None
    user_id: UUID
    email: str | None = None
    redirect_to: str = "/dashboard"


class UserResponse(BaseModel):
    id: UUID
    email: str | None = None
    role: str
    metadata: dict[str, Any] = Field(default_factory=dict)
