"""Account settings and account management schemas."""

from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from newsdesk.constants.choices import Role


class UserDetailsSchema(BaseModel):
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    company_name: str | None = Field(default=None, max_length=200)
    country: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=50)

    class Config:
        from_attributes = True


class Notifications(BaseModel):
    email: bool = True
    push: bool = True
    marketing: bool = False


class UserSettingsSchema(BaseModel):
    language_preference: str = Field(default="en", min_length=2, max_length=5)
    theme: Literal["light", "dark"] = "dark"
    notifications: Notifications = Field(default_factory=Notifications)

    class Config:
        from_attributes = True


class AccountResponse(BaseModel):
    id: UUID
    email: str | None
    role: str
    details: UserDetailsSchema
    settings: UserSettingsSchema


class ManagedUser(BaseModel):
    """Auth provider user merged with its role row."""

    id: UUID
    email: str
    name: str = ""
    role: str = "viewer"
    created_at: datetime | None = None
    last_sign_in_at: datetime | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class ManagedUserListResponse(BaseModel):
    users: list[ManagedUser]
    total: int


class ManagedUserCreate(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=6)
    name: str = ""
    role: Role = "viewer"


class ManagedUserUpdate(BaseModel):
    name: str | None = None
    role: Role | None = None
