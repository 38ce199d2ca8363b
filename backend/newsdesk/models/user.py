"""Per-user rows kept next to the auth provider's user records."""

from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from newsdesk.constants.settings_defaults import DEFAULT_USER_SETTINGS


class UserRole(SQLModel, table=True):
    __tablename__ = "user_roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(unique=True, index=True)
    role: str = Field(default="viewer", max_length=20)


class UserDetails(SQLModel, table=True):
    __tablename__ = "user_details"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(unique=True, index=True)
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    company_name: str | None = Field(default=None, max_length=200)
    country: str | None = Field(default=None, max_length=100)
    phone: str | None = Field(default=None, max_length=50)


class UserSettings(SQLModel, table=True):
    __tablename__ = "user_settings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(unique=True, index=True)
    language_preference: str = Field(
        default=DEFAULT_USER_SETTINGS["language_preference"], max_length=5
    )
    theme: str = Field(default=DEFAULT_USER_SETTINGS["theme"], max_length=10)
    notifications: dict[str, Any] = Field(
        default_factory=lambda: dict(DEFAULT_USER_SETTINGS["notifications"]),
        sa_column=Column(JSON, nullable=False),
    )
