"""Public form submissions."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class ContactMessage(SQLModel, table=True):
    __tablename__ = "contact_messages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    email: str = Field(max_length=255)
    subject: str = Field(default="", max_length=300)
    message: str = Field(default="")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class FeatureRequest(SQLModel, table=True):
    """Feature request / inquiry, answered by an admin."""

    __tablename__ = "website_feature_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    email: str = Field(max_length=255)
    company: str | None = Field(default=None, max_length=200)
    request_type: str = Field(max_length=50)
    description: str

    status: str = Field(default="pending", max_length=20)
    admin_notes: str | None = Field(default=None)
    admin_response: str | None = Field(default=None)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)


class OfferClaim(SQLModel, table=True):
    __tablename__ = "website_offer_claims"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID | None = Field(default=None, index=True)
    name: str = Field(max_length=200)
    email: str = Field(max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=200)
    message: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class WebsiteConfiguration(SQLModel, table=True):
    """Website package configured through the solutions page wizard."""

    __tablename__ = "website_configurations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID | None = Field(default=None, index=True)

    selections: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    custom_software: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    project_details: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    contact_info: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    schedule_info: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    status: str = Field(default="pending", max_length=20)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
