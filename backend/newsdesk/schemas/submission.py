"""Public form and submission schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from newsdesk.constants.choices import RequestStatus, RequestType


class ContactForm(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    subject: str = Field(default="", max_length=300)
    message: str = Field(..., min_length=1)


class FeatureRequestForm(BaseModel):
    """Required fields are checked by the service, before any store call."""

    name: str = Field(default="", max_length=200)
    email: str = Field(default="", max_length=255)
    company: str | None = Field(default=None, max_length=200)
    request_type: RequestType | None = None
    description: str = ""


class FeatureRequestResponse(BaseModel):
    id: UUID
    name: str
    email: str
    company: str | None = None
    request_type: str
    description: str
    status: str
    admin_notes: str | None = None
    admin_response: str | None = None
    created_at: datetime

    class Config:
        from_attributes = True


class FeatureRequestListResponse(BaseModel):
    requests: list[FeatureRequestResponse]
    total: int


class StatusUpdate(BaseModel):
    status: RequestStatus


class AdminReply(BaseModel):
    admin_response: str = ""
    admin_notes: str = ""


class OfferClaimForm(BaseModel):
    name: str = Field(default="", max_length=200)
    email: str = Field(default="", max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    company: str | None = Field(default=None, max_length=200)
    message: str | None = None


class WebsiteConfigurationForm(BaseModel):
    selections: dict[str, Any] = Field(default_factory=dict)
    custom_software: list[str] = Field(default_factory=list)
    project_details: dict[str, Any] = Field(default_factory=dict)
    contact_info: dict[str, Any] = Field(default_factory=dict)
    schedule_info: dict[str, Any] = Field(default_factory=dict)


class SubmissionReceipt(BaseModel):
    id: UUID
    message: str
