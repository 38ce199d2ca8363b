"""News set schemas for API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from newsdesk.constants.choices import Mood, NewsType
from newsdesk.constants.settings_defaults import DEFAULT_NEWS_SET


class NewsSetForm(BaseModel):
    """
    Fields of the gathering form.

    Required-field checks are done by the service so that a rejected form
    never reaches the store.
    """

    name: str = Field(default="", max_length=200)
    subject: str = Field(default="", max_length=500)
    num_articles: int = Field(default=DEFAULT_NEWS_SET["num_articles"])
    news_type: NewsType = Field(default=DEFAULT_NEWS_SET["news_type"])
    mood: Mood = Field(default=DEFAULT_NEWS_SET["mood"])


class NewsSetResponse(BaseModel):
    """Schema for news set responses."""

    id: UUID
    user_id: UUID
    name: str
    subject: str
    num_articles: int
    news_type: NewsType
    mood: Mood
    created_at: datetime
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class NewsSetListResponse(BaseModel):
    sets: list[NewsSetResponse]
    total: int
