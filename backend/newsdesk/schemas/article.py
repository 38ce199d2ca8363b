"""Article schemas for the news library."""

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from newsdesk.constants.choices import Mood, NewsType


class NewsArticleResponse(BaseModel):
    """Raw news item as shown in the library."""

    id: UUID
    subject: str
    mood: Mood
    introduction: str
    developments: str
    implications: str
    type: str | None = None
    timestamp: datetime

    class Config:
        from_attributes = True


class WrittenArticleResponse(BaseModel):
    """Finished article as shown in the library."""

    id: UUID
    subject: str
    header: str
    article: str
    image: str | None = None
    video: str | None = None
    mood: str
    type: str | None = None
    timestamp: datetime
    created_at: datetime

    class Config:
        from_attributes = True


class NewsArticleUpdate(BaseModel):
    """Partial edit of a raw article. Only the fields that were sent are written."""

    subject: str | None = Field(default=None, min_length=1)
    mood: Mood | None = None
    introduction: str | None = None
    developments: str | None = None
    implications: str | None = None
    type: str | None = None


class LibraryFilters(BaseModel):
    """Search term plus structured filters; every set field must match."""

    search: str = ""
    subject: str = ""
    mood: Mood | None = None
    news_types: list[NewsType] = Field(default_factory=list)
    date_from: date | None = None
    date_to: date | None = None


SortDirection = Literal["asc", "desc"]


class LibrarySort(BaseModel):
    field: str = "timestamp"
    direction: SortDirection = "desc"


class NewsArticleListResponse(BaseModel):
    articles: list[NewsArticleResponse]
    total: int


class WrittenArticleListResponse(BaseModel):
    articles: list[WrittenArticleResponse]
    total: int


class BulkDeleteRequest(BaseModel):
    """
    Selected ids to delete.
    When filters are sent, ids no longer visible under them are dropped first.
    """

    ids: list[UUID] = Field(default_factory=list)
    filters: LibraryFilters | None = None


class BulkDeleteResponse(BaseModel):
    deleted: list[UUID]
    message: str
