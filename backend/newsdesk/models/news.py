"""News tables: gathering sets, raw and written articles, sequences."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class NewsSet(SQLModel, table=True):
    """Saved configuration describing what raw news to gather."""

    __tablename__ = "news_sets"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(index=True)

    name: str = Field(max_length=200)
    subject: str = Field(max_length=500)
    num_articles: int = Field(default=5)
    news_type: str = Field(default="general news", max_length=50)
    mood: str = Field(default="neutral", max_length=20)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = Field(default=None)


class NewsArticle(SQLModel, table=True):
    """
    Raw news item.
    Rows are inserted by the gathering workflow outside this service.
    """

    __tablename__ = "news_articles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    subject: str
    mood: str = Field(default="neutral", max_length=20)
    introduction: str = Field(default="")
    developments: str = Field(default="")
    implications: str = Field(default="")
    type: str | None = Field(default=None, max_length=50)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)


class WrittenArticle(SQLModel, table=True):
    """Finished article produced by the generation workflow."""

    __tablename__ = "written_articles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    subject: str
    header: str = Field(default="")
    article: str = Field(default="")
    image: str | None = Field(default=None, max_length=2048)
    video: str | None = Field(default=None, max_length=2048)
    mood: str = Field(default="neutral", max_length=20)
    type: str | None = Field(default=None, max_length=50)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class NewsSequence(SQLModel, table=True):
    """
    Schedule-shaped grouping of news sets.

    ``days`` holds weekday names for weekly sequences and day-of-month numbers
    for monthly ones. ``sets`` holds news set ids by convention only.
    """

    __tablename__ = "news_sequences"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(index=True)

    name: str = Field(max_length=200)
    frequency: str = Field(default="weekly", max_length=10)
    days: list[Any] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    sets: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    is_active: bool = Field(default=False)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
