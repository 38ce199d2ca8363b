"""Page view events."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class AnalyticsEvent(SQLModel, table=True):
    __tablename__ = "analytics_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID | None = Field(default=None, index=True)
    path: str = Field(max_length=2048)
    event_type: str = Field(default="page_view", max_length=50)
    referrer: str | None = Field(default=None, max_length=2048)
    user_agent: str = Field(default="", max_length=1024)
    screen_width: int = Field(default=0)
    screen_height: int = Field(default=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), index=True)
