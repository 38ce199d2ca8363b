"""Analytics schemas."""

from datetime import date

from pydantic import BaseModel, Field


class PageView(BaseModel):
    path: str = Field(..., min_length=1, max_length=2048)
    referrer: str | None = Field(default=None, max_length=2048)
    user_agent: str = Field(default="", max_length=1024)
    screen_width: int = Field(default=0, ge=0)
    screen_height: int = Field(default=0, ge=0)


class CountEntry(BaseModel):
    name: str
    count: int


class DailyCount(BaseModel):
    day: date
    count: int


class AnalyticsSummary(BaseModel):
    days: int
    total_page_views: int
    unique_users: int
    top_pages: list[CountEntry]
    top_referrers: list[CountEntry]
    device_resolutions: list[CountEntry]
    views_per_day: list[DailyCount]
