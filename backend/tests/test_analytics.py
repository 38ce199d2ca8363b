"""Tests for page view tracking and the analytics summary."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.errors import ValidationFailed
from newsdesk.models import AnalyticsEvent
from newsdesk.services.analytics_service import AnalyticsService, summarize
from newsdesk.services.auth_service import CurrentUser


def event(path: str, **fields: object) -> AnalyticsEvent:
    values = {
        "path": path,
        "screen_width": 1920,
        "screen_height": 1080,
        "created_at": datetime(2024, 3, 20, 10, 0),
    }
    values.update(fields)
    return AnalyticsEvent(**values)


class TestSummarize:
    def test_counts(self) -> None:
        visitor = uuid4()
        events = [
            event("/", user_id=visitor, referrer="https://google.com"),
            event("/", user_id=visitor),
            event("/pricing", user_id=uuid4(), screen_width=390, screen_height=844),
            event("/pricing", created_at=datetime(2024, 3, 21, 8, 0)),
            event("/pricing"),
        ]
        summary = summarize(events, 7)
        assert summary.total_page_views == 5
        assert summary.unique_users == 2
        assert [(p.name, p.count) for p in summary.top_pages] == [("/pricing", 3), ("/", 2)]
        assert [(r.name, r.count) for r in summary.top_referrers] == [("https://google.com", 1)]
        assert summary.device_resolutions[0].name == "1920x1080"
        assert [(d.day.isoformat(), d.count) for d in summary.views_per_day] == [
            ("2024-03-20", 4),
            ("2024-03-21", 1),
        ]

    def test_search_matches_path_or_referrer(self) -> None:
        events = [event("/blog"), event("/", referrer="https://blog.example"), event("/about")]
        assert summarize(events, 7, search="BLOG").total_page_views == 2

    def test_top_pages_limited(self) -> None:
        events = [event(f"/page-{i}") for i in range(15)]
        assert len(summarize(events, 7).top_pages) == 10


class TestAnalyticsService:
    async def test_range_must_be_known(self, session: AsyncSession) -> None:
        with pytest.raises(ValidationFailed):
            await AnalyticsService(session).summary(3)

    async def test_only_events_in_range(self, session: AsyncSession) -> None:
        now = datetime.now(UTC)
        session.add_all(
            [
                event("/recent", created_at=now - timedelta(days=1)),
                event("/old", created_at=now - timedelta(days=20)),
            ]
        )
        await session.commit()
        service = AnalyticsService(session)
        assert [p.name for p in (await service.summary(7)).top_pages] == ["/recent"]
        assert (await service.summary(30)).total_page_views == 2


class TestAnalyticsAPI:
    async def test_track_and_summarize(
        self, client: httpx.AsyncClient, sign_in: Callable, admin: CurrentUser
    ) -> None:
        resp = await client.post(
            "/api/v1/analytics/page-view",
            json={"path": "/solutions", "screen_width": 1280, "screen_height": 720},
        )
        assert resp.status_code == 204

        sign_in(admin)
        resp = await client.get("/api/v1/analytics/summary", params={"days": 14})
        body = resp.json()
        assert body["days"] == 14
        assert body["top_pages"] == [{"name": "/solutions", "count": 1}]

    async def test_summary_is_admin_only(
        self, client: httpx.AsyncClient, sign_in: Callable, user: CurrentUser
    ) -> None:
        sign_in(user)
        resp = await client.get("/api/v1/analytics/summary")
        assert resp.status_code == 403
