"""Analytics service - page view tracking and the admin summary."""

from collections import Counter
from datetime import UTC, datetime, timedelta
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.constants.settings_defaults import ANALYTICS_RANGES_DAYS
from newsdesk.errors import RemoteCallError, ValidationFailed
from newsdesk.models import AnalyticsEvent
from newsdesk.schemas.analytics import AnalyticsSummary, CountEntry, DailyCount, PageView

TOP_N = 10


def _top(counter: Counter[str], n: int = TOP_N) -> list[CountEntry]:
    return [CountEntry(name=name, count=count) for name, count in counter.most_common(n)]


def summarize(events: list[AnalyticsEvent], days: int, search: str = "") -> AnalyticsSummary:
    """Aggregate already-fetched events; ``search`` matches path or referrer."""
    term = search.strip().lower()
    if term:
        events = [
            e
            for e in events
            if term in e.path.lower() or (e.referrer and term in e.referrer.lower())
        ]

    per_day = Counter(e.created_at.date() for e in events)
    return AnalyticsSummary(
        days=days,
        total_page_views=len(events),
        unique_users=len({e.user_id for e in events if e.user_id}),
        top_pages=_top(Counter(e.path for e in events)),
        top_referrers=_top(Counter(e.referrer for e in events if e.referrer)),
        device_resolutions=_top(
            Counter(f"{e.screen_width}x{e.screen_height}" for e in events)
        ),
        views_per_day=[DailyCount(day=d, count=c) for d, c in sorted(per_day.items())],
    )


class AnalyticsService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def track_page_view(self, view: PageView, user_id: UUID | None) -> AnalyticsEvent:
        event = AnalyticsEvent(
            user_id=user_id,
            path=view.path,
            event_type="page_view",
            referrer=view.referrer or None,
            user_agent=view.user_agent,
            screen_width=view.screen_width,
            screen_height=view.screen_height,
        )
        try:
            self.session.add(event)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error tracking page view: {e}")
            raise RemoteCallError("Failed to track page view") from e
        return event

    async def summary(self, days: int, search: str = "") -> AnalyticsSummary:
        if days not in ANALYTICS_RANGES_DAYS:
            raise ValidationFailed(f"days must be one of {list(ANALYTICS_RANGES_DAYS)}")
        since = datetime.now(UTC) - timedelta(days=days)
        try:
            result = await self.session.execute(
                select(AnalyticsEvent)
                .where(AnalyticsEvent.created_at >= since)
                .order_by(AnalyticsEvent.created_at.desc())
            )
            events = list(result.scalars().all())
        except SQLAlchemyError as e:
            print(f"Error fetching analytics events: {e}")
            raise RemoteCallError("Failed to load analytics data. Please try again.") from e
        return summarize(events, days, search)
