"""Analytics API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import optional_user, require_admin
from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.analytics import AnalyticsSummary, PageView
from newsdesk.services.analytics_service import AnalyticsService
from newsdesk.services.auth_service import CurrentUser

router = APIRouter()


@router.post("/page-view", status_code=status.HTTP_204_NO_CONTENT)
async def track_page_view(
    view: PageView,
    user: CurrentUser | None = Depends(optional_user),
    db: AsyncSession = Depends(get_db),
) -> None:
    await AnalyticsService(db).track_page_view(view, user.id if user else None)


@router.get(
    "/summary", response_model=AnalyticsSummary, dependencies=[Depends(require_admin)]
)
async def analytics_summary(
    days: int = 7, search: str = "", db: AsyncSession = Depends(get_db)
) -> AnalyticsSummary:
    """Page view totals over the last ``days`` days (7, 14, 30 or 90)."""
    return await AnalyticsService(db).summary(days, search)
