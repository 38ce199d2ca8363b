"""Public news endpoints for the home page."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.article import NewsArticleListResponse
from newsdesk.services.article_service import ArticleService

router = APIRouter()


@router.get("/latest", response_model=NewsArticleListResponse)
async def latest_news(
    limit: int = Query(default=4, ge=1, le=20),
    db: AsyncSession = Depends(get_db),
) -> NewsArticleListResponse:
    """Newest raw articles."""
    articles = await ArticleService(db).latest_raw(limit)
    return NewsArticleListResponse(articles=articles, total=len(articles))
