"""Article generation API endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import get_current_user, get_webhook_client
from newsdesk.constants.choices import NewsType
from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.article import LibraryFilters, LibrarySort, NewsArticleListResponse
from newsdesk.schemas.generation import GenerationRequest, GenerationResponse
from newsdesk.services.article_service import ArticleService
from newsdesk.services.library import GENERATION_PICKER, apply_filters, sort_articles
from newsdesk.services.webhooks import WebhookClient

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/articles", response_model=NewsArticleListResponse)
async def list_generation_candidates(
    search: str = "",
    news_types: list[NewsType] = Query(default=[]),
    db: AsyncSession = Depends(get_db),
) -> NewsArticleListResponse:
    """Raw articles for the generation picker."""
    articles = await ArticleService(db).list_raw()
    filters = LibraryFilters(search=search, news_types=news_types)
    articles = sort_articles(
        apply_filters(articles, GENERATION_PICKER, filters), GENERATION_PICKER, LibrarySort()
    )
    return NewsArticleListResponse(articles=articles, total=len(articles))


@router.post("", response_model=GenerationResponse)
async def generate_article(
    request: GenerationRequest,
    webhooks: WebhookClient = Depends(get_webhook_client),
) -> GenerationResponse:
    """
    Hand the selected article and style settings to the workflow engine.

    Returns as soon as the webhook accepts the request; results show up in
    the written articles library once the workflow has run.
    """
    return await webhooks.trigger_generation(request.article_id, request.settings)
