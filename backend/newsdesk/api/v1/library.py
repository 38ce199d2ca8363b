"""News library API endpoints - raw and written articles."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import get_current_user
from newsdesk.constants.choices import Mood, NewsType
from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.article import (
    BulkDeleteRequest,
    BulkDeleteResponse,
    LibraryFilters,
    LibrarySort,
    NewsArticleListResponse,
    NewsArticleResponse,
    NewsArticleUpdate,
    SortDirection,
    WrittenArticleListResponse,
)
from newsdesk.services.article_service import ArticleService
from newsdesk.services.library import (
    RAW_ARTICLES,
    WRITTEN_ARTICLES,
    Collection,
    Selection,
    apply_filters,
    sort_articles,
    visible_ids,
)

router = APIRouter(dependencies=[Depends(get_current_user)])


def library_filters(
    search: str = "",
    subject: str = "",
    mood: Mood | None = None,
    news_types: list[NewsType] = Query(default=[]),
    date_from: date | None = None,
    date_to: date | None = None,
) -> LibraryFilters:
    return LibraryFilters(
        search=search,
        subject=subject,
        mood=mood,
        news_types=news_types,
        date_from=date_from,
        date_to=date_to,
    )


def library_sort(sort: str = "timestamp", direction: SortDirection = "desc") -> LibrarySort:
    return LibrarySort(field=sort, direction=direction)


def _prune_to_visible(
    request: BulkDeleteRequest, items: list, collection: Collection
) -> list[UUID]:
    """Drop selected ids that the sent filters no longer show."""
    selection = Selection(request.ids)
    selection.prune(visible_ids(apply_filters(items, collection, request.filters)))
    return [i for i in request.ids if i in selection]


def _deleted_message(count: int) -> str:
    return f"Deleted {count} article" + ("" if count == 1 else "s")


@router.get("/raw", response_model=NewsArticleListResponse)
async def list_raw_articles(
    filters: LibraryFilters = Depends(library_filters),
    sort: LibrarySort = Depends(library_sort),
    db: AsyncSession = Depends(get_db),
) -> NewsArticleListResponse:
    """Raw articles after search, filters and sort."""
    articles = await ArticleService(db).list_raw()
    articles = sort_articles(apply_filters(articles, RAW_ARTICLES, filters), RAW_ARTICLES, sort)
    return NewsArticleListResponse(articles=articles, total=len(articles))


@router.get("/written", response_model=WrittenArticleListResponse)
async def list_written_articles(
    filters: LibraryFilters = Depends(library_filters),
    sort: LibrarySort = Depends(library_sort),
    db: AsyncSession = Depends(get_db),
) -> WrittenArticleListResponse:
    articles = await ArticleService(db).list_written()
    articles = sort_articles(
        apply_filters(articles, WRITTEN_ARTICLES, filters), WRITTEN_ARTICLES, sort
    )
    return WrittenArticleListResponse(articles=articles, total=len(articles))


@router.patch("/raw/{article_id}", response_model=NewsArticleResponse)
async def update_raw_article(
    article_id: UUID,
    changes: NewsArticleUpdate,
    db: AsyncSession = Depends(get_db),
) -> NewsArticleResponse:
    """Save the edited fields of a raw article."""
    return await ArticleService(db).update_raw(article_id, changes)


@router.delete("/raw/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_raw_article(article_id: UUID, db: AsyncSession = Depends(get_db)) -> None:
    await ArticleService(db).delete_raw(article_id)


@router.delete("/written/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_written_article(article_id: UUID, db: AsyncSession = Depends(get_db)) -> None:
    await ArticleService(db).delete_written(article_id)


@router.post("/raw/bulk-delete", response_model=BulkDeleteResponse)
async def bulk_delete_raw_articles(
    request: BulkDeleteRequest, db: AsyncSession = Depends(get_db)
) -> BulkDeleteResponse:
    """Delete the selected raw articles in one statement."""
    service = ArticleService(db)
    ids = request.ids
    if request.filters is not None:
        ids = _prune_to_visible(request, await service.list_raw(), RAW_ARTICLES)
    deleted = await service.bulk_delete_raw(ids)
    return BulkDeleteResponse(deleted=deleted, message=_deleted_message(len(deleted)))


@router.post("/written/bulk-delete", response_model=BulkDeleteResponse)
async def bulk_delete_written_articles(
    request: BulkDeleteRequest, db: AsyncSession = Depends(get_db)
) -> BulkDeleteResponse:
    service = ArticleService(db)
    ids = request.ids
    if request.filters is not None:
        ids = _prune_to_visible(request, await service.list_written(), WRITTEN_ARTICLES)
    deleted = await service.bulk_delete_written(ids)
    return BulkDeleteResponse(deleted=deleted, message=_deleted_message(len(deleted)))
