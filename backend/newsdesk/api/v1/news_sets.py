"""News set (gathering) API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import get_current_user
from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.news_set import NewsSetForm, NewsSetListResponse, NewsSetResponse
from newsdesk.services.auth_service import CurrentUser
from newsdesk.services.news_set_service import NewsSetService

router = APIRouter()


def _listing(sets: list[NewsSetResponse]) -> NewsSetListResponse:
    return NewsSetListResponse(sets=sets, total=len(sets))


@router.get("", response_model=NewsSetListResponse)
async def list_news_sets(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> NewsSetListResponse:
    """List the user's news sets, newest first."""
    return _listing(await NewsSetService(db).list_sets(user.id))


@router.post("", response_model=NewsSetListResponse, status_code=status.HTTP_201_CREATED)
async def create_news_set(
    form: NewsSetForm,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> NewsSetListResponse:
    """Create a news set and return the refreshed list."""
    return _listing(await NewsSetService(db).create_set(user.id, form))


@router.put("/{set_id}", response_model=NewsSetListResponse)
async def update_news_set(
    set_id: UUID,
    form: NewsSetForm,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> NewsSetListResponse:
    return _listing(await NewsSetService(db).update_set(user.id, set_id, form))


@router.delete("/{set_id}", response_model=NewsSetListResponse)
async def delete_news_set(
    set_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> NewsSetListResponse:
    """Delete a news set. There is no confirmation step."""
    return _listing(await NewsSetService(db).delete_set(user.id, set_id))
