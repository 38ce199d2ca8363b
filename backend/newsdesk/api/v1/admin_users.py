"""Account management API endpoints (admin only)."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import get_auth_client, require_admin
from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.account import (
    ManagedUser,
    ManagedUserCreate,
    ManagedUserListResponse,
    ManagedUserUpdate,
)
from newsdesk.schemas.article import SortDirection
from newsdesk.services.account_service import AccountService
from newsdesk.services.auth_service import AuthClient

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=ManagedUserListResponse)
async def list_users(
    search: str = "",
    sort: str = "email",
    direction: SortDirection = "asc",
    auth: AuthClient = Depends(get_auth_client),
    db: AsyncSession = Depends(get_db),
) -> ManagedUserListResponse:
    """Provider users merged with their roles."""
    users = await AccountService(db).list_users(
        auth, search=search, sort_field=sort, descending=direction == "desc"
    )
    return ManagedUserListResponse(users=users, total=len(users))


@router.post("", response_model=ManagedUser, status_code=status.HTTP_201_CREATED)
async def create_user(
    form: ManagedUserCreate,
    auth: AuthClient = Depends(get_auth_client),
    db: AsyncSession = Depends(get_db),
) -> ManagedUser:
    return await AccountService(db).create_user(auth, form)


@router.patch("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: UUID,
    form: ManagedUserUpdate,
    auth: AuthClient = Depends(get_auth_client),
    db: AsyncSession = Depends(get_db),
) -> None:
    await AccountService(db).update_user(auth, user_id, form)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    auth: AuthClient = Depends(get_auth_client),
    db: AsyncSession = Depends(get_db),
) -> None:
    await AccountService(db).delete_user(auth, user_id)
