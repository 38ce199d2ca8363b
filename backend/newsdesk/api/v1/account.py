"""Account settings API endpoints for the signed-in user."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.api.deps import get_auth_client, get_current_user
from newsdesk.db.postgres import get_session as get_db
from newsdesk.schemas.account import AccountResponse, UserDetailsSchema, UserSettingsSchema
from newsdesk.services.account_service import AccountService
from newsdesk.services.auth_service import AuthClient, CurrentUser

router = APIRouter()


@router.get("", response_model=AccountResponse)
async def get_account(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> AccountResponse:
    """Role, profile details and preferences. Missing rows are created with defaults."""
    service = AccountService(db)
    return AccountResponse(
        id=user.id,
        email=user.email,
        role="admin" if user.is_admin else user.role,
        details=await service.get_details(user.id),
        settings=await service.get_settings(user.id),
    )


@router.put("/details", response_model=UserDetailsSchema)
async def update_details(
    form: UserDetailsSchema,
    user: CurrentUser = Depends(get_current_user),
    auth: AuthClient = Depends(get_auth_client),
    db: AsyncSession = Depends(get_db),
) -> UserDetailsSchema:
    """Save the profile row and mirror the name into the auth user metadata."""
    details = await AccountService(db).update_details(user.id, form)
    await auth.update_user(
        user.access_token,
        {"data": {"first_name": form.first_name, "last_name": form.last_name}},
    )
    return details


@router.put("/settings", response_model=UserSettingsSchema)
async def update_settings(
    form: UserSettingsSchema,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UserSettingsSchema:
    return await AccountService(db).update_settings(user.id, form)
