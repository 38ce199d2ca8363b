"""Account service - roles, profile details, preferences and user management."""

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.errors import RemoteCallError
from newsdesk.models import UserDetails, UserRole, UserSettings
from newsdesk.schemas.account import (
    ManagedUser,
    ManagedUserCreate,
    ManagedUserUpdate,
    UserDetailsSchema,
    UserSettingsSchema,
)
from newsdesk.services.auth_service import AuthClient
from newsdesk.services.records import parse_record

DEFAULT_ROLE = "viewer"
MANAGED_USER_SORT_FIELDS = ("email", "name", "role", "created_at", "last_sign_in_at")


def display_name(metadata: dict[str, Any]) -> str:
    if metadata.get("name"):
        return str(metadata["name"])
    return " ".join(
        part for part in (metadata.get("first_name"), metadata.get("last_name")) if part
    )


def merge_users(users: list[dict[str, Any]], roles: dict[str, str]) -> list[ManagedUser]:
    """Join provider users with their role rows; users without a row are viewers."""
    merged = []
    for user in users:
        metadata = user.get("user_metadata") or {}
        merged.append(
            ManagedUser(
                id=user["id"],
                email=user.get("email") or "",
                name=display_name(metadata),
                role=roles.get(str(user["id"]), DEFAULT_ROLE),
                created_at=user.get("created_at"),
                last_sign_in_at=user.get("last_sign_in_at"),
                metadata=metadata,
            )
        )
    return merged


def search_users(users: list[ManagedUser], term: str) -> list[ManagedUser]:
    term = term.strip().lower()
    if not term:
        return users
    return [u for u in users if term in u.email.lower() or term in u.name.lower()]


def sort_users(users: list[ManagedUser], field: str, descending: bool = False) -> list[ManagedUser]:
    if field not in MANAGED_USER_SORT_FIELDS:
        field = "email"
    # None values always sort first ascending
    return sorted(
        users,
        key=lambda u: (getattr(u, field) is not None, getattr(u, field) or ""),
        reverse=descending,
    )


class AccountService:
    """Rows keyed by the auth provider's user id."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_role(self, user_id: UUID) -> str | None:
        try:
            result = await self.session.execute(
                select(UserRole.role).where(UserRole.user_id == user_id)
            )
        except SQLAlchemyError as e:
            print(f"Error fetching user role: {e}")
            raise RemoteCallError("Failed to load user role") from e
        return result.scalar_one_or_none()

    async def get_details(self, user_id: UUID) -> UserDetailsSchema:
        details = await self._get_or_create(UserDetails, user_id)
        return parse_record(UserDetailsSchema, details, "user details")

    async def update_details(self, user_id: UUID, form: UserDetailsSchema) -> UserDetailsSchema:
        details = await self._get_or_create(UserDetails, user_id)
        for key, value in form.model_dump().items():
            setattr(details, key, value)
        await self._commit("Failed to save profile")
        return parse_record(UserDetailsSchema, details, "user details")

    async def get_settings(self, user_id: UUID) -> UserSettingsSchema:
        settings = await self._get_or_create(UserSettings, user_id)
        return parse_record(UserSettingsSchema, settings, "user settings")

    async def update_settings(
        self, user_id: UUID, form: UserSettingsSchema
    ) -> UserSettingsSchema:
        settings = await self._get_or_create(UserSettings, user_id)
        settings.language_preference = form.language_preference
        settings.theme = form.theme
        settings.notifications = form.notifications.model_dump()
        await self._commit("Failed to save settings")
        return parse_record(UserSettingsSchema, settings, "user settings")

    # Admin: account management

    async def list_users(
        self,
        auth: AuthClient,
        search: str = "",
        sort_field: str = "email",
        descending: bool = False,
    ) -> list[ManagedUser]:
        users = await auth.admin_list_users()
        try:
            result = await self.session.execute(select(UserRole))
            roles = {str(r.user_id): r.role for r in result.scalars().all()}
        except SQLAlchemyError as e:
            print(f"Error fetching user roles: {e}")
            raise RemoteCallError("Failed to fetch users") from e
        merged = merge_users(users, roles)
        return sort_users(search_users(merged, search), sort_field, descending)

    async def create_user(self, auth: AuthClient, form: ManagedUserCreate) -> ManagedUser:
        """Create the provider user, then its role row."""
        user = await auth.admin_create_user(form.email, form.password, {"name": form.name})
        self.session.add(UserRole(user_id=UUID(str(user["id"])), role=form.role))
        await self._commit("Failed to create user")
        return merge_users([user], {str(user["id"]): form.role})[0]

    async def update_user(
        self, auth: AuthClient, user_id: UUID, form: ManagedUserUpdate
    ) -> None:
        if form.name is not None:
            await auth.admin_update_user(user_id, {"name": form.name})
        if form.role is not None:
            try:
                result = await self.session.execute(
                    select(UserRole).where(UserRole.user_id == user_id)
                )
            except SQLAlchemyError as e:
                print(f"Error fetching user role: {e}")
                raise RemoteCallError("Failed to update user") from e
            row = result.scalar_one_or_none()
            if row:
                row.role = form.role
            else:
                self.session.add(UserRole(user_id=user_id, role=form.role))
            await self._commit("Failed to update user")

    async def delete_user(self, auth: AuthClient, user_id: UUID) -> None:
        await auth.admin_delete_user(user_id)
        try:
            await self.session.execute(delete(UserRole).where(UserRole.user_id == user_id))
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error deleting user role: {e}")
            raise RemoteCallError("Failed to delete user") from e

    async def _get_or_create(self, model: type, user_id: UUID) -> Any:
        """Fetch the user's row, inserting one with defaults if missing."""
        try:
            result = await self.session.execute(select(model).where(model.user_id == user_id))
            row = result.scalar_one_or_none()
            if row is None:
                row = model(user_id=user_id)
                self.session.add(row)
                await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error loading {model.__tablename__}: {e}")
            raise RemoteCallError("Failed to load account settings") from e
        return row

    async def _commit(self, failure: str) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            print(f"Error saving account data: {e}")
            raise RemoteCallError(failure) from e
