"""Shared API dependencies: outbound clients and the signed-in user."""

from collections.abc import AsyncGenerator
from datetime import UTC, date, datetime
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.config import get_settings
from newsdesk.db.postgres import get_session as get_db
from newsdesk.errors import AuthRequired, Forbidden
from newsdesk.services.account_service import AccountService
from newsdesk.services.auth_service import AuthClient, CurrentUser, is_admin_email, login_url
from newsdesk.services.webhooks import WebhookClient


async def get_auth_client() -> AsyncGenerator[AuthClient, None]:
    client = AuthClient()
    try:
        yield client
    finally:
        await client.close()


async def get_webhook_client() -> AsyncGenerator[WebhookClient, None]:
    client = WebhookClient()
    try:
        yield client
    finally:
        await client.close()


def bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def resolve_user(
    token: str, auth: AuthClient, db: AsyncSession
) -> CurrentUser | None:
    """Look the token up at the provider and attach the stored role."""
    user = await auth.get_user(token)
    if not user:
        return None

    user_id = UUID(str(user["id"]))
    email = user.get("email")
    role = await AccountService(db).get_role(user_id) or "user"
    admin_domain = get_settings().admin_email_domain
    return CurrentUser(
        id=user_id,
        email=email,
        access_token=token,
        role=role,
        metadata=user.get("user_metadata") or {},
        is_admin=role == "admin" or is_admin_email(email, admin_domain),
    )


async def get_current_user(
    request: Request,
    auth: AuthClient = Depends(get_auth_client),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """Route guard: no valid session means 401 with a login link back here."""
    token = bearer_token(request)
    user = await resolve_user(token, auth, db) if token else None
    if user is None:
        raise AuthRequired("Authentication required", login_url=login_url(request.url.path))
    return user


async def optional_user(
    request: Request,
    auth: AuthClient = Depends(get_auth_client),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser | None:
    """Signed-in user for public endpoints that attach one when available."""
    token = bearer_token(request)
    if not token:
        return None
    return await resolve_user(token, auth, db)


async def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not user.is_allowed("admin"):
        raise Forbidden("Admin access required")
    return user


def get_today() -> date:
    """Reference day for next-run hints."""
    return datetime.now(UTC).date()
