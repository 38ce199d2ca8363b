"""Auth API endpoints, backed by the hosted auth provider."""

from typing import Any

from fastapi import APIRouter, Depends, status

from newsdesk.api.deps import get_auth_client, get_current_user
from newsdesk.errors import RemoteCallError
from newsdesk.schemas.auth import (
    PasswordResetRequest,
    PasswordUpdateRequest,
    RefreshRequest,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
    UserResponse,
)
from newsdesk.services.auth_service import AuthClient, CurrentUser, safe_redirect

router = APIRouter()


def _session(data: dict[str, Any], redirect_to: str = "/dashboard") -> SessionResponse:
    user = data.get("user") or {}
    if not data.get("access_token") or not user.get("id"):
        print(f"Unexpected session payload keys: {sorted(data)}")
        raise RemoteCallError("Failed to sign in. Please try again.")
    return SessionResponse(
        access_token=data["access_token"],
        refresh_token=data.get("refresh_token", ""),
        expires_in=data.get("expires_in"),
        user_id=user["id"],
        email=user.get("email"),
        redirect_to=redirect_to,
    )


@router.post("/sign-up", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(
    request: SignUpRequest, auth: AuthClient = Depends(get_auth_client)
) -> UserResponse:
    """Register; the provider sends the confirmation e-mail."""
    metadata = {"first_name": request.first_name, "last_name": request.last_name}
    data = await auth.sign_up(request.email, request.password, metadata)
    user = data.get("user") or data
    return UserResponse(
        id=user["id"],
        email=user.get("email"),
        role="user",
        metadata=user.get("user_metadata") or metadata,
    )


@router.post("/sign-in", response_model=SessionResponse)
async def sign_in(
    request: SignInRequest, auth: AuthClient = Depends(get_auth_client)
) -> SessionResponse:
    data = await auth.sign_in(request.email, request.password)
    return _session(data, safe_redirect(request.next))


@router.post("/refresh", response_model=SessionResponse)
async def refresh(
    request: RefreshRequest, auth: AuthClient = Depends(get_auth_client)
) -> SessionResponse:
    return _session(await auth.refresh(request.refresh_token))


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    user: CurrentUser = Depends(get_current_user),
    auth: AuthClient = Depends(get_auth_client),
) -> None:
    await auth.sign_out(user.access_token)


@router.post("/reset-password", status_code=status.HTTP_202_ACCEPTED)
async def reset_password(
    request: PasswordResetRequest, auth: AuthClient = Depends(get_auth_client)
) -> dict[str, str]:
    await auth.reset_password(request.email)
    return {"message": "Check your email for the password reset link"}


@router.put("/password")
async def update_password(
    request: PasswordUpdateRequest,
    user: CurrentUser = Depends(get_current_user),
    auth: AuthClient = Depends(get_auth_client),
) -> dict[str, str]:
    await auth.update_user(user.access_token, {"password": request.password})
    return {"message": "Password updated successfully"}


@router.get("/me", response_model=UserResponse)
async def me(user: CurrentUser = Depends(get_current_user)) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        role="admin" if user.is_admin else user.role,
        metadata=user.metadata,
    )
