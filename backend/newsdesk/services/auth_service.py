"""Client for the hosted auth provider and the signed-in user context."""

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode
from uuid import UUID

import httpx

from newsdesk.config import get_settings
from newsdesk.errors import AuthRequired, ConfigurationError, RemoteCallError, ValidationFailed

# Provider message fragment -> error code returned to the client
SIGN_IN_ERRORS: dict[str, str] = {
    "Invalid login credentials": "invalid_credentials",
    "Invalid email": "invalid_email",
    "Invalid grant": "invalid_grant",
}


@dataclass(frozen=True)
class CurrentUser:
    """
    The signed-in user, passed explicitly to whatever needs it.
    Built per request from the bearer token.
    """

    id: UUID
    email: str | None
    access_token: str
    role: str = "user"
    metadata: dict[str, Any] = field(default_factory=dict)
    is_admin: bool = False

    def is_allowed(self, role: str) -> bool:
        if role == "admin":
            return self.is_admin
        if role == "user":
            return True
        return self.role == role


def is_admin_email(email: str | None, admin_domain: str) -> bool:
    return bool(email) and email.lower().endswith(admin_domain.lower())


def safe_redirect(path: str | None, default: str = "/dashboard") -> str:
    """Only local paths are accepted as post-login targets."""
    if not path or not path.startswith("/") or path.startswith("//"):
        return default
    return path


def login_url(requested_path: str) -> str:
    return f"/login?{urlencode({'next': safe_redirect(requested_path)})}"


def _error_text(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text
    if isinstance(data, dict):
        for key in ("msg", "error_description", "message", "error"):
            if data.get(key):
                return str(data[key])
    return resp.text


class AuthClient:
    """Async client for the provider's ``/auth/v1`` REST API."""

    def __init__(self, http_client: httpx.AsyncClient | None = None):
        self.settings = get_settings()
        self.http_client = http_client or httpx.AsyncClient(
            base_url=self.settings.auth_url,
            timeout=self.settings.http_timeout_seconds,
        )

    def _headers(self, token: str | None = None) -> dict[str, str]:
        return {
            "apikey": self.settings.supabase_anon_key,
            "Authorization": f"Bearer {token or self.settings.supabase_anon_key}",
        }

    def _admin_headers(self) -> dict[str, str]:
        key = self.settings.supabase_service_role_key
        if not key:
            raise ConfigurationError("User management is not configured")
        return {"apikey": key, "Authorization": f"Bearer {key}"}

    async def _request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        failure: str,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            return await self.http_client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            print(f"Auth provider request failed ({method} {url}): {e}")
            raise RemoteCallError(failure) from e

    @staticmethod
    def _json(resp: httpx.Response, failure: str) -> dict[str, Any]:
        if resp.is_error:
            print(f"Auth provider error {resp.status_code}: {_error_text(resp)}")
            raise RemoteCallError(failure)
        return resp.json() if resp.content else {}

    async def sign_up(self, email: str, password: str, metadata: dict[str, Any]) -> dict[str, Any]:
        failure = "Failed to create account. Please try again."
        resp = await self._request(
            "POST",
            "/signup",
            headers=self._headers(),
            json={"email": email, "password": password, "data": metadata},
            failure=failure,
        )
        if resp.status_code in (400, 422):
            raise ValidationFailed(_error_text(resp))
        return self._json(resp, failure)

    async def sign_in(self, email: str, password: str) -> dict[str, Any]:
        """Password grant. Known provider errors become short error codes."""
        resp = await self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            headers=self._headers(),
            json={"email": email, "password": password},
            failure="Failed to sign in. Please try again.",
        )
        if resp.is_error:
            text = _error_text(resp)
            for fragment, code in SIGN_IN_ERRORS.items():
                if fragment.lower() in text.lower():
                    raise AuthRequired(code)
        return self._json(resp, "Failed to sign in. Please try again.")

    async def refresh(self, refresh_token: str) -> dict[str, Any]:
        resp = await self._request(
            "POST",
            "/token",
            params={"grant_type": "refresh_token"},
            headers=self._headers(),
            json={"refresh_token": refresh_token},
            failure="Failed to refresh session",
        )
        if resp.status_code in (400, 401):
            raise AuthRequired("Session expired")
        return self._json(resp, "Failed to refresh session")

    async def sign_out(self, token: str) -> None:
        resp = await self._request(
            "POST", "/logout", headers=self._headers(token), failure="Failed to sign out"
        )
        self._json(resp, "Failed to sign out")

    async def reset_password(self, email: str) -> None:
        """Send the reset e-mail; the link lands on the site's reset page."""
        failure = "Failed to send reset password email. Please try again."
        resp = await self._request(
            "POST",
            "/recover",
            params={"redirect_to": f"{self.settings.site_url.rstrip('/')}/reset-password"},
            headers=self._headers(),
            json={"email": email},
            failure=failure,
        )
        self._json(resp, failure)

    async def update_user(self, token: str, attributes: dict[str, Any]) -> dict[str, Any]:
        """Update the signed-in user (``password`` and/or ``data`` metadata)."""
        failure = "Failed to update user. Please try again."
        resp = await self._request(
            "PUT", "/user", headers=self._headers(token), json=attributes, failure=failure
        )
        if resp.status_code == 422:
            raise ValidationFailed(_error_text(resp))
        return self._json(resp, failure)

    async def get_user(self, token: str) -> dict[str, Any] | None:
        """User behind ``token``, or None when the token is not valid."""
        resp = await self._request(
            "GET", "/user", headers=self._headers(token), failure="Failed to load session"
        )
        if resp.status_code in (401, 403):
            return None
        return self._json(resp, "Failed to load session")

    # Admin user API, service role key required

    async def admin_list_users(self) -> list[dict[str, Any]]:
        failure = "Failed to fetch users"
        resp = await self._request(
            "GET", "/admin/users", headers=self._admin_headers(), failure=failure
        )
        data = self._json(resp, failure)
        return list(data.get("users", []))

    async def admin_create_user(
        self, email: str, password: str, metadata: dict[str, Any]
    ) -> dict[str, Any]:
        failure = "Failed to create user"
        resp = await self._request(
            "POST",
            "/admin/users",
            headers=self._admin_headers(),
            json={
                "email": email,
                "password": password,
                "email_confirm": True,
                "user_metadata": metadata,
            },
            failure=failure,
        )
        if resp.status_code == 422:
            raise ValidationFailed(_error_text(resp))
        return self._json(resp, failure)

    async def admin_update_user(self, user_id: UUID, metadata: dict[str, Any]) -> dict[str, Any]:
        failure = "Failed to update user"
        resp = await self._request(
            "PUT",
            f"/admin/users/{user_id}",
            headers=self._admin_headers(),
            json={"user_metadata": metadata},
            failure=failure,
        )
        return self._json(resp, failure)

    async def admin_delete_user(self, user_id: UUID) -> None:
        failure = "Failed to delete user"
        resp = await self._request(
            "DELETE", f"/admin/users/{user_id}", headers=self._admin_headers(), failure=failure
        )
        self._json(resp, failure)

    async def close(self) -> None:
        await self.http_client.aclose()
