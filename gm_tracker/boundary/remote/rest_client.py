"""
Remote backend REST client.

Thin async wrapper over the hosted backend's table API (/rest/v1) and
auth API (/auth/v1). Holds the signed-in user's access token so row
requests run under the user's identity.

Dependencies: httpx, gm_tracker.core.exceptions
System role: Transport for the remote data store and activity logger
"""

import logging
from typing import Any

import httpx

from gm_tracker.configs.remote_backend import RemoteBackendSettings
from gm_tracker.core.exceptions import RemoteBackendError

logger = logging.getLogger(__name__)

_ERROR_KEYS = ("message", "msg", "error_description", "error")


def _error_message(response: httpx.Response) -> str:
    """Extract the backend's error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in _ERROR_KEYS:
            if body.get(key):
                return str(body[key])
    return response.text or response.reason_phrase or f"HTTP {response.status_code}"


class RemoteBackendClient:
    """
    Async client for the hosted relational store and auth provider.

    Usage:
        client = RemoteBackendClient("https://xyz.supabase.co", "anon-key")
        rows = await client.select("projects", order="updated_at", ascending=False)
        await client.aclose()
    """

    def __init__(
        self,
        base_url: str,
        anon_key: str,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize client.

        Args:
            base_url: Backend endpoint URL
            anon_key: Public access key sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self._anon_key = anon_key
        self._access_token: str | None = None
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"apikey": anon_key, "Accept": "application/json"},
        )

    @classmethod
    def from_settings(
        cls,
        settings: RemoteBackendSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "RemoteBackendClient":
        return cls(settings.base_url, settings.anon_key, settings.timeout, transport)

    @property
    def access_token(self) -> str | None:
        return self._access_token

    def set_access_token(self, token: str | None) -> None:
        """Use ``token`` for subsequent requests, or the anon key when None."""
        self._access_token = token

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._access_token or self._anon_key}"}

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        request_headers = self._auth_headers()
        if headers:
            request_headers.update(headers)
        try:
            response = await self._client.request(
                method, path, params=params, json=json, headers=request_headers
            )
        except httpx.HTTPError as e:
            raise RemoteBackendError(
                f"Remote backend unreachable: {type(e).__name__}",
                details={"method": method, "path": path, "error": str(e)},
            ) from e

        if response.is_error:
            raise RemoteBackendError(
                _error_message(response),
                status_code=response.status_code,
                details={"method": method, "path": path},
            )
        return response

    # Table API

    async def select(
        self,
        table: str,
        order: str | None = None,
        ascending: bool = True,
    ) -> list[dict[str, Any]]:
        """
        Read all rows of a table.

        Args:
            table: Table name
            order: Column to sort by (None for backend order)
            ascending: Sort direction

        Returns:
            list[dict]: Rows keyed by column name

        Raises:
            RemoteBackendError: If the request fails
        """
        params = {"select": "*"}
        if order:
            params["order"] = f"{order}.{'asc' if ascending else 'desc'}"
        response = await self._request("GET", f"/rest/v1/{table}", params=params)
        rows = response.json()
        return rows if isinstance(rows, list) else []

    async def upsert(self, table: str, row: dict[str, Any]) -> list[dict[str, Any]]:
        """
        Insert a row, or update it when its primary key already exists.

        Rows without an id get one generated by the backend.

        Returns:
            list[dict]: Stored rows as returned by the backend
        """
        response = await self._request(
            "POST",
            f"/rest/v1/{table}",
            json=row,
            headers={"Prefer": "resolution=merge-duplicates,return=representation"},
        )
        if not response.content:
            return []
        rows = response.json()
        return rows if isinstance(rows, list) else [rows]

    async def insert(self, table: str, row: dict[str, Any]) -> None:
        """Append a row without reading it back."""
        await self._request(
            "POST",
            f"/rest/v1/{table}",
            json=row,
            headers={"Prefer": "return=minimal"},
        )

    async def delete_eq(self, table: str, column: str, value: str) -> None:
        """Delete rows where ``column`` equals ``value``."""
        await self._request(
            "DELETE",
            f"/rest/v1/{table}",
            params={column: f"eq.{value}"},
        )

    # Auth API

    async def sign_in_with_password(self, email: str, password: str) -> dict[str, Any]:
        """
        Exchange credentials for a session.

        Returns:
            dict: Session payload (access_token, refresh_token, expires_in, user)

        Raises:
            RemoteBackendError: If the credentials are rejected or the call fails
        """
        response = await self._request(
            "POST",
            "/auth/v1/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        return response.json()

    async def sign_up(self, email: str, password: str) -> dict[str, Any]:
        """Register a new user."""
        response = await self._request(
            "POST",
            "/auth/v1/signup",
            json={"email": email, "password": password},
        )
        return response.json() if response.content else {}

    async def sign_out(self) -> None:
        """Invalidate the current access token on the backend."""
        if not self._access_token:
            return
        await self._request("POST", "/auth/v1/logout")

    async def get_user(self) -> dict[str, Any] | None:
        """
        Fetch the signed-in user.

        Returns:
            dict | None: User payload, None when no one is signed in
        """
        if not self._access_token:
            return None
        response = await self._request("GET", "/auth/v1/user")
        return response.json()

    async def aclose(self) -> None:
        await self._client.aclose()
