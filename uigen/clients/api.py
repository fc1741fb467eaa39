"""Backend client: credential verification and project storage over HTTP.

Implements both the CredentialVerifier and ProjectRepository collaborators.
The underlying httpx.AsyncClient keeps the session cookie set by sign-in, so
project calls made afterwards are authenticated.
"""

import os

import httpx

from uigen.config import get_config
from uigen.state import AuthResult, CreatedProject, ProjectCreationRequest, ProjectSummary
from uigen.utils.retry import send_with_retry

# Auth responses that carry a user-facing error instead of signalling a fault.
_AUTH_REJECTION_CODES = {400, 401, 403, 409}


class UIGenClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        config = get_config()
        base_url = base_url or os.environ.get("UIGEN_API_URL") or config["api_base_url"]
        timeout = timeout if timeout is not None else config.get("request_timeout", 10.0)
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "UIGenClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        return await send_with_retry(lambda: self._http.request(method, url, **kwargs))

    # --- CredentialVerifier ---

    async def sign_in(self, email: str, password: str) -> AuthResult:
        return await self._authenticate("/api/auth/sign-in", email, password)

    async def sign_up(self, email: str, password: str) -> AuthResult:
        return await self._authenticate("/api/auth/sign-up", email, password)

    async def _authenticate(self, url: str, email: str, password: str) -> AuthResult:
        response = await self._request("POST", url, json={"email": email, "password": password})

        if response.status_code in _AUTH_REJECTION_CODES:
            return {"success": False, "error": _error_message(response)}
        response.raise_for_status()

        body = response.json()
        result: AuthResult = {"success": bool(body.get("success"))}
        if body.get("error"):
            result["error"] = body["error"]
        return result

    # --- ProjectRepository ---

    async def list_projects(self) -> list[ProjectSummary]:
        """Return the signed-in user's projects, most recently updated first."""
        response = await self._request("GET", "/api/projects")
        response.raise_for_status()
        return response.json()

    async def create_project(self, request: ProjectCreationRequest) -> CreatedProject:
        response = await self._request("POST", "/api/projects", json=request)
        response.raise_for_status()
        return response.json()


def _error_message(response: httpx.Response) -> str:
    """Pull the server's error text out of a rejected auth response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return body["error"]
    return response.reason_phrase or f"HTTP {response.status_code}"
