"""Partnership API as consumed by the frontend view models.

``PartnershipApi`` is the contract the resolution flow and the state panel
depend on. ``HttpPartnershipApi`` implements it over the HTTP API with
httpx, authenticating with the ``auth_token`` session cookie.
"""

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

import httpx
import logfire

from paire.application.usecase.partnership import (
    InvitationItem,
    PartnershipResponse,
)
from paire.application.usecase.profile import ProfileResponse
from paire.client.error import ApiError, ApiNotFoundError, ApiUnauthorizedError
from paire.config import ClientSettings
from paire.util.observability import redact_token


class PartnershipApi(ABC):
    """Operations the partnership screens need.

    Every mutating call invalidates anything the caller has cached;
    callers re-fetch instead of patching local state.
    """

    @abstractmethod
    async def get_profile(self) -> ProfileResponse:
        """Get the caller's own profile."""
        pass

    @abstractmethod
    async def send_invitation(self, email: str) -> None:
        """Invite a partner by email."""
        pass

    @abstractmethod
    async def get_invitation_details(self, token: str) -> InvitationItem:
        """Preview an invitation. Does not require a session.

        Raises:
            ApiNotFoundError: If no invitation has this token
        """
        pass

    @abstractmethod
    async def get_pending_invitations(self) -> list[InvitationItem]:
        """Invitations addressed to the caller, newest first."""
        pass

    @abstractmethod
    async def accept_invitation(self, token: str) -> PartnershipResponse:
        """Accept an invitation. Succeeds at most once per token."""
        pass

    @abstractmethod
    async def get_my_partnership(self) -> PartnershipResponse | None:
        """The caller's partnership, or None."""
        pass

    @abstractmethod
    async def end_partnership(self, partnership_id: str) -> None:
        """End a partnership the caller belongs to."""
        pass


class HttpPartnershipApi(PartnershipApi):
    """``PartnershipApi`` over HTTP.

    Usage:
        async with HttpPartnershipApi(base_url, auth_token=token) as api:
            partnership = await api.get_my_partnership()
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: API root, e.g. "http://localhost:8000"
            auth_token: Session JWT sent as the ``auth_token`` cookie
            timeout_seconds: Per-request timeout
            transport: Optional httpx transport (tests, ASGI)
        """
        headers = {"Accept": "application/json"}
        if auth_token:
            headers["Cookie"] = f"auth_token={auth_token}"

        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        auth_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HttpPartnershipApi":
        return cls(
            base_url=settings.api_base_url,
            auth_token=auth_token,
            timeout_seconds=settings.request_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "HttpPartnershipApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_profile(self) -> ProfileResponse:
        with logfire.span("partnership_api.get_profile"):
            response = await self._request("GET", "/profile/me")
            return ProfileResponse.model_validate(response.json())

    async def send_invitation(self, email: str) -> None:
        with logfire.span("partnership_api.send_invitation"):
            await self._request("POST", "/partnership/invite", json={"email": email})

    async def get_invitation_details(self, token: str) -> InvitationItem:
        with logfire.span(
            "partnership_api.get_invitation_details", token=redact_token(token)
        ):
            response = await self._request(
                "GET", f"/partnership/invitation/{quote(token, safe='')}"
            )
            return InvitationItem.model_validate(response.json())

    async def get_pending_invitations(self) -> list[InvitationItem]:
        with logfire.span("partnership_api.get_pending_invitations"):
            response = await self._request("GET", "/partnership/pending-invitations")
            return [InvitationItem.model_validate(item) for item in response.json()]

    async def accept_invitation(self, token: str) -> PartnershipResponse:
        with logfire.span(
            "partnership_api.accept_invitation", token=redact_token(token)
        ):
            response = await self._request(
                "POST", "/partnership/accept-invitation", json={"token": token}
            )
            return PartnershipResponse.model_validate(response.json()["partnership"])

    async def get_my_partnership(self) -> PartnershipResponse | None:
        with logfire.span("partnership_api.get_my_partnership"):
            response = await self._request("GET", "/partnership")
            data = response.json()
            if data is None:
                return None
            return PartnershipResponse.model_validate(data)

    async def end_partnership(self, partnership_id: str) -> None:
        with logfire.span(
            "partnership_api.end_partnership", partnership_id=partnership_id
        ):
            await self._request("DELETE", f"/partnership/{partnership_id}")

    async def _request(
        self, method: str, path: str, json: dict | None = None
    ) -> httpx.Response:
        """Send a request and raise on error statuses.

        Raises:
            ApiUnauthorizedError: On 401
            ApiNotFoundError: On 404
            ApiError: On any other error status or transport failure
        """
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logfire.error("Partnership API unreachable", method=method, error=str(e))
            raise ApiError(None, str(e)) from e

        if response.status_code < 400:
            return response

        detail = _error_detail(response)
        logfire.warn(
            "Partnership API error",
            method=method,
            status_code=response.status_code,
            detail=detail,
        )
        if response.status_code == 401:
            raise ApiUnauthorizedError(response.status_code, detail)
        if response.status_code == 404:
            raise ApiNotFoundError(response.status_code, detail)
        raise ApiError(response.status_code, detail)


def _error_detail(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except (ValueError, AttributeError):
        detail = None
    if isinstance(detail, str):
        return detail
    return response.reason_phrase or f"HTTP {response.status_code}"
