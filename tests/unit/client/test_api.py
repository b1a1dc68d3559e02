"""Tests for HttpPartnershipApi."""

import json

import httpx
import pytest

from paire.client import (
    ApiError,
    ApiNotFoundError,
    ApiUnauthorizedError,
    HttpPartnershipApi,
)
from paire.config import ClientSettings
from tests.unit.client.fakes import invitation_item, partnership


def null_response() -> httpx.Response:
    return httpx.Response(
        200, content=b"null", headers={"content-type": "application/json"}
    )


def make_api(handler, auth_token: str | None = "session-jwt") -> HttpPartnershipApi:
    return HttpPartnershipApi(
        base_url="http://api.test",
        auth_token=auth_token,
        transport=httpx.MockTransport(handler),
    )


class TestRequests:
    """Outgoing requests."""

    @pytest.mark.asyncio
    async def test_sends_session_cookie(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return null_response()

        async with make_api(handler) as api:
            await api.get_my_partnership()

        assert seen[0].headers["cookie"] == "auth_token=session-jwt"
        assert seen[0].url.path == "/partnership"

    @pytest.mark.asyncio
    async def test_anonymous_sends_no_cookie(self):
        seen: list[httpx.Request] = []
        item = invitation_item("tok")

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=item.model_dump(mode="json"))

        async with make_api(handler, auth_token=None) as api:
            details = await api.get_invitation_details("tok")

        assert "cookie" not in seen[0].headers
        assert seen[0].url.path == "/partnership/invitation/tok"
        assert details == item

    @pytest.mark.asyncio
    async def test_token_is_one_path_segment(self):
        """Reserved characters in a token cannot change the requested route."""
        seen: list[httpx.Request] = []
        item = invitation_item("a/../b?x#y")

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=item.model_dump(mode="json"))

        async with make_api(handler, auth_token=None) as api:
            await api.get_invitation_details("a/../b?x#y")

        assert seen[0].url.raw_path == b"/partnership/invitation/a%2F..%2Fb%3Fx%23y"
        assert seen[0].url.query == b""

    @pytest.mark.asyncio
    async def test_send_invitation_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(202, json={"message": "ok"})

        async with make_api(handler) as api:
            await api.send_invitation("bob@example.com")

        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"email": "bob@example.com"}

    def test_from_settings(self):
        api = HttpPartnershipApi.from_settings(
            ClientSettings(api_base_url="http://api.test", request_timeout_seconds=3.0)
        )

        assert str(api._client.base_url) == "http://api.test"
        assert api._client.timeout.read == 3.0


class TestResponses:
    """Response parsing."""

    @pytest.mark.asyncio
    async def test_null_partnership(self):
        async with make_api(lambda request: null_response()) as api:
            assert await api.get_my_partnership() is None

    @pytest.mark.asyncio
    async def test_accept_unwraps_partnership(self):
        created = partnership("alice-id", "bob-id")
        body = {
            "message": "Partnership created",
            "partnership": created.model_dump(mode="json"),
        }

        async with make_api(lambda request: httpx.Response(200, json=body)) as api:
            result = await api.accept_invitation("tok")

        assert result.id == created.id
        assert result.user2.display_name == "Bob"

    @pytest.mark.asyncio
    async def test_pending_invitations_list(self):
        items = [invitation_item("a"), invitation_item("b")]
        body = [item.model_dump(mode="json") for item in items]

        async with make_api(lambda request: httpx.Response(200, json=body)) as api:
            result = await api.get_pending_invitations()

        assert [item.token for item in result] == ["a", "b"]


class TestErrors:
    """Error statuses map to client errors."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code,error_type",
        [
            (401, ApiUnauthorizedError),
            (404, ApiNotFoundError),
            (409, ApiError),
            (410, ApiError),
            (500, ApiError),
        ],
    )
    async def test_status_mapping(self, status_code, error_type):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json={"detail": "nope"})

        async with make_api(handler) as api:
            with pytest.raises(error_type) as exc_info:
                await api.accept_invitation("tok")

        assert exc_info.value.status_code == status_code
        assert exc_info.value.detail == "nope"

    @pytest.mark.asyncio
    async def test_non_json_error_uses_reason(self):
        async with make_api(lambda request: httpx.Response(502, text="bad")) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.get_profile()

        assert exc_info.value.detail == "Bad Gateway"

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_api(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.get_my_partnership()

        assert exc_info.value.status_code is None
