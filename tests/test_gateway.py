"""Tests for HttpGateway."""

import httpx
import pytest
import pytest_asyncio

from pubg_stats.domain import ApiError
from pubg_stats.infrastructure import HttpGateway

URL = "https://api.test/shards/pc-eu/players"


class Recorder:
    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


@pytest_asyncio.fixture
async def make_gateway():
    sessions = []

    def _make(response: httpx.Response, **kwargs):
        recorder = Recorder(response)
        session = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        sessions.append(session)
        return HttpGateway("secret", user_agent="pubg-stats v9.9.9 (https://example.test)", session=session, **kwargs), recorder

    yield _make
    for session in sessions:
        await session.aclose()


class TestHttpGateway:
    """Request headers, decoding and error normalization."""

    @pytest.mark.asyncio
    async def test_fixed_headers(self, make_gateway):
        gateway, recorder = make_gateway(httpx.Response(200, json={"data": []}))

        await gateway.get(URL)

        headers = recorder.requests[0].headers
        assert headers["User-Agent"] == "pubg-stats v9.9.9 (https://example.test)"
        assert headers["Accept"] == "application/json"
        assert headers["Authorization"] == "Bearer secret"
        assert recorder.requests[0].method == "GET"

    @pytest.mark.asyncio
    async def test_params_passed_as_is(self, make_gateway):
        gateway, recorder = make_gateway(httpx.Response(200, json={"data": []}))

        await gateway.get(URL, {"filter[playerNames]": "a b,c"})

        assert recorder.requests[0].url.params["filter[playerNames]"] == "a b,c"

    @pytest.mark.asyncio
    async def test_returns_body_unvalidated(self, make_gateway):
        body = {"data": {"id": "x"}, "included": [{"type": "asset"}], "unexpected": True}
        gateway, _ = make_gateway(httpx.Response(200, json=body))

        assert await gateway.get(URL) == body

    @pytest.mark.asyncio
    async def test_errors_field_raises_api_error(self, make_gateway):
        gateway, _ = make_gateway(httpx.Response(401, json={"errors": ["bad token"]}))

        with pytest.raises(ApiError) as exc:
            await gateway.get(URL)

        assert exc.value.errors == ["bad token"]
        assert exc.value.status_code == 401

    @pytest.mark.asyncio
    async def test_error_body_without_errors_field(self, make_gateway):
        gateway, _ = make_gateway(httpx.Response(500, json={"message": "boom"}))

        with pytest.raises(httpx.HTTPStatusError) as exc:
            await gateway.get(URL)

        assert exc.value.response.status_code == 500

    @pytest.mark.asyncio
    async def test_error_body_not_json(self, make_gateway):
        gateway, _ = make_gateway(httpx.Response(429, content=b"Too Many Requests"))

        with pytest.raises(httpx.HTTPStatusError):
            await gateway.get(URL)

    @pytest.mark.asyncio
    async def test_malformed_success_body(self, make_gateway):
        gateway, _ = make_gateway(httpx.Response(200, content=b"{not json"))

        with pytest.raises(ValueError):
            await gateway.get(URL)

    def test_headers_are_fresh_per_call(self):
        gateway = HttpGateway("secret")
        first = gateway.headers
        first["Authorization"] = "tampered"
        assert gateway.headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_open_session(self):
        gateway = HttpGateway("secret", timeout=5.0)
        async with gateway.open_session() as session:
            assert session.follow_redirects
            assert session.timeout.read == 5.0
