"""Unit tests for the Trello request gateway."""

import asyncio
import json

import httpx
import pytest
from respx import MockRouter

from services.errors import (
    TrelloAPIError,
    TrelloAuthenticationError,
    TrelloBadRequestError,
    TrelloConnectionError,
    TrelloNotFoundError,
    TrelloRateLimitError,
    TrelloServerError,
)
from services.gateway import RateLimitState, TrelloGateway, append_query, encode_query
from tests.conftest import API_KEY, BASE_URL, TOKEN, FakeClock


def test_encode_query_drops_none_and_joins_lists() -> None:
    query = encode_query({"fields": ["name", "desc"], "filter": None, "closed": True, "limit": 5})

    assert query == "fields=name%2Cdesc&closed=true&limit=5"


def test_append_query_picks_separator() -> None:
    assert append_query("https://x/1/boards", "a=1") == "https://x/1/boards?a=1"
    assert append_query("https://x/1/boards?a=1", "b=2") == "https://x/1/boards?a=1&b=2"
    assert append_query("https://x/1/boards", "") == "https://x/1/boards"


@pytest.mark.asyncio
async def test_auth_appended_with_question_mark_when_no_params(
    gateway: TrelloGateway, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(f"{BASE_URL}/members/me").mock(return_value=httpx.Response(200, json={"id": "me"}))

    result = await gateway.get("/members/me")

    assert result == {"id": "me"}
    assert str(route.calls[0].request.url) == f"{BASE_URL}/members/me?key={API_KEY}&token={TOKEN}"


@pytest.mark.asyncio
async def test_auth_appended_after_caller_params(gateway: TrelloGateway, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/boards/abc").mock(return_value=httpx.Response(200, json={}))

    await gateway.get("/boards/abc", {"fields": ["name", "desc"]})

    url = route.calls[0].request.url
    assert [key for key, _ in url.params.multi_items()] == ["fields", "key", "token"]
    assert url.params["fields"] == "name,desc"
    assert url.params.get_list("key") == [API_KEY]
    assert url.params.get_list("token") == [TOKEN]


@pytest.mark.asyncio
async def test_path_with_existing_query_gets_single_auth_pair(
    gateway: TrelloGateway, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(f"{BASE_URL}/cards/c1/actions").mock(return_value=httpx.Response(200, json=[]))

    await gateway.get("/cards/c1/actions?filter=commentCard")

    url = route.calls[0].request.url
    assert "?" not in url.query.decode()
    assert url.params["filter"] == "commentCard"
    assert url.params.get_list("key") == [API_KEY]
    assert url.params.get_list("token") == [TOKEN]


@pytest.mark.asyncio
async def test_post_sends_json_body(gateway: TrelloGateway, respx_mock: MockRouter) -> None:
    route = respx_mock.post(f"{BASE_URL}/cards").mock(return_value=httpx.Response(200, json={"id": "c1"}))

    await gateway.post("/cards", {"name": "Test", "idList": "l1"})

    request = route.calls[0].request
    assert json.loads(request.content) == {"name": "Test", "idList": "l1"}
    assert request.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_body_ignored_for_get(gateway: TrelloGateway, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/boards/b1").mock(return_value=httpx.Response(200, json={}))

    await gateway.execute("GET", "/boards/b1", body={"ignored": True})

    assert route.calls[0].request.content == b""


@pytest.mark.asyncio
async def test_empty_response_decodes_to_none(gateway: TrelloGateway, respx_mock: MockRouter) -> None:
    respx_mock.delete(f"{BASE_URL}/cards/c1").mock(return_value=httpx.Response(200))

    assert await gateway.delete("/cards/c1") is None


@pytest.mark.asyncio
async def test_unsupported_method_rejected(gateway: TrelloGateway, respx_mock: MockRouter) -> None:
    with pytest.raises(ValueError, match="Unsupported HTTP method"):
        await gateway.execute("PATCH", "/boards/b1")

    assert len(respx_mock.calls) == 0


@pytest.mark.asyncio
async def test_identical_requests_are_not_cached(gateway: TrelloGateway, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/boards/b1").mock(return_value=httpx.Response(200, json={"id": "b1"}))

    await gateway.get("/boards/b1")
    await gateway.get("/boards/b1")

    assert route.call_count == 2


@pytest.mark.asyncio
async def test_rate_limit_headers_are_recorded(gateway: TrelloGateway, respx_mock: MockRouter) -> None:
    respx_mock.get(f"{BASE_URL}/boards/b1").mock(
        return_value=httpx.Response(
            200, json={}, headers={"x-ratelimit-remaining": "42", "x-ratelimit-reset": "2000"}
        )
    )

    await gateway.get("/boards/b1")

    assert gateway.rate_limit == RateLimitState(remaining=42, reset_epoch_seconds=2000)


@pytest.mark.asyncio
async def test_waits_for_reset_after_429(
    gateway: TrelloGateway, clock: FakeClock, respx_mock: MockRouter
) -> None:
    sent_at: list[float] = []
    responses = iter(
        [
            httpx.Response(429, headers={"x-ratelimit-reset": "1010"}),
            httpx.Response(200, json={"id": "b1"}),
        ]
    )

    def respond(request: httpx.Request) -> httpx.Response:
        sent_at.append(clock.now)
        return next(responses)

    respx_mock.get(f"{BASE_URL}/boards/b1").mock(side_effect=respond)

    result = await gateway.get("/boards/b1")

    assert result == {"id": "b1"}
    assert clock.sleeps == [10.0]
    assert sent_at == [1000.0, 1010.0]


@pytest.mark.asyncio
async def test_429_without_reset_header_retries_immediately(
    gateway: TrelloGateway, clock: FakeClock, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(f"{BASE_URL}/boards/b1").mock(
        side_effect=[httpx.Response(429), httpx.Response(200, json={})]
    )

    await gateway.get("/boards/b1")

    assert route.call_count == 2
    assert clock.sleeps == [0.0]


@pytest.mark.asyncio
async def test_throttles_before_sending_when_budget_is_low(
    gateway: TrelloGateway, clock: FakeClock, respx_mock: MockRouter
) -> None:
    sent_at: list[float] = []

    def respond(request: httpx.Request) -> httpx.Response:
        sent_at.append(clock.now)
        return httpx.Response(200, json={})

    respx_mock.get(f"{BASE_URL}/boards/b1").mock(side_effect=respond)
    gateway.rate_limit = RateLimitState(remaining=3, reset_epoch_seconds=1030)

    await gateway.get("/boards/b1")

    assert clock.sleeps == [30.0]
    assert sent_at == [1030.0]


@pytest.mark.asyncio
async def test_no_throttle_when_reset_has_passed(
    gateway: TrelloGateway, clock: FakeClock, respx_mock: MockRouter
) -> None:
    respx_mock.get(f"{BASE_URL}/boards/b1").mock(return_value=httpx.Response(200, json={}))
    gateway.rate_limit = RateLimitState(remaining=1, reset_epoch_seconds=900)

    await gateway.get("/boards/b1")

    assert clock.sleeps == []


@pytest.mark.asyncio
async def test_low_budget_reported_by_response_throttles_next_call(
    gateway: TrelloGateway, clock: FakeClock, respx_mock: MockRouter
) -> None:
    respx_mock.get(f"{BASE_URL}/boards/b1").mock(
        return_value=httpx.Response(
            200, json={}, headers={"x-ratelimit-remaining": "5", "x-ratelimit-reset": "1020"}
        )
    )

    await gateway.get("/boards/b1")
    assert clock.sleeps == []

    await gateway.get("/boards/b1")
    assert clock.sleeps == [20.0]


@pytest.mark.asyncio
async def test_rate_limit_retry_ceiling(credentials, clock: FakeClock, respx_mock: MockRouter) -> None:
    route = respx_mock.get(f"{BASE_URL}/boards/b1").mock(return_value=httpx.Response(429))

    async with TrelloGateway(
        credentials, max_rate_limit_retries=2, clock=clock, sleep=clock.sleep
    ) as gateway:
        with pytest.raises(TrelloRateLimitError) as exc_info:
            await gateway.get("/boards/b1")

    assert route.call_count == 3
    assert exc_info.value.status_code == 429


@pytest.mark.asyncio
async def test_zero_retry_ceiling_retries_until_success(
    credentials, clock: FakeClock, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(f"{BASE_URL}/boards/b1").mock(
        side_effect=[httpx.Response(429)] * 12 + [httpx.Response(200, json={"id": "b1"})]
    )

    async with TrelloGateway(
        credentials, max_rate_limit_retries=0, clock=clock, sleep=clock.sleep
    ) as gateway:
        result = await gateway.get("/boards/b1")

    assert result == {"id": "b1"}
    assert route.call_count == 13


@pytest.mark.asyncio
async def test_concurrent_calls_share_one_throttle_wait(
    gateway: TrelloGateway, clock: FakeClock, respx_mock: MockRouter
) -> None:
    sent_at: list[float] = []
    remaining_at_send: list[int] = []

    def respond(request: httpx.Request) -> httpx.Response:
        sent_at.append(clock.now)
        remaining_at_send.append(gateway.rate_limit.remaining)
        return httpx.Response(200, json={})

    respx_mock.get(f"{BASE_URL}/boards/b1").mock(side_effect=respond)
    gateway.rate_limit = RateLimitState(remaining=6, reset_epoch_seconds=1030)

    await asyncio.gather(*(gateway.get("/boards/b1") for _ in range(3)))

    assert clock.sleeps == [30.0]
    assert sorted(sent_at) == [1000.0, 1030.0, 1030.0]
    assert remaining_at_send == sorted(remaining_at_send, reverse=True)
    assert gateway.rate_limit.remaining == 3


@pytest.mark.asyncio
async def test_unparseable_reset_header_keeps_successful_response(
    gateway: TrelloGateway, respx_mock: MockRouter
) -> None:
    respx_mock.post(f"{BASE_URL}/cards").mock(
        return_value=httpx.Response(
            200, json={"id": "c1"}, headers={"x-ratelimit-remaining": "50", "x-ratelimit-reset": "inf"}
        )
    )

    result = await gateway.post("/cards", {"name": "Test", "idList": "l1"})

    assert result == {"id": "c1"}
    assert gateway.rate_limit == RateLimitState(remaining=50, reset_epoch_seconds=0)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "error_class"),
    [
        (400, TrelloBadRequestError),
        (401, TrelloAuthenticationError),
        (403, TrelloAuthenticationError),
        (404, TrelloNotFoundError),
        (500, TrelloServerError),
        (503, TrelloServerError),
        (418, TrelloAPIError),
    ],
)
async def test_error_statuses_map_to_typed_errors(
    gateway: TrelloGateway, respx_mock: MockRouter, status_code: int, error_class: type
) -> None:
    route = respx_mock.get(f"{BASE_URL}/boards/b1").mock(
        return_value=httpx.Response(status_code, text="invalid id")
    )

    with pytest.raises(TrelloAPIError) as exc_info:
        await gateway.get("/boards/b1")

    assert type(exc_info.value) is error_class
    assert exc_info.value.status_code == status_code
    assert exc_info.value.detail == "invalid id"
    assert "GET /boards/b1" in str(exc_info.value)
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_error_message_never_contains_credentials(
    gateway: TrelloGateway, respx_mock: MockRouter
) -> None:
    respx_mock.get(f"{BASE_URL}/boards/b1").mock(return_value=httpx.Response(401, text="invalid token"))

    with pytest.raises(TrelloAuthenticationError) as exc_info:
        await gateway.get("/boards/b1")

    assert TOKEN not in str(exc_info.value)
    assert API_KEY not in str(exc_info.value)


@pytest.mark.asyncio
async def test_network_failure_raises_connection_error(
    gateway: TrelloGateway, respx_mock: MockRouter
) -> None:
    route = respx_mock.get(f"{BASE_URL}/boards/b1").mock(
        side_effect=httpx.ConnectError(f"connection refused for token={TOKEN}")
    )

    with pytest.raises(TrelloConnectionError) as exc_info:
        await gateway.get("/boards/b1")

    assert route.call_count == 1
    assert TOKEN not in str(exc_info.value)
    assert "GET /boards/b1" in str(exc_info.value)


def test_credentials_repr_hides_secrets(credentials) -> None:
    assert API_KEY not in repr(credentials)
    assert TOKEN not in repr(credentials)
