"""
Trello request gateway — async httpx wrapper with auth, rate limiting and retry.

Every Trello call in the server goes through `TrelloGateway.execute`. Uses
query-param auth (?key=...&token=...), throttles when the tracked rate-limit
budget runs low, waits out HTTP 429 responses and maps failures to the typed
errors in services.errors.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from config import API_BASE
from credentials import TrelloCredentials
from logging_utils import create_logger
from services.errors import TrelloConnectionError, TrelloRateLimitError, error_for_status

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")

# Methods that carry a JSON body
_BODY_METHODS = ("POST", "PUT")

RATE_LIMIT_REMAINING_HEADER = "x-ratelimit-remaining"
RATE_LIMIT_RESET_HEADER = "x-ratelimit-reset"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_SAFETY_BUFFER = 5
DEFAULT_MAX_RATE_LIMIT_RETRIES = 10

# Error bodies are truncated to this length in messages and logs
_MAX_DETAIL_LENGTH = 500

QueryParams = Mapping[str, Any]


@dataclass
class RateLimitState:
    """Rate-limit budget as last reported by Trello."""

    remaining: int = 100
    reset_epoch_seconds: int = 0


def encode_query(params: QueryParams | None) -> str:
    """
    Encode query params in order.

    None values are dropped, lists and tuples are comma-joined and booleans
    are rendered as true/false.
    """
    if not params:
        return ""
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(_format_scalar(v) for v in value)
        else:
            value = _format_scalar(value)
        pairs.append((key, value))
    return urlencode(pairs)


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def append_query(url: str, query: str) -> str:
    """Append an encoded query string, using & if the URL already has one."""
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"


def _parse_int_header(headers: httpx.Headers, name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        return None


def _decode(response: httpx.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        detail = response.text
    else:
        if isinstance(payload, dict):
            detail = str(payload.get("message") or payload.get("error") or payload)
        else:
            detail = str(payload)
    return detail.strip()[:_MAX_DETAIL_LENGTH]


class TrelloGateway:
    """
    Executes authenticated requests against the Trello REST API.

    One instance is shared by all adapters. The rate-limit counters are
    guarded by an asyncio lock so concurrent calls cannot jointly overrun
    the remote limit.
    """

    def __init__(
        self,
        credentials: TrelloCredentials,
        *,
        base_url: str = API_BASE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        safety_buffer: int = DEFAULT_SAFETY_BUFFER,
        max_rate_limit_retries: int = DEFAULT_MAX_RATE_LIMIT_RETRIES,
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        logger: Any = None,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._safety_buffer = safety_buffer
        self._max_rate_limit_retries = max_rate_limit_retries
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )
        self._clock = clock
        self._sleep = sleep
        self._logger = logger or create_logger("trello.gateway")
        self._lock = asyncio.Lock()
        self.rate_limit = RateLimitState()

    async def __aenter__(self) -> "TrelloGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if the gateway created it."""
        if self._owns_client:
            await self._client.aclose()

    def build_url(self, path: str, params: QueryParams | None = None) -> str:
        """Full request URL: base + path + caller params, then key and token."""
        url = append_query(f"{self._base_url}{path}", encode_query(params))
        return self._add_auth(url)

    def _add_auth(self, url: str) -> str:
        auth = (
            f"key={quote(self._credentials.api_key, safe='')}"
            f"&token={quote(self._credentials.token, safe='')}"
        )
        return append_query(url, auth)

    async def execute(
        self,
        method: str,
        path: str,
        params: QueryParams | None = None,
        body: Any = None,
    ) -> Any:
        """
        Make an authenticated Trello API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (e.g. "/boards/{id}/lists")
            params: Query params; list values are comma-joined
            body: JSON body, sent for POST and PUT only

        Returns:
            Parsed JSON response, or None for an empty body.

        Raises:
            TrelloAPIError: On a non-2xx response (typed by status).
            TrelloConnectionError: When no response was received.
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self.build_url(path, params)
        json_body = body if method in _BODY_METHODS else None
        retries = 0

        while True:
            await self._throttle(method, path)
            response = await self._send(method, path, url, json_body)

            if response.status_code == 429:
                retries += 1
                if self._max_rate_limit_retries and retries > self._max_rate_limit_retries:
                    self._logger.error(
                        "Rate limit retries exhausted",
                        method=method,
                        path=path,
                        retries=retries - 1,
                    )
                    raise TrelloRateLimitError(429, method, path, _error_detail(response))
                wait = self._rate_limit_wait(response.headers)
                self._logger.warning(
                    "Rate limit exceeded, waiting before retrying",
                    method=method,
                    path=path,
                    wait_seconds=round(wait, 3),
                    attempt=retries,
                )
                await self._sleep(wait)
                continue

            if response.is_success:
                await self._record_rate_limit(response.headers)
                return _decode(response)

            error = error_for_status(response.status_code, method, path, _error_detail(response))
            self._logger.error(
                "Trello API error",
                method=method,
                path=path,
                status_code=response.status_code,
                detail=error.detail,
            )
            raise error

    async def get(self, path: str, params: QueryParams | None = None) -> Any:
        return await self.execute("GET", path, params)

    async def post(self, path: str, body: Any = None, params: QueryParams | None = None) -> Any:
        return await self.execute("POST", path, params, body if body is not None else {})

    async def put(self, path: str, body: Any = None, params: QueryParams | None = None) -> Any:
        return await self.execute("PUT", path, params, body if body is not None else {})

    async def delete(self, path: str, params: QueryParams | None = None) -> Any:
        return await self.execute("DELETE", path, params)

    async def _throttle(self, method: str, path: str) -> None:
        """Wait for the reset window when the budget is at or below the safety buffer."""
        async with self._lock:
            state = self.rate_limit
            if state.remaining <= self._safety_buffer:
                wait = state.reset_epoch_seconds - self._clock()
                if wait > 0:
                    self._logger.warning(
                        "Approaching rate limit, waiting for reset",
                        method=method,
                        path=path,
                        remaining=state.remaining,
                        wait_seconds=round(wait, 3),
                    )
                    await self._sleep(wait)
            # Reserve a slot until the response reports the real figure
            state.remaining -= 1

    async def _send(self, method: str, path: str, url: str, json_body: Any) -> httpx.Response:
        self._logger.debug("Sending Trello request", method=method, path=path)
        try:
            return await self._client.request(method, url, json=json_body)
        except httpx.RequestError as exc:
            reason = self._redact(f"{exc.__class__.__name__}: {exc}".rstrip(": "))
            self._logger.error("Trello request failed", method=method, path=path, reason=reason)
            raise TrelloConnectionError(method, path, reason) from exc

    def _rate_limit_wait(self, headers: httpx.Headers) -> float:
        now = self._clock()
        reset = _parse_int_header(headers, RATE_LIMIT_RESET_HEADER)
        if reset is None:
            reset = now
        return max(0.0, reset - now)

    async def _record_rate_limit(self, headers: httpx.Headers) -> None:
        remaining = _parse_int_header(headers, RATE_LIMIT_REMAINING_HEADER)
        reset = _parse_int_header(headers, RATE_LIMIT_RESET_HEADER)
        if remaining is None and reset is None:
            return
        async with self._lock:
            if remaining is not None:
                self.rate_limit.remaining = remaining
            if reset is not None:
                self.rate_limit.reset_epoch_seconds = reset

    def _redact(self, text: str) -> str:
        for secret in (self._credentials.api_key, self._credentials.token):
            if secret:
                text = text.replace(secret, "***")
        return text
