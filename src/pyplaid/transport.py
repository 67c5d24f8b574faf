"""HTTP transport abstraction.

The rest of the library only depends on the ``Transport`` protocol: anything
with an async ``send(HttpRequest) -> HttpResponse`` can carry Plaid requests.
Two adapters are provided, one for ``httpx`` (the default) and one for
``requests``. Retries and timeout policy belong to the adapter configuration,
not to the client.
"""

import asyncio
import json
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import httpx
import requests

from .errors import SerializationError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class HttpRequest:
    """A fully formed HTTP request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


@dataclass(frozen=True)
class HttpResponse:
    """Raw HTTP response as returned by a transport."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            SerializationError: If the body is not valid JSON
        """
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise SerializationError(
                f"response body is not valid JSON: {e}", status=self.status
            ) from e


@runtime_checkable
class Transport(Protocol):
    """Capability to send one HTTP request and return its response."""

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Send ``request``, raising ``TransportError`` if no response arrives."""
        ...


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``.

    A client can be injected to control pooling, proxies or to plug in
    ``httpx.MockTransport``. Clients created here are owned and closed by
    ``aclose()``; injected clients are left to their owner.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def send(self, request: HttpRequest) -> HttpResponse:
        if self._client.is_closed:
            raise TransportError(f"request to {request.url} failed: client is closed")
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"request to {request.url} timed out", timeout=True
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"request to {request.url} failed: {e}") from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return HttpResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


class RequestsTransport:
    """Transport backed by blocking ``requests`` sessions.

    Each call runs in a worker thread so the event loop is never blocked.
    ``requests.Session`` is not thread-safe, so when no session is injected
    every worker thread gets its own session. An injected session is shared
    by all threads; only inject one if calls are not made concurrently.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._session = session
        self._local = threading.local()
        self._owned: list[requests.Session] = []
        self._lock = threading.Lock()
        self.timeout = timeout

    def _thread_session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._owned.append(session)
        return session

    def _send_blocking(self, request: HttpRequest) -> HttpResponse:
        try:
            response = self._thread_session().request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise TransportError(
                f"request to {request.url} timed out", timeout=True
            ) from e
        except requests.RequestException as e:
            raise TransportError(f"request to {request.url} failed: {e}") from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return HttpResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def send(self, request: HttpRequest) -> HttpResponse:
        return await asyncio.to_thread(self._send_blocking, request)

    async def aclose(self) -> None:
        """Close the sessions created by this transport."""
        with self._lock:
            sessions, self._owned = self._owned, []
        for session in sessions:
            session.close()
