"""The authenticated client shared by every fetch."""
from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, Optional

import httpx

from ..config import ClientConfig
from ..constants import USER_AGENT
from .request import Request

if TYPE_CHECKING:
    from .routes import Route


logger = logging.getLogger(__name__)


class Client:
    """Holds the API key and the transport handles used to reach the API.

    The blocking :class:`httpx.Client` is created up front. The
    :class:`httpx.AsyncClient` is created on the first async fetch, and only
    when ``config.enable_async`` is set. Both are safe to share between
    concurrent fetches.

    ``aclose()`` (or ``async with``) releases both handles. ``close()`` (or
    ``with``) only reaches the blocking one, and warns when an async handle
    is still open.
    """

    def __init__(
        self,
        auth_key: str,
        *,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._auth_key = auth_key
        self.config = config or ClientConfig()
        self._timeout = httpx.Timeout(self.config.timeout, connect=self.config.connect_timeout)
        self._headers = {"User-Agent": USER_AGENT}
        self._async_transport = async_transport

        self._inner = httpx.Client(timeout=self._timeout, headers=self._headers, transport=transport)
        self._a_inner: Optional[httpx.AsyncClient] = None

    def __repr__(self) -> str:
        return f"Client(config={self.config!r})"

    @property
    def auth_key(self) -> str:
        return self._auth_key

    @property
    def auto_hashtag(self) -> bool:
        return self.config.auto_hashtag

    @property
    def inner(self) -> httpx.Client:
        return self._inner

    @property
    def a_inner(self) -> httpx.AsyncClient:
        if not self.config.enable_async:
            raise RuntimeError("Async support is disabled for this client (ClientConfig.enable_async).")
        if self._a_inner is None:
            self._a_inner = httpx.AsyncClient(
                timeout=self._timeout,
                headers=self._headers,
                transport=self._async_transport,
            )
        return self._a_inner

    def endpoint_request(self, endpoint: str) -> Request:
        """Return a GET :class:`Request` for an absolute endpoint URL."""

        return Request(endpoint=endpoint)

    def route_request(self, route: "Route") -> Request:
        return self.endpoint_request(route.to_url_str(auto_hashtag=self.auto_hashtag))

    def build_endpoint_get(self, route: "Route") -> httpx.Request:
        return self.route_request(route).build(self)

    def a_build_endpoint_get(self, route: "Route") -> httpx.Request:
        return self.route_request(route).a_build(self)

    def close(self) -> None:
        """Close the blocking handle. Use :meth:`aclose` to release both."""

        self._inner.close()
        if self._a_inner is not None and not self._a_inner.is_closed:
            logger.warning("Client closed with its async handle still open")
            warnings.warn(
                "Client.close() does not close the async handle; use 'await client.aclose()' "
                "or 'async with client' after async fetches.",
                ResourceWarning,
                stacklevel=2,
            )

    async def aclose(self) -> None:
        if self._a_inner is not None:
            await self._a_inner.aclose()
        self._inner.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


__all__ = ["Client"]
