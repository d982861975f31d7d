import asyncio
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from brawl_api import Client, ClientConfig


Handler = Callable[[httpx.Request], httpx.Response]


def _json_handler(body: Any, status: int = 200, headers: Optional[Dict[str, str]] = None) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=body, headers=headers)

    return handler


def _no_network(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request to {request.url}")


@pytest.fixture
def json_handler() -> Callable[..., Handler]:
    """Factory for handlers answering every request with the same JSON body."""
    return _json_handler


@pytest.fixture
def no_network() -> Handler:
    """Handler failing the test if any request reaches the transport."""
    return _no_network


@pytest.fixture
def sent() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(sent):
    clients: List[Client] = []

    def factory(handler: Handler, key: str = "test-key", **options: Any) -> Client:
        def recording(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        transport = httpx.MockTransport(recording)
        client = Client(
            key,
            config=ClientConfig(**options),
            transport=transport,
            async_transport=transport,
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        asyncio.run(client.aclose())
