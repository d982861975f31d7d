import asyncio
import warnings

import pytest

from brawl_api.models import Player


PLAYER_BODY = {"tag": "#PLAYER", "name": "Someone"}


def test_async_context_manager_closes_both_handles(make_client, json_handler):
    client = make_client(json_handler(PLAYER_BODY))

    async def run():
        async with client:
            await Player.a_fetch(client, "#PLAYER")
            Player.fetch(client, "#PLAYER")

    asyncio.run(run())

    assert client.inner.is_closed
    assert client.a_inner.is_closed


def test_aclose_without_async_use_closes_the_blocking_handle(make_client, no_network):
    client = make_client(no_network)

    asyncio.run(client.aclose())

    assert client.inner.is_closed


def test_blocking_use_closes_cleanly(make_client, json_handler):
    client = make_client(json_handler(PLAYER_BODY))

    with warnings.catch_warnings():
        warnings.simplefilter("error", ResourceWarning)
        with client:
            Player.fetch(client, "#PLAYER")

    assert client.inner.is_closed


def test_blocking_close_warns_about_an_open_async_handle(make_client, json_handler):
    client = make_client(json_handler(PLAYER_BODY))
    asyncio.run(Player.a_fetch(client, "#PLAYER"))

    with pytest.warns(ResourceWarning, match="aclose"):
        with client:
            pass

    assert client.inner.is_closed
    assert not client.a_inner.is_closed


def test_async_handle_is_created_on_first_use(make_client, no_network):
    client = make_client(no_network)

    assert client.a_inner is client.a_inner
