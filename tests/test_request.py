import pytest

from brawl_api import USER_AGENT, AuthorizationError, Request, Route, UrlError
from brawl_api.http.request import bearer_value


def test_requests_carry_the_standard_headers(make_client, no_network):
    client = make_client(no_network, key="abc123")
    request = client.build_endpoint_get(Route.player("#P"))

    assert request.method == "GET"
    assert str(request.url) == "https://api.brawlstars.com/v1/players/%23P"
    assert request.headers["User-Agent"] == USER_AGENT
    assert request.headers["Authorization"] == "Bearer abc123"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Content-Length"] == "0"


def test_an_already_prefixed_key_is_not_prefixed_twice():
    assert bearer_value("Bearer abc") == "Bearer abc"
    assert bearer_value("abc") == "Bearer abc"


@pytest.mark.parametrize("key", ["bad\nkey", "bad\rkey", "trailing\n", "nul\x00", "ключ"])
def test_keys_illegal_in_a_header_are_rejected(make_client, key, no_network):
    client = make_client(no_network, key=key)
    with pytest.raises(AuthorizationError):
        client.build_endpoint_get(Route.brawlers())
    with pytest.raises(AuthorizationError):
        client.a_build_endpoint_get(Route.brawlers())


def test_blocking_and_async_requests_are_header_identical(make_client, no_network):
    client = make_client(no_network)
    route = Route.club_members("#CLUB")

    sync_request = client.build_endpoint_get(route)
    async_request = client.a_build_endpoint_get(route)

    assert sync_request.url == async_request.url
    assert sync_request.headers.raw == async_request.headers.raw


@pytest.mark.parametrize("endpoint", ["not a url", "", "ftp://example.com/x", "https://"])
def test_unusable_endpoints_raise_url_error(make_client, endpoint, no_network):
    client = make_client(no_network)
    with pytest.raises(UrlError):
        Request(endpoint=endpoint).build(client)


def test_endpoint_request_defaults_to_a_bodiless_get(make_client, no_network):
    client = make_client(no_network)
    request = client.endpoint_request("https://api.brawlstars.com/v1/brawlers/")
    assert request == Request(endpoint="https://api.brawlstars.com/v1/brawlers/")
    assert request.method == "GET"
    assert request.body is None


def test_client_auto_hashtag_setting_is_used_when_rendering(make_client, no_network):
    inserting = make_client(no_network)
    verbatim = make_client(no_network, auto_hashtag=False)

    assert str(inserting.build_endpoint_get(Route.player("P")).url).endswith("/players/%23P")
    assert str(verbatim.build_endpoint_get(Route.player("P")).url).endswith("/players/P")


def test_async_handle_is_absent_when_async_is_disabled(make_client, no_network):
    client = make_client(no_network, enable_async=False)
    with pytest.raises(RuntimeError):
        client.a_inner


def test_the_key_does_not_show_in_the_client_repr(make_client, no_network):
    client = make_client(no_network, key="very-secret")
    assert "very-secret" not in repr(client)
