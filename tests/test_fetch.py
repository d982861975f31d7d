import asyncio

import httpx
import pytest

from brawl_api import (
    Brawlers,
    FetchFromError,
    JsonError,
    RateLimitedError,
    RequestError,
    StatusError,
    fetch_from,
    fetch_into,
    refetch,
)
from brawl_api.models import (
    BattleLog,
    BattlePlayer,
    Brawler,
    BrawlerLeaderboard,
    BrawlerList,
    Club,
    ClubLeaderboard,
    ClubMember,
    ClubMembers,
    Player,
    PlayerClub,
    PlayerLeaderboard,
    PlayerRanking,
)


PLAYER_BODY = {"tag": "#PLAYER", "name": "Someone", "trophies": 1234, "club": {"tag": "#CLUB", "name": "Club"}}
CLUB_BODY = {
    "tag": "#CLUB",
    "name": "Club",
    "type": "open",
    "members": [
        {"tag": "#A", "name": "A", "role": "president"},
        {"tag": "#B", "name": "B", "role": "member"},
    ],
}


def test_fetch_decodes_the_response_into_the_model(make_client, sent, json_handler):
    client = make_client(json_handler(PLAYER_BODY))

    player = Player.fetch(client, "#PLAYER")

    assert player.tag == "#PLAYER"
    assert player.trophies == 1234
    assert player.club == PlayerClub(tag="#CLUB", name="Club")
    assert [str(r.url) for r in sent] == ["https://api.brawlstars.com/v1/players/%23PLAYER"]


def test_async_fetch_matches_the_blocking_one(make_client, sent, json_handler):
    client = make_client(json_handler(PLAYER_BODY))

    blocking = Player.fetch(client, "#PLAYER")
    awaited = asyncio.run(Player.a_fetch(client, "#PLAYER"))

    assert blocking == awaited
    assert sent[0].url == sent[1].url
    assert sent[0].headers.raw == sent[1].headers.raw


def test_concurrent_async_fetches_share_one_client(make_client, sent, json_handler):
    client = make_client(json_handler(PLAYER_BODY))

    async def fetch_many():
        return await asyncio.gather(*(Player.a_fetch(client, f"#P{i}") for i in range(5)))

    players = asyncio.run(fetch_many())

    assert len(players) == 5
    assert len(sent) == 5


def test_refetch_requests_the_same_route_as_fetching_by_property(make_client, sent, json_handler):
    client = make_client(json_handler(PLAYER_BODY))
    player = Player.fetch(client, "#PLAYER")

    fresh = refetch(client, player)
    via_prop = Player.fetch(client, player.get_fetch_prop())

    assert fresh is not player
    assert fresh == player == via_prop
    assert sent[1].url == sent[2].url


def test_refetch_update_replaces_the_instance_contents(make_client, json_handler):
    client = make_client(json_handler(PLAYER_BODY))
    stale = Player(tag="#PLAYER", name="Old name", trophies=1)

    returned = stale.refetch_update(client)

    assert returned is stale
    assert stale.name == "Someone"
    assert stale.trophies == 1234


def test_async_refetch_update(make_client, json_handler):
    client = make_client(json_handler(PLAYER_BODY))
    stale = Player(tag="#PLAYER")

    asyncio.run(stale.a_refetch_update(client))

    assert stale.name == "Someone"


def test_fetching_a_model_from_itself_makes_no_request(make_client, sent, no_network):
    client = make_client(no_network)
    player = Player(tag="#PLAYER", name="Someone", club=PlayerClub(tag="#CLUB"))

    copy = fetch_from(client, Player, player)
    async_copy = asyncio.run(Player.a_fetch_from(client, player))

    assert copy == player and async_copy == player
    assert copy is not player
    assert copy.club is not player.club
    assert sent == []


@pytest.mark.parametrize(
    "source",
    [
        ClubMember(tag="#PLAYER"),
        BattlePlayer(tag="#PLAYER"),
        PlayerRanking(tag="#PLAYER"),
    ],
)
def test_player_can_be_fetched_from_related_models(make_client, sent, source, json_handler):
    client = make_client(json_handler(PLAYER_BODY))

    player = Player.fetch_from(client, source)

    assert player.name == "Someone"
    assert len(sent) == 1
    assert str(sent[0].url).endswith("/players/%23PLAYER")


def test_fetch_into_is_fetch_from_reversed(make_client, sent, json_handler):
    client = make_client(json_handler({"items": []}))
    player = Player(tag="#PLAYER")

    log = fetch_into(client, player, BattleLog)

    assert log.tag == "#PLAYER"
    assert str(sent[0].url).endswith("/players/%23PLAYER/battlelog")
    assert player.fetch_into(client, BattleLog) == log


def test_club_from_a_player_uses_the_players_club(make_client, sent, json_handler):
    client = make_client(json_handler(CLUB_BODY))

    club = Club.fetch_from(client, Player(tag="#PLAYER", club=PlayerClub(tag="#CLUB", name="Club")))

    assert club.tag == "#CLUB"
    assert str(sent[0].url).endswith("/clubs/%23CLUB")


def test_club_from_a_clubless_player_fails_without_a_request(make_client, sent, no_network):
    client = make_client(no_network)

    with pytest.raises(FetchFromError):
        Club.fetch_from(client, Player(tag="#PLAYER"))
    assert sent == []


def test_unsupported_conversions_raise_fetch_from_error(make_client, no_network):
    client = make_client(no_network)
    with pytest.raises(FetchFromError):
        Player.fetch_from(client, Brawler(id=1))


def test_brawler_from_the_brawlers_enumeration(make_client, sent, json_handler):
    client = make_client(json_handler({"id": 16000000, "name": "SHELLY", "starPowers": [{"id": 23000076, "name": "Shell Shock"}]}))

    brawler = Brawler.fetch_from(client, Brawlers.SHELLY)

    assert brawler.name == "SHELLY"
    assert brawler.star_powers[0].name == "Shell Shock"
    assert str(sent[0].url).endswith("/brawlers/16000000")


def test_club_with_members_is_a_single_request(make_client, sent, json_handler):
    client = make_client(json_handler(CLUB_BODY))

    club = Club.fetch(client, "#CLUB")

    assert len(club.members.items) == 2
    assert club.members.tag == "#CLUB"
    assert len(sent) == 1


def test_members_fetched_from_a_club(make_client, sent, json_handler):
    client = make_client(json_handler({"items": CLUB_BODY["members"]}))

    members = ClubMembers.fetch_from(client, Club(tag="#CLUB"))

    assert members.tag == "#CLUB"
    assert [m.tag for m in members.items] == ["#A", "#B"]
    assert str(sent[0].url).endswith("/clubs/%23CLUB/members")


def test_leaderboards_take_region_and_limit(make_client, sent, json_handler):
    client = make_client(json_handler({"items": [{"tag": "#X", "rank": 1}]}))

    board = PlayerLeaderboard.fetch(client, "global", 5)
    clubs = ClubLeaderboard.fetch(client, ("fr", 3))
    brawler_board = BrawlerLeaderboard.fetch(client, "global", Brawlers.SHELLY, 10)

    assert (board.country_code, board.limit) == ("global", 5)
    assert board.items[0].tag == "#X"
    assert clubs.get_fetch_prop() == ("fr", 3)
    assert brawler_board.get_fetch_prop() == ("global", 16000000, 10)
    assert [str(r.url) for r in sent] == [
        "https://api.brawlstars.com/v1/rankings/global/players?limit=5",
        "https://api.brawlstars.com/v1/rankings/fr/clubs?limit=3",
        "https://api.brawlstars.com/v1/rankings/global/brawlers/16000000?limit=10",
    ]

    board.refetch(client)
    assert sent[3].url == sent[0].url


def test_brawler_list_needs_no_property(make_client, sent, json_handler):
    client = make_client(json_handler({"items": [{"id": 16000000, "name": "SHELLY"}]}))

    brawlers = BrawlerList.fetch(client)

    assert brawlers.items[0].id == 16000000
    assert str(sent[0].url) == "https://api.brawlstars.com/v1/brawlers/"


def test_single_property_models_reject_extra_arguments(make_client, no_network):
    client = make_client(no_network)
    with pytest.raises(TypeError):
        Player.fetch(client, "#A", 5)


def test_rate_limited_responses_raise_rate_limited_error(make_client, json_handler):
    client = make_client(
        json_handler({"reason": "tooManyRequests"}, status=429, headers={"x-ratelimit-reset": "1700000000", "x-ratelimit-limit": "30"})
    )

    with pytest.raises(RateLimitedError) as info:
        Player.fetch(client, "#PLAYER")

    assert info.value.limit == 30
    assert info.value.time_until_reset == "1700000000"


def test_failed_status_raises_status_error(make_client, json_handler):
    client = make_client(json_handler({"reason": "notFound"}, status=404))

    with pytest.raises(StatusError) as info:
        asyncio.run(Club.a_fetch(client, "#NOPE"))

    assert info.value.status == 404
    assert info.value.api_error.reason == "notFound"


def test_transport_failures_raise_request_error(make_client):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(refuse)

    with pytest.raises(RequestError) as info:
        Player.fetch(client, "#PLAYER")
    assert isinstance(info.value.original, httpx.ConnectError)

    with pytest.raises(RequestError):
        asyncio.run(Player.a_fetch(client, "#PLAYER"))


def test_invalid_json_raises_json_error(make_client):
    client = make_client(lambda request: httpx.Response(200, text="{not json"))
    with pytest.raises(JsonError):
        Player.fetch(client, "#PLAYER")


def test_wrongly_shaped_json_raises_json_error(make_client, json_handler):
    client = make_client(json_handler({"tag": "#PLAYER", "trophies": "lots"}))
    with pytest.raises(JsonError):
        Player.fetch(client, "#PLAYER")

    client = make_client(json_handler(["not", "an", "object"]))
    with pytest.raises(JsonError):
        BattleLog.fetch(client, "#PLAYER")


def test_async_fetch_needs_async_enabled(make_client, no_network):
    client = make_client(no_network, enable_async=False)
    with pytest.raises(RuntimeError):
        asyncio.run(Player.a_fetch(client, "#PLAYER"))
