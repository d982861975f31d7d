"""Models for the ``rankings/`` endpoint.

Leaderboards are identified by a region (a two-letter country code or
``"global"``) and a limit, plus a brawler id for brawler leaderboards. The
API caps limits at 200; nothing here checks that, an out-of-range limit is
rejected by the API with a :class:`~brawl_api.errors.StatusError`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, NamedTuple

from ..fetch import PropFetchable
from ..http.routes import Route
from .common import DEFAULT_NAME_COLOR, as_object, to_int, to_list, to_str


class RankingProperty(NamedTuple):
    country_code: str
    limit: int


class BrawlerRankingProperty(NamedTuple):
    country_code: str
    brawler_id: int
    limit: int


@dataclass(slots=True)
class PlayerRankingClub:
    name: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "PlayerRankingClub":
        data = as_object(data, "player ranking club")
        return cls(name=to_str(data.get("name")))


@dataclass(slots=True)
class PlayerRanking:
    """A player's position on a leaderboard.

    Rankings are ordered by ``rank`` alone, and rank 1 is *greater* than
    rank 5. Two entries sharing a rank are neither greater nor smaller than
    each other, while ``==`` still compares every field.
    """

    club: PlayerRankingClub = field(default_factory=PlayerRankingClub)
    tag: str = ""
    name: str = ""
    trophies: int = 0
    rank: int = 1
    name_color: int = DEFAULT_NAME_COLOR

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PlayerRanking):
            return NotImplemented
        return self.rank > other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PlayerRanking):
            return NotImplemented
        return self.rank >= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PlayerRanking):
            return NotImplemented
        return self.rank < other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PlayerRanking):
            return NotImplemented
        return self.rank <= other.rank

    @classmethod
    def from_json(cls, data: Any) -> "PlayerRanking":
        data = as_object(data, "player ranking")
        club = data.get("club")
        return cls(
            club=PlayerRankingClub.from_json(club) if club is not None else PlayerRankingClub(),
            tag=to_str(data.get("tag")),
            name=to_str(data.get("name")),
            trophies=to_int(data.get("trophies")),
            rank=to_int(data.get("rank"), 1),
            name_color=to_int(data.get("nameColor"), DEFAULT_NAME_COLOR),
        )


@dataclass(slots=True)
class ClubRanking:
    """A club's position on a leaderboard; compares like :class:`PlayerRanking`."""

    tag: str = ""
    name: str = ""
    trophies: int = 0
    rank: int = 1
    member_count: int = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ClubRanking):
            return NotImplemented
        return self.rank > other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ClubRanking):
            return NotImplemented
        return self.rank >= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ClubRanking):
            return NotImplemented
        return self.rank < other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ClubRanking):
            return NotImplemented
        return self.rank <= other.rank

    @classmethod
    def from_json(cls, data: Any) -> "ClubRanking":
        data = as_object(data, "club ranking")
        return cls(
            tag=to_str(data.get("tag")),
            name=to_str(data.get("name")),
            trophies=to_int(data.get("trophies")),
            rank=to_int(data.get("rank"), 1),
            member_count=to_int(data.get("memberCount")),
        )


def _ranking_prop(prop: Any, args: tuple) -> RankingProperty:
    if isinstance(prop, tuple) and not args:
        return RankingProperty(*prop)
    return RankingProperty(prop, *args)


@dataclass(slots=True)
class PlayerLeaderboard(PropFetchable):
    """Top players of a region: ``PlayerLeaderboard.fetch(client, "global", 200)``."""

    country_code: str = ""
    limit: int = 0
    items: List[PlayerRanking] = field(default_factory=list)

    def get_fetch_prop(self) -> RankingProperty:
        return RankingProperty(self.country_code, self.limit)

    @classmethod
    def make_prop(cls, prop: Any, *args: Any) -> RankingProperty:
        return _ranking_prop(prop, args)

    @classmethod
    def get_route(cls, prop: RankingProperty) -> Route:
        return Route.player_rankings(prop.country_code, prop.limit)

    def _with_prop(self, prop: RankingProperty) -> "PlayerLeaderboard":
        self.country_code, self.limit = prop
        return self

    @classmethod
    def from_json(cls, data: Any) -> "PlayerLeaderboard":
        data = as_object(data, "player leaderboard")
        return cls(items=to_list(data.get("items"), PlayerRanking.from_json))


@dataclass(slots=True)
class ClubLeaderboard(PropFetchable):
    """Top clubs of a region: ``ClubLeaderboard.fetch(client, "global", 200)``."""

    country_code: str = ""
    limit: int = 0
    items: List[ClubRanking] = field(default_factory=list)

    def get_fetch_prop(self) -> RankingProperty:
        return RankingProperty(self.country_code, self.limit)

    @classmethod
    def make_prop(cls, prop: Any, *args: Any) -> RankingProperty:
        return _ranking_prop(prop, args)

    @classmethod
    def get_route(cls, prop: RankingProperty) -> Route:
        return Route.club_rankings(prop.country_code, prop.limit)

    def _with_prop(self, prop: RankingProperty) -> "ClubLeaderboard":
        self.country_code, self.limit = prop
        return self

    @classmethod
    def from_json(cls, data: Any) -> "ClubLeaderboard":
        data = as_object(data, "club leaderboard")
        return cls(items=to_list(data.get("items"), ClubRanking.from_json))


@dataclass(slots=True)
class BrawlerLeaderboard(PropFetchable):
    """Top players of a region with one brawler.

    ``BrawlerLeaderboard.fetch(client, "global", Brawlers.SHELLY, 200)``
    """

    country_code: str = ""
    brawler_id: int = 0
    limit: int = 0
    items: List[PlayerRanking] = field(default_factory=list)

    def get_fetch_prop(self) -> BrawlerRankingProperty:
        return BrawlerRankingProperty(self.country_code, self.brawler_id, self.limit)

    @classmethod
    def make_prop(cls, prop: Any, *args: Any) -> BrawlerRankingProperty:
        if isinstance(prop, tuple) and not args:
            country_code, brawler_id, limit = prop
        else:
            country_code, brawler_id, limit = (prop, *args)
        return BrawlerRankingProperty(country_code, int(brawler_id), limit)

    @classmethod
    def get_route(cls, prop: BrawlerRankingProperty) -> Route:
        return Route.brawler_rankings(prop.country_code, prop.brawler_id, prop.limit)

    def _with_prop(self, prop: BrawlerRankingProperty) -> "BrawlerLeaderboard":
        self.country_code, self.brawler_id, self.limit = prop
        return self

    @classmethod
    def from_json(cls, data: Any) -> "BrawlerLeaderboard":
        data = as_object(data, "brawler leaderboard")
        return cls(items=to_list(data.get("items"), PlayerRanking.from_json))


__all__ = [
    "BrawlerLeaderboard",
    "BrawlerRankingProperty",
    "ClubLeaderboard",
    "ClubRanking",
    "PlayerLeaderboard",
    "PlayerRanking",
    "PlayerRankingClub",
    "RankingProperty",
]
