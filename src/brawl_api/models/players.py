"""Models for the ``players/`` endpoint."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..fetch import PropFetchable
from ..http.routes import Route
from .common import (
    DEFAULT_NAME_COLOR,
    StarPower,
    as_object,
    to_bool,
    to_int,
    to_list,
    to_str,
)


@dataclass(slots=True)
class PlayerClub:
    """The club a player belongs to, as shown on the player's profile."""

    tag: str = ""
    name: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "PlayerClub":
        data = as_object(data, "player club")
        return cls(tag=to_str(data.get("tag")), name=to_str(data.get("name")))


@dataclass(slots=True)
class PlayerBrawlerStat:
    """A brawler as owned by a player, with the player's progress on it."""

    star_powers: List[StarPower] = field(default_factory=list)
    id: int = 0
    rank: int = 1
    trophies: int = 0
    highest_trophies: int = 0
    power: int = 1
    name: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "PlayerBrawlerStat":
        data = as_object(data, "player brawler")
        return cls(
            star_powers=to_list(data.get("starPowers"), StarPower.from_json),
            id=to_int(data.get("id")),
            rank=to_int(data.get("rank"), 1),
            trophies=to_int(data.get("trophies")),
            highest_trophies=to_int(data.get("highestTrophies")),
            power=to_int(data.get("power"), 1),
            name=to_str(data.get("name")),
        )


@dataclass(slots=True)
class Player(PropFetchable):
    """A player profile, fetched by tag.

    ``name_color`` is the integer value of the ``0xAARRGGBB`` string the API
    sends; ``exp_level`` defaults to 1 since no player is level 0.
    """

    club: Optional[PlayerClub] = None
    is_qualified_from_championship_challenge: bool = False
    tvt_victories: int = 0
    tag: str = ""
    name: str = ""
    trophies: int = 0
    highest_trophies: int = 0
    exp_level: int = 1
    exp_points: int = 0
    power_play_points: int = 0
    highest_power_play_points: int = 0
    solo_victories: int = 0
    duo_victories: int = 0
    best_robo_rumble_time: int = 0
    best_time_as_big_brawler: int = 0
    brawlers: List[PlayerBrawlerStat] = field(default_factory=list)
    name_color: int = DEFAULT_NAME_COLOR

    def get_fetch_prop(self) -> str:
        return self.tag

    @classmethod
    def get_route(cls, prop: str) -> Route:
        return Route.player(prop)

    @classmethod
    def from_json(cls, data: Any) -> "Player":
        data = as_object(data, "player")
        club = data.get("club")
        return cls(
            # clubless players get an empty object rather than no key
            club=PlayerClub.from_json(club) if club else None,
            is_qualified_from_championship_challenge=to_bool(
                data.get("isQualifiedFromChampionshipChallenge")
            ),
            tvt_victories=to_int(data.get("3vs3Victories")),
            tag=to_str(data.get("tag")),
            name=to_str(data.get("name")),
            trophies=to_int(data.get("trophies")),
            highest_trophies=to_int(data.get("highestTrophies")),
            exp_level=to_int(data.get("expLevel"), 1),
            exp_points=to_int(data.get("expPoints")),
            power_play_points=to_int(data.get("powerPlayPoints")),
            highest_power_play_points=to_int(data.get("highestPowerPlayPoints")),
            solo_victories=to_int(data.get("soloVictories")),
            duo_victories=to_int(data.get("duoVictories")),
            best_robo_rumble_time=to_int(data.get("bestRoboRumbleTime")),
            best_time_as_big_brawler=to_int(data.get("bestTimeAsBigBrawler")),
            brawlers=to_list(data.get("brawlers"), PlayerBrawlerStat.from_json),
            name_color=to_int(data.get("nameColor"), DEFAULT_NAME_COLOR),
        )


__all__ = ["Player", "PlayerBrawlerStat", "PlayerClub"]
