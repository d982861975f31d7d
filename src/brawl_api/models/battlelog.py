"""Models for the ``players/{tag}/battlelog`` endpoint."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from ..fetch import PropFetchable
from ..http.routes import Route
from .common import TimeLike, as_object, opt_int, opt_list, opt_str, to_int, to_list, to_str


class BattleOutcome(Enum):
    VICTORY = "victory"
    DEFEAT = "defeat"
    DRAW = "draw"

    def __str__(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_json(cls, value: Any) -> Optional["BattleOutcome"]:
        # unknown outcomes are treated like a missing one
        try:
            return cls(to_str(value))
        except ValueError:
            return None


@dataclass(slots=True)
class BattleBrawler:
    id: int = 0
    name: str = ""
    power: int = 1
    trophies: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "BattleBrawler":
        data = as_object(data, "battle brawler")
        return cls(
            id=to_int(data.get("id")),
            name=to_str(data.get("name")),
            power=to_int(data.get("power"), 1),
            trophies=to_int(data.get("trophies")),
        )


@dataclass(slots=True)
class BattlePlayer:
    """A participant of a battle."""

    tag: str = ""
    name: str = ""
    brawler: BattleBrawler = field(default_factory=BattleBrawler)

    @classmethod
    def from_json(cls, data: Any) -> "BattlePlayer":
        data = as_object(data, "battle player")
        brawler = data.get("brawler")
        return cls(
            tag=to_str(data.get("tag")),
            name=to_str(data.get("name")),
            brawler=BattleBrawler.from_json(brawler) if brawler is not None else BattleBrawler(),
        )


@dataclass(slots=True)
class BattleEvent:
    id: int = 0
    mode: str = ""
    map: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "BattleEvent":
        data = as_object(data, "battle event")
        return cls(
            id=to_int(data.get("id")),
            mode=to_str(data.get("mode")),
            map=to_str(data.get("map")),
        )


@dataclass(slots=True)
class BattleResultInfo:
    """How a battle went.

    Team modes fill ``teams``, showdown modes fill ``players`` and ``rank``;
    ``result`` is only present for modes with a win/loss outcome.
    """

    mode: str = ""
    battle_type: Optional[str] = None
    duration: int = 0
    trophy_change: int = 0
    rank: Optional[int] = None
    result: Optional[BattleOutcome] = None
    star_player: Optional[BattlePlayer] = None
    teams: Optional[List[List[BattlePlayer]]] = None
    players: Optional[List[BattlePlayer]] = None

    @classmethod
    def from_json(cls, data: Any) -> "BattleResultInfo":
        data = as_object(data, "battle result")
        star_player = data.get("starPlayer")
        result = data.get("result")
        return cls(
            mode=to_str(data.get("mode")),
            battle_type=opt_str(data.get("type")),
            duration=to_int(data.get("duration")),
            trophy_change=to_int(data.get("trophyChange")),
            rank=opt_int(data.get("rank")),
            result=BattleOutcome.from_json(result) if result is not None else None,
            star_player=BattlePlayer.from_json(star_player) if star_player is not None else None,
            teams=opt_list(data.get("teams"), lambda team: to_list(team, BattlePlayer.from_json)),
            players=opt_list(data.get("players"), BattlePlayer.from_json),
        )


@dataclass(slots=True)
class Battle:
    battle_time: TimeLike = field(default_factory=TimeLike)
    event: BattleEvent = field(default_factory=BattleEvent)
    result: BattleResultInfo = field(default_factory=BattleResultInfo)

    @classmethod
    def from_json(cls, data: Any) -> "Battle":
        data = as_object(data, "battle")
        event = data.get("event")
        result = data.get("battle")
        return cls(
            battle_time=TimeLike(to_str(data.get("battleTime"))),
            event=BattleEvent.from_json(event) if event is not None else BattleEvent(),
            result=BattleResultInfo.from_json(result) if result is not None else BattleResultInfo(),
        )


@dataclass(slots=True)
class BattleLog(PropFetchable):
    """A player's most recent battles, newest first.

    ``tag`` is not part of the API response; it is set to the tag the log
    was fetched with.
    """

    tag: str = ""
    items: List[Battle] = field(default_factory=list)

    def get_fetch_prop(self) -> str:
        return self.tag

    @classmethod
    def get_route(cls, prop: str) -> Route:
        return Route.player_battlelogs(prop)

    def _with_prop(self, prop: str) -> "BattleLog":
        self.tag = prop
        return self

    @classmethod
    def from_json(cls, data: Any) -> "BattleLog":
        data = as_object(data, "battle log")
        return cls(items=to_list(data.get("items"), Battle.from_json))


__all__ = [
    "Battle",
    "BattleBrawler",
    "BattleEvent",
    "BattleLog",
    "BattleOutcome",
    "BattlePlayer",
    "BattleResultInfo",
]
