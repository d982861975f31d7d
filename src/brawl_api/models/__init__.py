"""Data models returned by the API."""
from . import conversions  # noqa: F401  registers fetch-from conversions
from .battlelog import (
    Battle,
    BattleBrawler,
    BattleEvent,
    BattleLog,
    BattleOutcome,
    BattlePlayer,
    BattleResultInfo,
)
from .brawlers import Brawler, BrawlerList
from .clubs import Club, ClubMember, ClubMemberRole, ClubMembers, ClubType
from .common import StarPower, TimeLike
from .players import Player, PlayerBrawlerStat, PlayerClub
from .rankings import (
    BrawlerLeaderboard,
    BrawlerRankingProperty,
    ClubLeaderboard,
    ClubRanking,
    PlayerLeaderboard,
    PlayerRanking,
    PlayerRankingClub,
    RankingProperty,
)

__all__ = [
    "Battle",
    "BattleBrawler",
    "BattleEvent",
    "BattleLog",
    "BattleOutcome",
    "BattlePlayer",
    "BattleResultInfo",
    "Brawler",
    "BrawlerLeaderboard",
    "BrawlerList",
    "BrawlerRankingProperty",
    "Club",
    "ClubLeaderboard",
    "ClubMember",
    "ClubMemberRole",
    "ClubMembers",
    "ClubRanking",
    "ClubType",
    "Player",
    "PlayerBrawlerStat",
    "PlayerClub",
    "PlayerLeaderboard",
    "PlayerRanking",
    "PlayerRankingClub",
    "RankingProperty",
    "StarPower",
    "TimeLike",
]
