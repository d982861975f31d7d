"""Which models can be fetched from which others.

Each entry maps a source value to the fetch property of the target model;
see :func:`brawl_api.fetch.fetch_from`.
"""
from __future__ import annotations

from ..constants import Brawlers
from ..errors import FetchFromError
from ..fetch import register_conversion
from .battlelog import BattleBrawler, BattleLog, BattlePlayer
from .brawlers import Brawler
from .clubs import Club, ClubMember, ClubMembers
from .players import Player, PlayerBrawlerStat, PlayerClub
from .rankings import ClubRanking, PlayerRanking


def _player_club_tag(player: Player) -> str:
    if player.club is None or not player.club.tag:
        raise FetchFromError(f"Player {player.tag or '<no tag>'} is not in a club.")
    return player.club.tag


register_conversion(Player, ClubMember, lambda member: member.tag)
register_conversion(Player, BattlePlayer, lambda b_player: b_player.tag)
register_conversion(Player, PlayerRanking, lambda ranking: ranking.tag)

register_conversion(BattleLog, Player, lambda player: player.tag)

register_conversion(Club, PlayerClub, lambda p_club: p_club.tag)
register_conversion(Club, ClubRanking, lambda ranking: ranking.tag)
register_conversion(Club, Player, _player_club_tag)

register_conversion(ClubMembers, Club, lambda club: club.tag)

register_conversion(Brawler, PlayerBrawlerStat, lambda stat: stat.id)
register_conversion(Brawler, BattleBrawler, lambda b_brawler: b_brawler.id)
register_conversion(Brawler, Brawlers, int)
