"""Endpoint descriptions and their rendering to absolute URLs."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..constants import API_URI


def auto_hashtag(tag: str, insert: bool = True) -> str:
    """Prepare a tag for use as a URL path segment.

    A leading ``#`` is percent-encoded as ``%23``. When the tag has no leading
    ``#`` one is inserted (already encoded) if ``insert`` is true, otherwise the
    tag is used as given.
    """

    if tag.startswith("#"):
        return tag.replace("#", "%23", 1)
    if insert:
        return f"%23{tag}"
    return tag


class RouteKind(Enum):
    PLAYER = "player"
    PLAYER_BATTLELOGS = "player_battlelogs"
    CLUB = "club"
    CLUB_MEMBERS = "club_members"
    PLAYER_RANKINGS = "player_rankings"
    CLUB_RANKINGS = "club_rankings"
    BRAWLER_RANKINGS = "brawler_rankings"
    BRAWLERS = "brawlers"
    BRAWLER = "brawler"


@dataclass(slots=True, frozen=True)
class Route:
    """A single API endpoint along with the parameters it needs.

    Build instances through the named constructors (``Route.player(tag)``,
    ``Route.player_rankings(country_code, limit)``...). Tags are stored as given
    and only encoded when rendered.
    """

    kind: RouteKind
    tag: Optional[str] = None
    country_code: Optional[str] = None
    brawler_id: Optional[int] = None
    limit: Optional[int] = None

    @classmethod
    def player(cls, tag: str) -> "Route":
        return cls(RouteKind.PLAYER, tag=tag)

    @classmethod
    def player_battlelogs(cls, tag: str) -> "Route":
        return cls(RouteKind.PLAYER_BATTLELOGS, tag=tag)

    @classmethod
    def club(cls, tag: str) -> "Route":
        return cls(RouteKind.CLUB, tag=tag)

    @classmethod
    def club_members(cls, tag: str) -> "Route":
        return cls(RouteKind.CLUB_MEMBERS, tag=tag)

    @classmethod
    def player_rankings(cls, country_code: str, limit: int) -> "Route":
        return cls(RouteKind.PLAYER_RANKINGS, country_code=country_code, limit=limit)

    @classmethod
    def club_rankings(cls, country_code: str, limit: int) -> "Route":
        return cls(RouteKind.CLUB_RANKINGS, country_code=country_code, limit=limit)

    @classmethod
    def brawler_rankings(cls, country_code: str, brawler_id: int, limit: int) -> "Route":
        return cls(
            RouteKind.BRAWLER_RANKINGS,
            country_code=country_code,
            brawler_id=brawler_id,
            limit=limit,
        )

    @classmethod
    def brawlers(cls) -> "Route":
        return cls(RouteKind.BRAWLERS)

    @classmethod
    def brawler(cls, brawler_id: int) -> "Route":
        return cls(RouteKind.BRAWLER, brawler_id=brawler_id)

    def to_url_str(self, *, auto_hashtag: bool = True) -> str:
        """Render the absolute URL this route points to.

        Limits are passed through untouched; the API itself rejects values
        outside of ``0..=200``.
        """

        kind = self.kind
        if kind is RouteKind.PLAYER:
            return f"{API_URI}players/{self._tag(auto_hashtag)}"
        if kind is RouteKind.PLAYER_BATTLELOGS:
            return f"{API_URI}players/{self._tag(auto_hashtag)}/battlelog"
        if kind is RouteKind.CLUB:
            return f"{API_URI}clubs/{self._tag(auto_hashtag)}"
        if kind is RouteKind.CLUB_MEMBERS:
            return f"{API_URI}clubs/{self._tag(auto_hashtag)}/members"
        if kind is RouteKind.PLAYER_RANKINGS:
            return f"{API_URI}rankings/{self.country_code}/players?limit={int(self.limit)}"
        if kind is RouteKind.CLUB_RANKINGS:
            return f"{API_URI}rankings/{self.country_code}/clubs?limit={int(self.limit)}"
        if kind is RouteKind.BRAWLER_RANKINGS:
            return (
                f"{API_URI}rankings/{self.country_code}/brawlers/{int(self.brawler_id)}"
                f"?limit={int(self.limit)}"
            )
        if kind is RouteKind.BRAWLERS:
            return f"{API_URI}brawlers/"
        if kind is RouteKind.BRAWLER:
            return f"{API_URI}brawlers/{int(self.brawler_id)}"
        raise ValueError(f"Unknown route kind: {kind!r}")

    def _tag(self, insert: bool) -> str:
        return auto_hashtag(self.tag or "", insert)


def render(route: Route, *, auto_hashtag: bool = True) -> str:
    return route.to_url_str(auto_hashtag=auto_hashtag)


__all__ = ["Route", "RouteKind", "auto_hashtag", "render"]
