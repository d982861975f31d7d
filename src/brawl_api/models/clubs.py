"""Models for the ``clubs/`` endpoint."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any, List, Optional

from ..fetch import PropFetchable
from ..http.routes import Route
from .common import DEFAULT_NAME_COLOR, as_object, opt_str, to_int, to_list, to_str


class ClubType(Enum):
    OPEN = "open"
    INVITE_ONLY = "inviteOnly"
    CLOSED = "closed"

    @classmethod
    def from_json(cls, value: Any) -> "ClubType":
        if value is None:
            return cls.OPEN
        try:
            return cls(to_str(value))
        except ValueError:
            return cls.OPEN


_ROLE_ORDER = ("member", "senior", "vicePresident", "president")


@total_ordering
class ClubMemberRole(Enum):
    """A member's role in a club.

    Roles compare by authority: member < senior < vice president < president.
    """

    MEMBER = "member"
    SENIOR = "senior"
    VICE_PRESIDENT = "vicePresident"
    PRESIDENT = "president"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ClubMemberRole):
            return NotImplemented
        return _ROLE_ORDER.index(self.value) < _ROLE_ORDER.index(other.value)

    def __str__(self) -> str:
        return {
            ClubMemberRole.MEMBER: "Member",
            ClubMemberRole.SENIOR: "Senior",
            ClubMemberRole.VICE_PRESIDENT: "Vice President",
            ClubMemberRole.PRESIDENT: "President",
        }[self]

    @classmethod
    def from_json(cls, value: Any) -> "ClubMemberRole":
        if value is None:
            return cls.MEMBER
        try:
            return cls(to_str(value))
        except ValueError:
            return cls.MEMBER


@dataclass(slots=True)
class ClubMember:
    tag: str = ""
    name: str = ""
    trophies: int = 0
    role: ClubMemberRole = ClubMemberRole.MEMBER
    name_color: int = DEFAULT_NAME_COLOR

    @classmethod
    def from_json(cls, data: Any) -> "ClubMember":
        data = as_object(data, "club member")
        return cls(
            tag=to_str(data.get("tag")),
            name=to_str(data.get("name")),
            trophies=to_int(data.get("trophies")),
            role=ClubMemberRole.from_json(data.get("role")),
            name_color=to_int(data.get("nameColor"), DEFAULT_NAME_COLOR),
        )


@dataclass(slots=True)
class ClubMembers(PropFetchable):
    """The member list of a club, fetched by the club's tag.

    ``tag`` is the club's tag; the API does not send it with the list.
    """

    tag: str = ""
    items: List[ClubMember] = field(default_factory=list)

    def get_fetch_prop(self) -> str:
        return self.tag

    @classmethod
    def get_route(cls, prop: str) -> Route:
        return Route.club_members(prop)

    def _with_prop(self, prop: str) -> "ClubMembers":
        self.tag = prop
        return self

    @classmethod
    def from_json(cls, data: Any) -> "ClubMembers":
        data = as_object(data, "club members")
        return cls(items=to_list(data.get("items"), ClubMember.from_json))


@dataclass(slots=True)
class Club(PropFetchable):
    tag: str = ""
    name: str = ""
    description: Optional[str] = None
    trophies: int = 0
    required_trophies: int = 0
    members: ClubMembers = field(default_factory=ClubMembers)
    club_type: ClubType = ClubType.OPEN

    def get_fetch_prop(self) -> str:
        return self.tag

    @classmethod
    def get_route(cls, prop: str) -> Route:
        return Route.club(prop)

    @classmethod
    def from_json(cls, data: Any) -> "Club":
        data = as_object(data, "club")
        tag = to_str(data.get("tag"))
        return cls(
            tag=tag,
            name=to_str(data.get("name")),
            description=opt_str(data.get("description")),
            trophies=to_int(data.get("trophies")),
            required_trophies=to_int(data.get("requiredTrophies")),
            members=ClubMembers(tag=tag, items=to_list(data.get("members"), ClubMember.from_json)),
            club_type=ClubType.from_json(data.get("type")),
        )


__all__ = ["Club", "ClubMember", "ClubMemberRole", "ClubMembers", "ClubType"]
