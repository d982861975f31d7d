"""Models for the ``brawlers/`` endpoint."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..fetch import PropFetchable
from ..http.routes import Route
from .common import StarPower, as_object, to_int, to_list, to_str


@dataclass(slots=True)
class Brawler(PropFetchable):
    """A brawler's static data, fetched by id (see :class:`~brawl_api.constants.Brawlers`)."""

    name: str = ""
    id: int = 0
    star_powers: List[StarPower] = field(default_factory=list)

    def get_fetch_prop(self) -> int:
        return self.id

    @classmethod
    def get_route(cls, prop: int) -> Route:
        return Route.brawler(int(prop))

    @classmethod
    def from_json(cls, data: Any) -> "Brawler":
        data = as_object(data, "brawler")
        return cls(
            name=to_str(data.get("name")),
            id=to_int(data.get("id")),
            star_powers=to_list(data.get("starPowers"), StarPower.from_json),
        )


@dataclass(slots=True)
class BrawlerList(PropFetchable):
    """Every brawler in the game. Takes no fetch property."""

    items: List[Brawler] = field(default_factory=list)

    def get_fetch_prop(self) -> None:
        return None

    @classmethod
    def get_route(cls, prop: Optional[Any] = None) -> Route:
        return Route.brawlers()

    @classmethod
    def from_json(cls, data: Any) -> "BrawlerList":
        data = as_object(data, "brawler list")
        return cls(items=to_list(data.get("items"), Brawler.from_json))


__all__ = ["Brawler", "BrawlerList"]
