"""Decoding helpers and small types shared by the models.

The API omits fields freely and adds new ones over time, so every model is
decoded leniently: unknown keys are ignored and missing (or ``null``) keys
fall back to a documented default. A value of the wrong type is still an
error, surfaced by the fetch helpers as :class:`~brawl_api.errors.JsonError`.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional, TypeVar

from ..constants import TIMELIKE_FORMAT
from ..errors import ParseTimeLikeError


T = TypeVar("T")

DEFAULT_NAME_COLOR = 0xFFFFFF


def as_object(data: Any, what: str = "object") -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object for {what}, got {type(data).__name__}")
    return data


def to_int(value: Any, default: int = 0) -> int:
    """Read an integer which the API may also send as a (possibly hex) string."""

    if value is None:
        return default
    if isinstance(value, bool):
        raise TypeError("expected an integer, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if text[:2].lower() == "0x":
            return int(text, 16)
        return int(text)
    raise TypeError(f"expected an integer, got {type(value).__name__}")


def opt_int(value: Any) -> Optional[int]:
    return None if value is None else to_int(value)


def to_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def opt_str(value: Any) -> Optional[str]:
    return None if value is None else to_str(value)


def to_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {type(value).__name__}")
    return value


def to_list(value: Any, item: Callable[[Any], T]) -> List[T]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"expected a JSON array, got {type(value).__name__}")
    return [item(entry) for entry in value]


def opt_list(value: Any, item: Callable[[Any], T]) -> Optional[List[T]]:
    return None if value is None else to_list(value, item)


class TimeLike(str):
    """A timestamp exactly as the API sent it, e.g. ``20200131T003432.000Z``."""

    __slots__ = ()

    def parse(self) -> datetime:
        """Parse the timestamp into an aware UTC :class:`~datetime.datetime`.

        Raises
        ------
        ParseTimeLikeError
            If the string does not follow the API's timestamp format.
        """

        try:
            parsed = datetime.strptime(str(self), TIMELIKE_FORMAT)
        except ValueError as exc:
            raise ParseTimeLikeError(str(exc), offender=str(self)) from exc
        return parsed.replace(tzinfo=timezone.utc)


@dataclass(slots=True)
class StarPower:
    name: str = ""
    id: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "StarPower":
        data = as_object(data, "star power")
        return cls(name=to_str(data.get("name")), id=to_int(data.get("id")))


__all__ = [
    "DEFAULT_NAME_COLOR",
    "StarPower",
    "TimeLike",
    "as_object",
    "opt_int",
    "opt_list",
    "opt_str",
    "to_bool",
    "to_int",
    "to_list",
    "to_str",
]
