"""Event base classes, tile references and parsed event records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Optional, TypeVar

from ..tile import TileData

E = TypeVar("E", bound=Enum)
R = TypeVar("R")

_MISSING: Any = object()
_U32_LIMIT = 1 << 32


def _float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {value!r}")
    return float(value)


def _int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def _unsigned(value: Any) -> int:
    value = _int(value)
    if value < 0:
        raise ValueError(f"expected a non-negative integer, got {value!r}")
    return value


def _u32(value: Any) -> int:
    value = _unsigned(value)
    if value >= _U32_LIMIT:
        raise ValueError(f"integer out of range: {value!r}")
    return value


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {value!r}")
    return value


def _enum(cls: type[E]) -> Callable[[Any], E]:
    def convert(value: Any) -> E:
        if not isinstance(value, str):
            raise ValueError(f"expected a {cls.__name__} name, got {value!r}")
        return cls(value)

    return convert


def _optional(convert: Callable[[Any], R]) -> Callable[[Any], Optional[R]]:
    return lambda value: None if value is None else convert(value)


def _field(data: Any, key: str, convert: Callable[[Any], R], default: Any = _MISSING) -> R:
    """Read and convert ``data[key]``; a missing key takes ``default`` or is an error."""
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {data!r}")
    if key not in data:
        if default is _MISSING:
            raise ValueError(f"missing field {key!r}")
        return default
    try:
        return convert(data[key])
    except ValueError as exc:
        raise ValueError(f"invalid field {key!r}: {exc}") from exc


@dataclass
class Event:
    """Something placed on a floor of a level."""

    EVENT_TYPE: ClassVar[str] = ""

    floor: int

    def to_dict(self) -> dict[str, Any]:
        """The event as a level-file action object."""
        return {"eventType": self.EVENT_TYPE, "floor": self.floor}


class StaticEvent(Event, ABC):
    """An event that changes tile data once, while the level is parsed."""

    @abstractmethod
    def apply(self, data: TileData) -> None:
        """Change the data of the tile the event sits on."""


class DynamicEvent(Event, ABC):
    """An event that acts at a moment of play.

    Subclasses carry an ``angle_offset``; those with ``HAS_EVENT_TAG`` set
    also carry an ``event_tag`` list.
    """

    HAS_EVENT_TAG: ClassVar[bool] = False

    @abstractmethod
    def apply(self, timing: tuple[float, float], level: Any, seconds: float) -> None:
        """Bring ``level`` to its state at ``seconds``; ``timing`` is the event's (beats, seconds)."""


class RelativeToTile(Enum):
    Start = "Start"
    ThisTile = "ThisTile"
    End = "End"


@dataclass(frozen=True)
class RelativeIndex:
    """A floor given relative to the start, the current floor or the end."""

    index: int
    relative_to: RelativeToTile

    @classmethod
    def from_json(cls, value: Any) -> RelativeIndex:
        """Read a ``[index, "ThisTile"]`` pair."""
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise ValueError(f"expected an [index, reference] pair, got {value!r}")
        index, relative_to = value
        return cls(_int(index), _enum(RelativeToTile)(relative_to))

    def to_json(self) -> list[Any]:
        """Write the pair back as a list."""
        return [self.index, self.relative_to.value]

    def calc(self, this_floor: int, last_floor: int) -> int:
        """The absolute floor, never below zero."""
        if self.relative_to is RelativeToTile.Start:
            return max(self.index, 0)
        if self.relative_to is RelativeToTile.ThisTile:
            return max(this_floor + self.index, 0)
        # Any negative index counted from the end resolves to the first floor.
        return last_floor if self.index >= 0 else 0


@dataclass
class EventData:
    """An event with the timing computed for it when the level is parsed."""

    event: Event
    beats: Optional[float] = None
    seconds: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """The wrapped event as a level-file action object."""
        return self.event.to_dict()