"""Camera events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional

from ..codec import format_optional_vector, format_tag, parse_optional_vector, parse_tag
from ..easing import Easing
from .base import DynamicEvent, _enum, _field, _float, _optional, _unsigned


class RelativeToCamera(Enum):
    Tile = "Tile"
    Player = "Player"
    Global = "Global"
    LastPosition = "LastPosition"


@dataclass
class MoveCamera(DynamicEvent):
    """Moves, rotates or zooms the camera over ``duration`` beats."""

    EVENT_TYPE: ClassVar[str] = "MoveCamera"
    HAS_EVENT_TAG: ClassVar[bool] = True

    event_tag: list[str]
    duration: float
    angle_offset: float
    ease: Easing
    relative_to: Optional[RelativeToCamera] = None
    position: tuple[Optional[float], Optional[float]] = (None, None)
    rotation: Optional[float] = None
    zoom: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Any) -> MoveCamera:
        return cls(
            floor=_field(data, "floor", _unsigned),
            event_tag=_field(data, "eventTag", parse_tag),
            duration=_field(data, "duration", _float),
            angle_offset=_field(data, "angleOffset", _float),
            ease=_field(data, "ease", _enum(Easing)),
            relative_to=_field(data, "relativeTo", _optional(_enum(RelativeToCamera)), None),
            position=_field(data, "position", parse_optional_vector, (None, None)),
            rotation=_field(data, "rotation", _optional(_float), None),
            zoom=_field(data, "zoom", _optional(_float), None),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "eventTag": format_tag(self.event_tag),
            "duration": self.duration,
            "relativeTo": None if self.relative_to is None else self.relative_to.value,
            "position": format_optional_vector(self.position),
            "rotation": self.rotation,
            "zoom": self.zoom,
            "angleOffset": self.angle_offset,
            "ease": self.ease.value,
        }

    def apply(self, timing: tuple[float, float], level: Any, seconds: float) -> None:
        """The camera is computed by the level as a whole; nothing is changed per event."""