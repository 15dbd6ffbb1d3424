"""Events that repeat other events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional

from ..codec import format_tag, parse_tag
from .base import DynamicEvent, _bool, _enum, _field, _float, _optional, _u32, _unsigned


class RepeatType(Enum):
    Beat = "Beat"
    Floor = "Floor"


@dataclass
class RepeatEvents(DynamicEvent):
    """Repeats the tagged events of its floor, by beats or by floors."""

    EVENT_TYPE: ClassVar[str] = "RepeatEvents"

    repetitions: int
    interval: float
    execute_on_current_floor: bool
    tag: list[str] = field(default_factory=list)
    floor_count: Optional[int] = None
    angle_offset: float = 0.0
    repeat_type: RepeatType = RepeatType.Beat

    @classmethod
    def from_dict(cls, data: Any) -> RepeatEvents:
        return cls(
            floor=_field(data, "floor", _unsigned),
            repetitions=_field(data, "repetitions", _u32),
            interval=_field(data, "interval", _float),
            execute_on_current_floor=_field(data, "executeOnCurrentFloor", _bool),
            tag=_field(data, "tag", parse_tag),
            floor_count=_field(data, "floorCount", _optional(_u32), None),
            angle_offset=_field(data, "angleOffset", _float, 0.0),
            repeat_type=_field(data, "repeatType", _enum(RepeatType), RepeatType.Beat),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "angleOffset": self.angle_offset,
            "repeatType": self.repeat_type.value,
            "repetitions": self.repetitions,
            "floorCount": self.floor_count,
            "interval": self.interval,
            "executeOnCurrentFloor": self.execute_on_current_floor,
            "tag": format_tag(self.tag),
        }

    def apply(self, timing: tuple[float, float], level: Any, seconds: float) -> None:
        """Repetitions are expanded when the level is parsed; nothing happens at play time."""