"""Events that change hold durations and the planet radius."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ..tile import TileData
from .base import StaticEvent, _bool, _field, _float, _unsigned


@dataclass
class Hold(StaticEvent):
    """Turns a floor into a hold lasting ``duration`` beats."""

    EVENT_TYPE: ClassVar[str] = "Hold"

    duration: float
    distance_multiplier: float
    landing_animation: bool

    @classmethod
    def from_dict(cls, data: Any) -> Hold:
        return cls(
            floor=_field(data, "floor", _unsigned),
            duration=_field(data, "duration", _float),
            distance_multiplier=_field(data, "distanceMultiplier", _float),
            landing_animation=_field(data, "landingAnimation", _bool),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "duration": self.duration,
            "distanceMultiplier": self.distance_multiplier,
            "landingAnimation": self.landing_animation,
        }

    def apply(self, data: TileData) -> None:
        data.hold_duration = self.duration


@dataclass
class ScaleRadius(StaticEvent):
    """Sets the distance between the planets, in percent."""

    EVENT_TYPE: ClassVar[str] = "ScaleRadius"

    scale: float

    @classmethod
    def from_dict(cls, data: Any) -> ScaleRadius:
        return cls(
            floor=_field(data, "floor", _unsigned),
            scale=_field(data, "scale", _float),
        )

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "scale": self.scale}

    def apply(self, data: TileData) -> None:
        data.radius_scale = self.scale