"""Tiles of a level and the per-tile state computed when parsing."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from .codec import Rgba
from .units import Vector2

T = TypeVar("T")


class TrackStyle(Enum):
    Standard = "Standard"
    Neon = "Neon"
    NeonLight = "NeonLight"
    Basic = "Basic"
    Minimal = "Minimal"
    Gems = "Gems"


class Orbit(Enum):
    """Direction in which the planets rotate."""

    Clockwise = "Clockwise"
    Anticlockwise = "Anticlockwise"

    def opposite(self) -> Orbit:
        """The other direction."""
        return Orbit.Anticlockwise if self is Orbit.Clockwise else Orbit.Clockwise


class TrackColorType(Enum):
    Single = "Single"
    Stripes = "Stripes"
    Glow = "Glow"
    Blink = "Blink"
    Switch = "Switch"
    Rainbow = "Rainbow"
    Volume = "Volume"


class TrackColorPulse(Enum):
    Backward = "Backward"
    None_ = "None"
    Forward = "Forward"


class TrackAnimation(Enum):
    None_ = "None"
    Fade = "Fade"
    Scatter = "Scatter"
    ScatterFar = "Scatter_Far"
    Assemble = "Assemble"
    Extend = "Extend"
    GrowSpin = "Grow_Spin"


class TrackDisappearAnimation(Enum):
    None_ = "None"
    Fade = "Fade"
    Retract = "Retract"
    Scatter = "Scatter"
    ScatterFar = "Scatter_Far"
    ShrinkSpin = "Shrink_Spin"


class Hitsound(Enum):
    None_ = "None"
    Kick = "Kick"
    Sizzle = "Sizzle"
    Shaker = "Shaker"
    FireTile = "FireTile"
    Hat = "Hat"
    VehiclePositive = "VehiclePositive"
    VehicleNegative = "VehicleNegative"
    Squareshot = "Squareshot"
    PowerDown = "PowerDown"
    ReverbClap = "ReverbClap"
    ReverbClack = "ReverbClack"
    Hammer = "Hammer"
    SnareAcoustic2 = "SnareAcoustic2"
    SnareHouse = "SnareHouse"
    Sidestick = "Sidestick"
    HatHouse = "HatHouse"
    ShakerLoud = "ShakerLoud"
    Chuck = "Chuck"


class DynamicValueEmptyError(Exception):
    """A tile value needed for a computation has not been set."""

    def __init__(self, message: str = "DynamicValue is empty") -> None:
        super().__init__(message)


@dataclass
class DynamicValue(Generic[T]):
    """A value with its parsed original and its current animated state."""

    orig: Optional[T] = None
    now: Optional[T] = None

    def reset(self) -> None:
        """Set the current value back to the original."""
        self.now = self.orig


_DYNAMIC_FIELDS = (
    "position",
    "scale",
    "rotation",
    "opacity",
    "color_type",
    "color",
    "secondary_color",
    "color_anim_duration",
    "color_pulse",
    "pulse_length",
    "style",
)


@dataclass
class TileData:
    """State of one tile as computed by parsing and updating a level."""

    orbit: Optional[Orbit] = None
    beats: Optional[float] = None
    seconds: Optional[float] = None
    stick_to_floors: Optional[bool] = None
    editor_position: Optional[Vector2] = None
    radius_scale: Optional[float] = None
    pause_duration: Optional[float] = None
    hitsound: Optional[Hitsound] = None
    hitsound_volume: Optional[float] = None
    midspin_hitsound: Optional[Hitsound] = None
    midspin_hitsound_volume: Optional[float] = None
    hold_duration: Optional[float] = None

    position: DynamicValue[Vector2] = field(default_factory=DynamicValue)
    scale: DynamicValue[Vector2] = field(default_factory=DynamicValue)
    rotation: DynamicValue[float] = field(default_factory=DynamicValue)
    opacity: DynamicValue[float] = field(default_factory=DynamicValue)
    color_type: DynamicValue[TrackColorType] = field(default_factory=DynamicValue)
    color: DynamicValue[Rgba] = field(default_factory=DynamicValue)
    secondary_color: DynamicValue[Rgba] = field(default_factory=DynamicValue)
    color_anim_duration: DynamicValue[float] = field(default_factory=DynamicValue)
    color_pulse: DynamicValue[TrackColorPulse] = field(default_factory=DynamicValue)
    pulse_length: DynamicValue[int] = field(default_factory=DynamicValue)
    style: DynamicValue[TrackStyle] = field(default_factory=DynamicValue)

    def _dynamic_values(self) -> list[DynamicValue[Any]]:
        return [getattr(self, name) for name in _DYNAMIC_FIELDS]

    def reset_dynamic(self) -> None:
        """Set every animated value back to its original."""
        for value in self._dynamic_values():
            value.reset()

    def copy(self) -> TileData:
        """An independent copy; the dynamic values are not shared."""
        return dataclasses.replace(
            self,
            **{name: dataclasses.replace(getattr(self, name)) for name in _DYNAMIC_FIELDS},
        )


@dataclass
class Tile:
    """One floor of a level: its angle, its events and its computed data."""

    angle: float = 0.0
    events: list[Any] = field(default_factory=list)
    data: TileData = field(default_factory=TileData)