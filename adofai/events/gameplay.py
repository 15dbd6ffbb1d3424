"""Gameplay events: tempo, direction, pauses and hitsounds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from ..tile import DynamicValueEmptyError, Hitsound, TileData
from .base import DynamicEvent, StaticEvent, _enum, _field, _float, _unsigned


class SpeedType(Enum):
    Bpm = "Bpm"
    Multiplier = "Multiplier"


@dataclass
class SetSpeed(DynamicEvent):
    """Change of tempo, either to a fixed BPM or by a multiplier."""

    EVENT_TYPE: ClassVar[str] = "SetSpeed"

    beats_per_minute: float
    speed_type: SpeedType = SpeedType.Bpm
    bpm_multiplier: float = 0.0
    angle_offset: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> SetSpeed:
        return cls(
            floor=_field(data, "floor", _unsigned),
            beats_per_minute=_field(data, "beatsPerMinute", _float),
            speed_type=_field(data, "speedType", _enum(SpeedType), SpeedType.Bpm),
            bpm_multiplier=_field(data, "bpmMultiplier", _float, 0.0),
            angle_offset=_field(data, "angleOffset", _float, 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "speedType": self.speed_type.value,
            "beatsPerMinute": self.beats_per_minute,
            "bpmMultiplier": self.bpm_multiplier,
            "angleOffset": self.angle_offset,
        }

    def get_bpm(self, orig_bpm: float) -> float:
        """The tempo after this event, given the tempo before it."""
        if self.speed_type is SpeedType.Bpm:
            return self.beats_per_minute
        return orig_bpm * self.bpm_multiplier

    def apply(self, timing: tuple[float, float], level: Any, seconds: float) -> None:
        """Tempo changes are read from the level directly; nothing is animated."""


@dataclass
class Twirl(StaticEvent):
    """Reverses the direction of rotation."""

    EVENT_TYPE: ClassVar[str] = "Twirl"

    @classmethod
    def from_dict(cls, data: Any) -> Twirl:
        return cls(floor=_field(data, "floor", _unsigned))

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict()

    def apply(self, data: TileData) -> None:
        if data.orbit is None:
            raise DynamicValueEmptyError()
        data.orbit = data.orbit.opposite()


class AngleCorrectionDir(Enum):
    Backward = -1
    None_ = 0
    Forward = 1

    @classmethod
    def parse(cls, value: Any) -> AngleCorrectionDir:
        """Read a direction given as -1, 0, 1 or by its name."""
        if isinstance(value, str):
            try:
                return _DIRECTION_NAMES[value]
            except KeyError:
                raise ValueError(f"unknown angle correction direction: {value!r}") from None
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"unknown angle correction direction: {value!r}")
        return cls(value)


_DIRECTION_NAMES = {member.name.rstrip("_"): member for member in AngleCorrectionDir}


@dataclass
class Pause(StaticEvent):
    """Extra beats of waiting after a floor."""

    EVENT_TYPE: ClassVar[str] = "Pause"

    duration: float
    countdown_ticks: float
    angle_correction_dir: AngleCorrectionDir

    @classmethod
    def from_dict(cls, data: Any) -> Pause:
        return cls(
            floor=_field(data, "floor", _unsigned),
            duration=_field(data, "duration", _float),
            countdown_ticks=_field(data, "countdownTicks", _float),
            angle_correction_dir=_field(data, "angleCorrectionDir", AngleCorrectionDir.parse),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "duration": self.duration,
            "countdownTicks": self.countdown_ticks,
            "angleCorrectionDir": self.angle_correction_dir.name.rstrip("_"),
        }

    def apply(self, data: TileData) -> None:
        data.pause_duration = self.duration


class GameSound(Enum):
    Hitsound = "Hitsound"
    Midspin = "Midspin"


@dataclass
class SetHitsound(StaticEvent):
    """Changes the hitsound or the midspin hitsound and its volume."""

    EVENT_TYPE: ClassVar[str] = "SetHitsound"

    game_sound: GameSound
    hitsound: Hitsound
    hitsound_volume: float

    @classmethod
    def from_dict(cls, data: Any) -> SetHitsound:
        return cls(
            floor=_field(data, "floor", _unsigned),
            game_sound=_field(data, "gameSound", _enum(GameSound)),
            hitsound=_field(data, "hitsound", _enum(Hitsound)),
            hitsound_volume=_field(data, "hitsoundVolume", _float),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "gameSound": self.game_sound.value,
            "hitsound": self.hitsound.value,
            "hitsoundVolume": self.hitsound_volume,
        }

    def apply(self, data: TileData) -> None:
        if self.game_sound is GameSound.Hitsound:
            data.hitsound = self.hitsound
            data.hitsound_volume = self.hitsound_volume
        else:
            data.midspin_hitsound = self.hitsound
            data.midspin_hitsound_volume = self.hitsound_volume