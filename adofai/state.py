"""Timing, tempo and judgement queries over a level's parsed data."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, TypeVar

from .events.base import EventData
from .events.gameplay import SetSpeed
from .settings import Camera, Difficulty, HitMargin, LevelNotParsedError, Settings
from .tile import DynamicValueEmptyError, Orbit, Tile
from .units import Vector2, bpm2crotchet, deg2rad

T = TypeVar("T")

_MAX_BPM = {
    Difficulty.Lenient: 210.0,
    Difficulty.Normal: 330.0,
    Difficulty.Strict: 500.0,
}


def _require(value: Optional[T]) -> T:
    if value is None:
        raise DynamicValueEmptyError()
    return value


@dataclass
class LevelState:
    """Tiles and settings of a level together with the state computed from them."""

    tiles: list[Tile] = field(default_factory=list)
    settings: Settings = field(default_factory=Settings)
    parsed: bool = field(default=False, init=False)
    camera: Camera = field(default_factory=Camera, init=False)
    dynamic_events: list[EventData] = field(default_factory=list, init=False, repr=False)

    def _check_parsed(self, calling_function: str) -> None:
        if not self.parsed:
            raise LevelNotParsedError(calling_function)

    def _speed_changes(self) -> Iterator[EventData]:
        for tile in self.tiles:
            for record in tile.events:
                if isinstance(record.event, SetSpeed):
                    yield record

    def beats2seconds(self, beats: float) -> float:
        """The time in seconds at which the given beat falls."""
        self._check_parsed("beats2seconds")
        bpm = self.settings.bpm
        last_beats = 0.0
        seconds = self.settings.offset / 1000.0
        for record in self._speed_changes():
            ss_beats = _require(record.beats)
            if beats <= ss_beats:
                break
            seconds += bpm2crotchet(bpm) * (ss_beats - last_beats)
            bpm = record.event.get_bpm(bpm)
            last_beats = ss_beats
        return seconds + bpm2crotchet(bpm) * (beats - last_beats)

    def seconds2beats(self, seconds: float) -> float:
        """The beat that falls at the given time in seconds."""
        self._check_parsed("seconds2beats")
        seconds -= self.settings.offset / 1000.0
        bpm = self.settings.bpm
        last_beats = 0.0
        beats = 0.0
        for record in self._speed_changes():
            ss_beats = _require(record.beats)
            gap_seconds = bpm2crotchet(bpm) * (ss_beats - last_beats)
            if seconds <= gap_seconds:
                break
            seconds -= gap_seconds
            beats += ss_beats - last_beats
            bpm = record.event.get_bpm(bpm)
            last_beats = ss_beats
        return beats + seconds / bpm2crotchet(bpm)

    def get_bpm_until(
        self, predicate: Callable[[SetSpeed, Optional[float], Optional[float]], bool]
    ) -> float:
        """The tempo after every speed change before the first one ``predicate`` accepts."""
        self._check_parsed("get_bpm_until")
        bpm = self.settings.bpm
        for record in self._speed_changes():
            if predicate(record.event, record.beats, record.seconds):
                break
            bpm = record.event.get_bpm(bpm)
        return bpm

    def get_bpm_by_beats(self, beats: float) -> float:
        """The tempo at a beat; a change at exactly that beat counts."""
        self._check_parsed("get_bpm_by_beats")
        bpm = self.settings.bpm
        for record in self._speed_changes():
            if beats < _require(record.beats):
                break
            bpm = record.event.get_bpm(bpm)
        return bpm

    def get_bpm_excluding_beats(self, beats: float) -> float:
        """The tempo just before a beat; a change at exactly that beat does not count."""
        self._check_parsed("get_bpm_excluding_beats")
        bpm = self.settings.bpm
        for record in self._speed_changes():
            if beats <= _require(record.beats):
                break
            bpm = record.event.get_bpm(bpm)
        return bpm

    def get_bpm_by_seconds(self, seconds: float) -> float:
        """The tempo at a time in seconds."""
        self._check_parsed("get_bpm_by_seconds")
        bpm = self.settings.bpm
        for record in self._speed_changes():
            if seconds < _require(record.seconds):
                break
            bpm = record.event.get_bpm(bpm)
        return bpm

    def get_bpm_by_floor_seconds(self, floor: int, seconds: float) -> float:
        """The tempo at a time, counting only speed changes on or before ``floor``."""
        self._check_parsed("get_bpm_by_floor_seconds")
        bpm = self.settings.bpm
        for record in self._speed_changes():
            if floor < record.event.floor or seconds < _require(record.seconds):
                break
            bpm = record.event.get_bpm(bpm)
        return bpm

    def planets_direction(self, floor: int, seconds: float) -> float:
        """Angle in degrees from the pivot planet to the moving one."""
        self._check_parsed("planets_direction")
        spb = bpm2crotchet(self.get_bpm_by_floor_seconds(floor, seconds))
        if floor == 0:
            return -seconds / spb * 180.0
        tile = self.tiles[floor]
        k = -1.0 if _require(tile.data.orbit) is Orbit.Clockwise else 1.0
        base = self.tiles[floor - 1].angle if tile.angle == 999.0 else tile.angle - 180.0
        return base + (seconds - _require(tile.data.seconds)) / spb * 180.0 * k

    def planets_position(self, floor: int, seconds: float) -> tuple[Vector2, Vector2]:
        """Positions of the two planets, in planet order, while on ``floor``."""
        self._check_parsed("planets_position")
        data = self.tiles[floor].data
        if _require(data.stick_to_floors):
            pivot = _require(data.position.now)
        else:
            pivot = _require(data.position.orig)
        radians = deg2rad(self.planets_direction(floor, seconds))
        moving = pivot + Vector2(math.cos(radians), math.sin(radians))
        return (pivot, moving) if floor % 2 == 0 else (moving, pivot)

    def get_floor_by_seconds(self, seconds: float) -> int:
        """The floor the player is on at a time in seconds."""
        self._check_parsed("get_floor_by_seconds")
        floor = len(self.tiles) - 1
        for index, tile in enumerate(self.tiles):
            if seconds < _require(tile.data.seconds):
                floor = index
                break
        return floor - 1 if floor > 0 else floor

    def get_timing(self, floor: int, seconds: float) -> float:
        """How far a hit at ``seconds`` is from the time of ``floor``; positive is late."""
        self._check_parsed("get_timing")
        return seconds - _require(self.tiles[floor].data.seconds)

    def get_hit_margin_bound(self, floor: int, difficulty: Difficulty) -> tuple[float, float, float]:
        """The perfect, late/early perfect and very late/early bounds in seconds."""
        self._check_parsed("get_hit_margin_bound")
        bpm = self.get_bpm_excluding_beats(_require(self.tiles[floor].data.beats))
        judge_seconds = bpm2crotchet(min(_MAX_BPM[difficulty], bpm))
        return judge_seconds / 6.0, judge_seconds / 4.0, judge_seconds / 3.0

    def get_hit_margin(
        self, floor: int, seconds: float, difficulty: Difficulty
    ) -> tuple[HitMargin, float]:
        """The judgement of a hit on ``floor`` at ``seconds`` and its timing."""
        self._check_parsed("get_hit_margin")
        perfect, late_perfect, very = self.get_hit_margin_bound(floor, difficulty)
        timing = self.get_timing(floor, seconds)
        if timing > very:
            margin = HitMargin.TooLate
        elif timing > late_perfect:
            margin = HitMargin.VeryLate
        elif timing > perfect:
            margin = HitMargin.LatePerfect
        elif timing > -perfect:
            margin = HitMargin.Perfect
        elif timing > -late_perfect:
            margin = HitMargin.EarlyPerfect
        elif timing > -very:
            margin = HitMargin.VeryEarly
        else:
            margin = HitMargin.TooEarly
        return margin, timing