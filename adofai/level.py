"""A playable level: parsing tile timing and positions, and per-frame updates."""

from __future__ import annotations

import copy
import dataclasses
import math
import sys
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from .events.base import DynamicEvent, Event, EventData, StaticEvent
from .events.gameplay import SetSpeed
from .events.modifiers import RepeatEvents, RepeatType
from .events.track import PositionTrack
from .events.visual import MoveCamera, RelativeToCamera
from .loader import decode_level, read_level_file
from .settings import Camera
from .state import LevelState
from .tile import DynamicValueEmptyError, Orbit, TileData
from .units import Vector2, bpm2crotchet, deg2rad

T = TypeVar("T")

_MIDSPIN = 999.0


class LevelParseError(Exception):
    """The level cannot be parsed."""


def _require(value: Optional[T]) -> T:
    if value is None:
        raise DynamicValueEmptyError()
    return value


def _is_normal(value: float) -> bool:
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def _tags_match(wanted: list[str], present: list[str]) -> bool:
    return any(tag in present for tag in wanted)


class Level(LevelState):
    """A level that can be parsed, then updated to any moment of play."""

    @classmethod
    def open(cls, path: Union[str, Path]) -> Level:
        """Read a level file."""
        return cls.from_dict(read_level_file(path))

    @classmethod
    def from_dict(cls, data: Any) -> Level:
        """Build a level from a decoded level object."""
        tiles, settings = decode_level(data)
        return cls(tiles, settings)

    def parse(self) -> None:
        """Compute beats, seconds and positions of tiles and the timing of every event."""
        if self.parsed:
            return
        self.parsed = True
        if len(self.tiles) < 2:
            raise LevelParseError("Tiles are not enough (level.tiles.len() < 2).")
        self._lay_out_tiles()
        self.tiles[0].data.beats = -float(self.settings.countdown_ticks)
        for tile in self.tiles:
            for record in tile.events:
                if isinstance(record.event, SetSpeed):
                    record.beats = _require(tile.data.beats) + record.event.angle_offset / 180.0
        repeats = self._time_events()
        for record in repeats:
            self._expand_repeat(record.event)
        self.dynamic_events.sort(key=lambda record: _require(record.seconds))

    def _first_tile_data(self) -> TileData:
        settings = self.settings
        data = TileData()
        data.orbit = Orbit.Clockwise
        data.hitsound = settings.hitsound
        data.midspin_hitsound = settings.hitsound
        data.hitsound_volume = settings.hitsound_volume
        data.midspin_hitsound_volume = settings.hitsound_volume
        data.beats = 0.0
        data.stick_to_floors = settings.stick_to_floors
        data.radius_scale = 100.0
        data.editor_position = Vector2(0.0, 0.0)
        data.position.orig = Vector2(0.0, 0.0)
        data.position.now = None
        data.scale.orig = Vector2(100.0, 100.0)
        data.scale.now = None
        data.rotation.orig = 0.0
        data.opacity.orig = 100.0
        data.color_type.orig = settings.track_color_type
        data.color.orig = settings.track_color
        data.secondary_color.orig = settings.secondary_track_color
        data.color_anim_duration.orig = settings.track_color_anim_duration
        data.color_pulse.orig = settings.track_color_pulse
        data.pulse_length.orig = settings.track_pulse_length
        data.style.orig = settings.track_style
        return data

    def _beat_gap(self, index: int) -> float:
        tile = self.tiles[index]
        previous = self.tiles[index - 1]
        if previous.angle == _MIDSPIN:
            angle = self.tiles[index - 2].angle - tile.angle
        else:
            angle = previous.angle - 180.0 - tile.angle
        if _require(previous.data.orbit) is Orbit.Anticlockwise:
            angle = -angle
        angle %= 360.0
        if angle == 0.0:
            angle += 360.0
        if index == 1:
            angle -= 180.0
        return (
            angle / 180.0
            + _require(previous.data.pause_duration)
            + _require(previous.data.hold_duration)
        )

    def _lay_out_tiles(self) -> None:
        tiles = self.tiles
        last_index = len(tiles) - 1
        tiles[0].data = self._first_tile_data()
        offset_real, offset_editor = Vector2(), Vector2()
        for index, tile in enumerate(tiles):
            if index > 0:
                tile.data = tiles[index - 1].data.copy()
            data = tile.data
            data.pause_duration = 0.0
            data.hold_duration = 0.0

            position_track: Optional[PositionTrack] = None
            for record in list(tile.events):
                if isinstance(record.event, StaticEvent):
                    record.event.apply(data)
                    if isinstance(record.event, PositionTrack):
                        position_track = record.event

            if index == 0:
                continue

            if tile.angle == _MIDSPIN:
                data.beats = tiles[index - 1].data.beats
            else:
                data.beats = _require(data.beats) + self._beat_gap(index)

            is_last = index == last_index
            if (is_last or tiles[index + 1].angle != _MIDSPIN) and tile.angle != _MIDSPIN:
                radians = deg2rad(tile.angle)
                step = Vector2(math.cos(radians), math.sin(radians)) * _require(data.radius_scale) / 100.0
                data.position.orig = _require(data.position.orig) + step + offset_real
                data.editor_position = _require(data.editor_position) + step + offset_editor

            offset_real, offset_editor = Vector2(), Vector2()
            if position_track is not None:
                shift = position_track.position_offset
                data.editor_position = _require(data.editor_position) + shift
                if not position_track.editor_only:
                    data.position.orig = _require(data.position.orig) + shift
                if position_track.just_this_tile and not is_last:
                    offset_editor = -shift
                    if not position_track.editor_only:
                        offset_real = -shift
                data.stick_to_floors = position_track.stick_to_floors

    def _offset_seconds(self, event: Event) -> float:
        """Seconds per beat in effect for an event placed with an angle offset."""
        bpm = self.get_bpm_until(
            lambda ss, _beats, _seconds: event.floor < ss.floor or event.angle_offset < ss.angle_offset
        )
        return bpm2crotchet(bpm)

    def _time_events(self) -> list[EventData]:
        self.dynamic_events.clear()
        repeats: list[EventData] = []
        for tile in self.tiles:
            tile.data.seconds = self.beats2seconds(_require(tile.data.beats))
            for record in tile.events:
                event = record.event
                if not isinstance(event, DynamicEvent):
                    continue
                if isinstance(event, SetSpeed):
                    e_beats = _require(record.beats)
                    beats = e_beats + event.angle_offset / 180.0
                    seconds = self.beats2seconds(e_beats)
                else:
                    spb = self._offset_seconds(event)
                    seconds = _require(tile.data.seconds) + event.angle_offset / 180.0 * spb
                    beats = self.seconds2beats(seconds)
                record.beats = beats
                record.seconds = seconds
                if isinstance(event, RepeatEvents):
                    repeats.append(dataclasses.replace(record))
                self.dynamic_events.append(dataclasses.replace(record))
        return repeats

    def _tagged_events(self, repeat: RepeatEvents) -> list[EventData]:
        return [
            record
            for record in self.tiles[repeat.floor].events
            if isinstance(record.event, DynamicEvent)
            and record.event.HAS_EVENT_TAG
            and _tags_match(repeat.tag, record.event.event_tag)
        ]

    def _expand_repeat(self, repeat: RepeatEvents) -> None:
        if repeat.repeat_type is RepeatType.Beat:
            for record in self._tagged_events(repeat):
                if record.seconds is None:
                    continue
                bpm = self.get_bpm_by_floor_seconds(record.event.floor, record.seconds)
                for step in range(1, repeat.repetitions + 2):
                    new_seconds = record.seconds + step * repeat.interval * bpm
                    self.dynamic_events.append(
                        EventData(record.event, self.seconds2beats(new_seconds), new_seconds)
                    )
            return

        if repeat.floor_count is None:
            raise LevelParseError("RepeatEvents by floor needs a floorCount.")
        for record in self._tagged_events(repeat):
            event = record.event
            offset = event.angle_offset / 180.0 * self._offset_seconds(event)
            for step in range(1, repeat.floor_count + 2):
                new_floor = event.floor + step
                new_seconds = _require(self.tiles[new_floor].data.seconds) + offset
                new_event = copy.copy(event)
                if repeat.execute_on_current_floor:
                    new_event.floor = new_floor
                self.dynamic_events.append(
                    EventData(new_event, self.seconds2beats(new_seconds), new_seconds)
                )

    def update(self, seconds: float) -> None:
        """Bring every tile's animated values to their state at ``seconds``."""
        self._check_parsed("update")
        for tile in self.tiles:
            tile.data.reset_dynamic()
        for record in list(self.dynamic_events):
            record.event.apply((_require(record.beats), _require(record.seconds)), self, seconds)

    def _follow_player(self, seconds: float, floor: int) -> None:
        camera = self.camera
        delta = seconds - camera.last_seconds
        if not _is_normal(delta):
            return
        target = _require(self.tiles[floor].data.position.orig)
        if floor != camera.last_floor:
            camera.last_floor = floor
            camera.last_change_pos = camera.player_cam_pos
        distance = (target - camera.last_change_pos).length()
        speed = distance * self.get_bpm_by_seconds(seconds) / 60.0 / 2.0
        step = (target - camera.player_cam_pos).normalise() * delta * speed
        if (camera.player_cam_pos - target).length_squared() > step.length_squared():
            camera.player_cam_pos = camera.player_cam_pos + step
        else:
            camera.player_cam_pos = target

    def update_camera(self, seconds: float, floor: int) -> None:
        """Compute the camera's position, rotation and zoom at ``seconds`` while on ``floor``."""
        self._check_parsed("update_camera")
        camera = self.camera
        pos = Vector2(0.0, 0.0)
        rot = self.settings.rotation
        zoom = self.settings.zoom
        pos_off = self.settings.position
        last_rel_to = self.settings.relative_to
        rel_to_player = 1.0 if last_rel_to is RelativeToCamera.Player else 0.0

        for index, record in enumerate(list(self.dynamic_events)):
            event = record.event
            e_seconds = record.seconds
            if e_seconds is None or not isinstance(event, MoveCamera):
                continue
            spb = bpm2crotchet(self.get_bpm_by_floor_seconds(event.floor, e_seconds))
            if seconds < e_seconds:
                break
            x = 1.0 if event.duration == 0.0 else (seconds - e_seconds) / spb / event.duration
            y = event.ease.calc(x)
            rel_to = event.relative_to

            if rel_to in (RelativeToCamera.Tile, RelativeToCamera.Global):
                target_floor = event.floor if rel_to is RelativeToCamera.Tile else 0
                origin = _require(self.tiles[target_floor].data.position.orig)
                rel_to_player += (0.0 - rel_to_player) * y
                if last_rel_to is RelativeToCamera.Player:
                    pos = origin
                else:
                    pos = pos + (origin - pos) * y
            elif rel_to is RelativeToCamera.Player:
                if last_rel_to not in (RelativeToCamera.Player, RelativeToCamera.LastPosition):
                    if camera.last_event_index < index:
                        camera.player_cam_pos = pos + pos_off
                        pos_off = Vector2(0.0, 0.0)
                    last_rel_to = RelativeToCamera.Player
                rel_to_player += (1.0 - rel_to_player) * y

            changes_reference = rel_to is not None and rel_to is not last_rel_to
            target_x, target_y = event.position
            off_x, off_y = pos_off.x, pos_off.y
            if target_x is not None:
                off_x += (target_x - off_x) * y
            elif changes_reference:
                off_x += (0.0 - off_x) * y
            if target_y is not None:
                off_y += (target_y - off_y) * y
            elif changes_reference:
                off_y += (0.0 - off_y) * y
            pos_off = Vector2(off_x, off_y)

            if event.rotation is not None:
                rot += (event.rotation - rot) * y
            if event.zoom is not None:
                zoom += (event.zoom - zoom) * y
            if rel_to is not None:
                last_rel_to = rel_to
            camera.last_event_index = max(camera.last_event_index, index)

        self._follow_player(seconds, floor)
        camera.position = pos * (1.0 - rel_to_player) + camera.player_cam_pos * rel_to_player + pos_off
        camera.rotation = rot
        camera.zoom = zoom
        camera.last_seconds = seconds

    def reset_camera(self) -> None:
        """Return the camera to its initial state."""
        self.camera = Camera()