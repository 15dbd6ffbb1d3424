"""Events that colour, move and place track tiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Optional

from ..codec import (
    Rgba,
    format_color,
    format_optional_vector,
    format_tag,
    format_vector,
    parse_bool,
    parse_color,
    parse_optional_vector,
    parse_tag,
    parse_vector,
)
from ..easing import Easing
from ..tile import DynamicValueEmptyError, TileData, TrackColorPulse, TrackColorType, TrackStyle
from ..units import Vector2, bpm2crotchet
from .base import (
    DynamicEvent,
    RelativeIndex,
    RelativeToTile,
    StaticEvent,
    _enum,
    _field,
    _float,
    _optional,
    _u32,
    _unsigned,
)


def _read_colors(data: Any) -> dict[str, Any]:
    return {
        "track_color_type": _field(data, "trackColorType", _enum(TrackColorType)),
        "track_color": _field(data, "trackColor", parse_color),
        "secondary_track_color": _field(data, "secondaryTrackColor", parse_color),
        "track_color_anim_duration": _field(data, "trackColorAnimDuration", _float),
        "track_color_pulse": _field(data, "trackColorPulse", _enum(TrackColorPulse)),
        "track_pulse_length": _field(data, "trackPulseLength", _u32),
        "track_style": _field(data, "trackStyle", _enum(TrackStyle)),
    }


def _write_colors(event: Any) -> dict[str, Any]:
    return {
        "trackColorType": event.track_color_type.value,
        "trackColor": format_color(event.track_color),
        "secondaryTrackColor": format_color(event.secondary_track_color),
        "trackColorAnimDuration": event.track_color_anim_duration,
        "trackColorPulse": event.track_color_pulse.value,
        "trackPulseLength": event.track_pulse_length,
        "trackStyle": event.track_style.value,
    }


def _color_updates(event: Any) -> Iterator[tuple[str, Any]]:
    """Pairs of (tile data attribute, new value) for the colour fields of an event."""
    yield "color_type", event.track_color_type
    yield "color", event.track_color
    yield "secondary_color", event.secondary_track_color
    yield "color_anim_duration", event.track_color_anim_duration
    yield "color_pulse", event.track_color_pulse
    yield "pulse_length", event.track_pulse_length
    yield "style", event.track_style


def _floors(event: Any, level: Any) -> range:
    """The floors covered by an event's start and end tiles, clipped to the level."""
    last = len(level.tiles) - 1
    start = event.start_tile.calc(event.floor, last)
    end = min(event.end_tile.calc(event.floor, last), last)
    return range(start, end + 1)


def _toward(current: float, target: Optional[float], progress: float) -> float:
    if target is None:
        return current
    return current + (target - current) * progress


@dataclass
class ColorTrack(StaticEvent):
    """Sets the colour and style of the track from its floor on."""

    EVENT_TYPE: ClassVar[str] = "ColorTrack"

    track_color_type: TrackColorType
    track_color: Rgba
    secondary_track_color: Rgba
    track_color_anim_duration: float
    track_color_pulse: TrackColorPulse
    track_pulse_length: int
    track_style: TrackStyle

    @classmethod
    def from_dict(cls, data: Any) -> ColorTrack:
        return cls(floor=_field(data, "floor", _unsigned), **_read_colors(data))

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), **_write_colors(self)}

    def apply(self, data: TileData) -> None:
        for name, value in _color_updates(self):
            getattr(data, name).orig = value


@dataclass
class RecolorTrack(DynamicEvent):
    """Recolours a range of tiles during play, optionally one after another."""

    EVENT_TYPE: ClassVar[str] = "RecolorTrack"
    HAS_EVENT_TAG: ClassVar[bool] = True

    event_tag: list[str]
    angle_offset: float
    start_tile: RelativeIndex
    end_tile: RelativeIndex
    track_color_type: TrackColorType
    track_color: Rgba
    secondary_track_color: Rgba
    track_color_anim_duration: float
    track_color_pulse: TrackColorPulse
    track_pulse_length: int
    track_style: TrackStyle
    gap_length: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> RecolorTrack:
        return cls(
            floor=_field(data, "floor", _unsigned),
            event_tag=_field(data, "eventTag", parse_tag),
            angle_offset=_field(data, "angleOffset", _float),
            start_tile=_field(data, "startTile", RelativeIndex.from_json),
            end_tile=_field(data, "endTile", RelativeIndex.from_json),
            gap_length=_field(data, "gapLength", _u32, 0),
            **_read_colors(data),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "eventTag": format_tag(self.event_tag),
            "angleOffset": self.angle_offset,
            "startTile": self.start_tile.to_json(),
            "endTile": self.end_tile.to_json(),
            "gapLength": self.gap_length,
            **_write_colors(self),
        }

    def apply(self, timing: tuple[float, float], level: Any, seconds: float) -> None:
        _, e_seconds = timing
        if seconds < e_seconds:
            return
        spb = bpm2crotchet(level.get_bpm_by_floor_seconds(self.floor, e_seconds))
        for floor in _floors(self, level):
            if seconds < e_seconds + (floor * self.gap_length) * spb:
                return
            data = level.tiles[floor].data
            for name, value in _color_updates(self):
                getattr(data, name).now = value


@dataclass
class MoveTrack(DynamicEvent):
    """Moves, rotates, scales or fades a range of tiles over ``duration`` beats."""

    EVENT_TYPE: ClassVar[str] = "MoveTrack"
    HAS_EVENT_TAG: ClassVar[bool] = True

    event_tag: list[str]
    start_tile: RelativeIndex
    end_tile: RelativeIndex
    duration: float
    position_offset: tuple[Optional[float], Optional[float]]
    ease: Easing
    angle_offset: float = 0.0
    gap_length: float = 0.0
    rotation_offset: Optional[float] = None
    scale: tuple[Optional[float], Optional[float]] = (None, None)
    opacity: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Any) -> MoveTrack:
        return cls(
            floor=_field(data, "floor", _unsigned),
            event_tag=_field(data, "eventTag", parse_tag),
            start_tile=_field(data, "startTile", RelativeIndex.from_json),
            end_tile=_field(data, "endTile", RelativeIndex.from_json),
            duration=_field(data, "duration", _float),
            position_offset=_field(data, "positionOffset", parse_optional_vector),
            ease=_field(data, "ease", _enum(Easing)),
            angle_offset=_field(data, "angleOffset", _float, 0.0),
            gap_length=_field(data, "gapLength", _float, 0.0),
            rotation_offset=_field(data, "rotationOffset", _optional(_float), None),
            scale=_field(data, "scale", parse_optional_vector, (None, None)),
            opacity=_field(data, "opacity", _optional(_float), None),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "eventTag": format_tag(self.event_tag),
            "angleOffset": self.angle_offset,
            "startTile": self.start_tile.to_json(),
            "endTile": self.end_tile.to_json(),
            "gapLength": self.gap_length,
            "duration": self.duration,
            "positionOffset": format_optional_vector(self.position_offset),
            "rotationOffset": self.rotation_offset,
            "scale": format_optional_vector(self.scale),
            "opacity": self.opacity,
            "ease": self.ease.value,
        }

    def apply(self, timing: tuple[float, float], level: Any, seconds: float) -> None:
        _, e_seconds = timing
        spb = bpm2crotchet(level.get_bpm_by_floor_seconds(self.floor, e_seconds))
        if seconds < e_seconds:
            return
        if self.duration == 0.0:
            progress = 1.0
        else:
            progress = self.ease.calc((seconds - e_seconds) / spb / self.duration)

        offset_x, offset_y = self.position_offset
        scale_x, scale_y = self.scale
        for floor in _floors(self, level):
            data = level.tiles[floor].data
            position = data.position.now
            origin = data.position.orig
            rotation = data.rotation.now
            scale = data.scale.now
            opacity = data.opacity.now
            if any(value is None for value in (position, origin, rotation, scale, opacity)):
                raise DynamicValueEmptyError()
            data.position.now = Vector2(
                _toward(position.x, None if offset_x is None else origin.x + offset_x, progress),
                _toward(position.y, None if offset_y is None else origin.y + offset_y, progress),
            )
            data.rotation.now = _toward(rotation, self.rotation_offset, progress)
            data.scale.now = Vector2(
                _toward(scale.x, scale_x, progress),
                _toward(scale.y, scale_y, progress),
            )
            data.opacity.now = _toward(opacity, self.opacity, progress)


def _default_relative_to() -> RelativeIndex:
    return RelativeIndex(0, RelativeToTile.ThisTile)


@dataclass
class PositionTrack(StaticEvent):
    """Offsets the position of a tile; the offset is applied while the level is parsed."""

    EVENT_TYPE: ClassVar[str] = "PositionTrack"

    editor_only: bool
    position_offset: Vector2 = field(default_factory=Vector2)
    relative_to: RelativeIndex = field(default_factory=_default_relative_to)
    scale: float = 0.0
    just_this_tile: bool = False
    stick_to_floors: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> PositionTrack:
        return cls(
            floor=_field(data, "floor", _unsigned),
            editor_only=_field(data, "editorOnly", parse_bool),
            position_offset=_field(data, "positionOffset", parse_vector, Vector2()),
            relative_to=_field(data, "relativeTo", RelativeIndex.from_json, _default_relative_to()),
            scale=_field(data, "scale", _float, 0.0),
            just_this_tile=_field(data, "justThisTile", parse_bool, False),
            stick_to_floors=_field(data, "stickToFloors", parse_bool, False),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "positionOffset": format_vector(self.position_offset),
            "relativeTo": self.relative_to.to_json(),
            "scale": self.scale,
            "justThisTile": self.just_this_tile,
            "editorOnly": self.editor_only,
            "stickToFloors": self.stick_to_floors,
        }

    def apply(self, data: TileData) -> None:
        """Positions are computed by the level parser, which reads this event directly."""