"""Level settings, camera state, judgement kinds and path letters."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from .codec import Rgba, format_color, format_vector, parse_bool, parse_color, parse_vector
from .events.base import _MISSING, _enum, _field, _float, _u32
from .events.visual import RelativeToCamera
from .tile import (
    Hitsound,
    TrackAnimation,
    TrackColorPulse,
    TrackColorType,
    TrackDisappearAnimation,
    TrackStyle,
)
from .units import Vector2


class Difficulty(Enum):
    Lenient = "Lenient"
    Normal = "Normal"
    Strict = "Strict"


class HitMargin(Enum):
    Perfect = "Perfect"
    LatePerfect = "LatePerfect"
    EarlyPerfect = "EarlyPerfect"
    VeryLate = "VeryLate"
    VeryEarly = "VeryEarly"
    TooLate = "TooLate"
    TooEarly = "TooEarly"


PATH_ANGLE: tuple[tuple[str, float], ...] = (
    ("R", 0.0),
    ("p", 15.0),
    ("J", 30.0),
    ("E", 45.0),
    ("T", 60.0),
    ("o", 75.0),
    ("U", 90.0),
    ("q", 105.0),
    ("G", 120.0),
    ("Q", 135.0),
    ("H", 150.0),
    ("W", 165.0),
    ("L", 180.0),
    ("x", 195.0),
    ("N", 210.0),
    ("Z", 225.0),
    ("F", 240.0),
    ("V", 255.0),
    ("D", 270.0),
    ("Y", 285.0),
    ("B", 300.0),
    ("C", 315.0),
    ("M", 330.0),
    ("A", 345.0),
    ("5", 555.0),
    ("6", 666.0),
    ("7", 777.0),
    ("8", 888.0),
    ("!", 999.0),
)
_ANGLE_BY_PATH = dict(PATH_ANGLE)
_PATH_BY_ANGLE = {angle: path for path, angle in PATH_ANGLE}


def path2angle(path: str) -> float:
    """The angle of a path letter."""
    try:
        return _ANGLE_BY_PATH[path]
    except KeyError:
        raise ValueError(f"unknown path letter: {path!r}") from None


def angle2path(angle: float) -> str:
    """The path letter of an angle."""
    try:
        return _PATH_BY_ANGLE[angle]
    except KeyError:
        raise ValueError(f"no path letter for angle {angle!r}") from None


class LevelNotParsedError(Exception):
    """A level method that needs parsed data was called before ``parse()``."""

    def __init__(self, calling_function: str) -> None:
        self.calling_function = calling_function
        super().__init__(
            f"Level is not parsed when calling level.{calling_function}(). Call level.parse() first."
        )


def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


def _same(value: Any) -> Any:
    return value


def _name(member: Enum) -> Any:
    return member.value


_Spec = tuple[str, str, Callable[[Any], Any], Callable[[Any], Any], Any]

_FIELDS: tuple[_Spec, ...] = (
    ("version", "version", _u32, _same, _MISSING),
    ("artist", "artist", _str, _same, _MISSING),
    ("song", "song", _str, _same, _MISSING),
    ("author", "author", _str, _same, _MISSING),
    ("separate_countdown_time", "separateCountdownTime", parse_bool, _same, _MISSING),
    ("song_filename", "songFilename", _str, _same, _MISSING),
    ("bpm", "bpm", _float, _same, _MISSING),
    ("volume", "volume", _float, _same, _MISSING),
    ("offset", "offset", _float, _same, _MISSING),
    ("pitch", "pitch", _float, _same, _MISSING),
    ("countdown_ticks", "countdownTicks", _u32, _same, 0),
    ("stick_to_floors", "stickToFloors", parse_bool, _same, _MISSING),
    ("track_color_type", "trackColorType", _enum(TrackColorType), _name, _MISSING),
    ("track_color", "trackColor", parse_color, format_color, _MISSING),
    ("secondary_track_color", "secondaryTrackColor", parse_color, format_color, _MISSING),
    ("track_color_anim_duration", "trackColorAnimDuration", _float, _same, _MISSING),
    ("track_color_pulse", "trackColorPulse", _enum(TrackColorPulse), _name, _MISSING),
    ("track_pulse_length", "trackPulseLength", _u32, _same, _MISSING),
    ("track_style", "trackStyle", _enum(TrackStyle), _name, _MISSING),
    ("track_texture", "trackTexture", _str, _same, ""),
    ("track_texture_scale", "trackTextureScale", _float, _same, 1.0),
    ("track_glow_intensity", "trackGlowIntensity", _float, _same, 0.0),
    ("track_animation", "trackAnimation", _enum(TrackAnimation), _name, _MISSING),
    ("beats_ahead", "beatsAhead", _float, _same, _MISSING),
    (
        "track_disappear_animation",
        "trackDisappearAnimation",
        _enum(TrackDisappearAnimation),
        _name,
        _MISSING,
    ),
    ("beats_behind", "beatsBehind", _float, _same, _MISSING),
    ("background_color", "backgroundColor", parse_color, format_color, _MISSING),
    ("position", "position", parse_vector, format_vector, Vector2()),
    ("rotation", "rotation", _float, _same, _MISSING),
    ("zoom", "zoom", _float, _same, _MISSING),
    ("relative_to", "relativeTo", _enum(RelativeToCamera), _name, _MISSING),
    ("hitsound", "hitsound", _enum(Hitsound), _name, _MISSING),
    ("hitsound_volume", "hitsoundVolume", _float, _same, 100.0),
)


@dataclass
class Settings:
    """The ``settings`` object of a level file."""

    version: int = 0
    artist: str = ""
    song: str = ""
    author: str = ""
    separate_countdown_time: bool = False
    song_filename: str = ""
    bpm: float = 0.0
    volume: float = 0.0
    offset: float = 0.0
    pitch: float = 0.0
    countdown_ticks: int = 0
    stick_to_floors: bool = False
    track_color_type: TrackColorType = TrackColorType.Single
    track_color: Rgba = Rgba(0, 0, 0, 0)
    secondary_track_color: Rgba = Rgba(0, 0, 0, 0)
    track_color_anim_duration: float = 0.0
    track_color_pulse: TrackColorPulse = TrackColorPulse.None_
    track_pulse_length: int = 0
    track_style: TrackStyle = TrackStyle.Standard
    track_texture: str = ""
    track_texture_scale: float = 0.0
    track_glow_intensity: float = 0.0
    track_animation: TrackAnimation = TrackAnimation.None_
    beats_ahead: float = 0.0
    track_disappear_animation: TrackDisappearAnimation = TrackDisappearAnimation.None_
    beats_behind: float = 0.0
    background_color: Rgba = Rgba(0, 0, 0, 0)
    position: Vector2 = Vector2()
    rotation: float = 0.0
    zoom: float = 0.0
    relative_to: RelativeToCamera = RelativeToCamera.Player
    hitsound: Hitsound = Hitsound.Kick
    hitsound_volume: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Settings:
        """Read a settings object; missing optional keys take the file format's defaults."""
        return cls(**{attr: _field(data, key, read, default) for attr, key, read, _, default in _FIELDS})

    def to_dict(self) -> dict[str, Any]:
        """The settings as a level-file object."""
        return {key: write(getattr(self, attr)) for attr, key, _, write, _ in _FIELDS}


@dataclass
class Camera:
    """Camera state computed while a level is played."""

    position: Vector2 = Vector2()
    rotation: float = 0.0
    zoom: float = 100.0
    player_cam_pos: Vector2 = Vector2()
    last_seconds: float = -math.inf
    last_floor: int = 0
    last_change_pos: Vector2 = Vector2()
    last_event_index: int = 0
    _history: list[Vector2] = field(default_factory=list, repr=False)