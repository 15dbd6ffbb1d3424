"""Reading level-file action objects into event instances."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import Event
from .dlc import Hold, ScaleRadius
from .gameplay import Pause, SetHitsound, SetSpeed, Twirl
from .modifiers import RepeatEvents
from .track import ColorTrack, MoveTrack, PositionTrack, RecolorTrack
from .visual import MoveCamera

_EVENT_CLASSES = (
    Twirl,
    Pause,
    ScaleRadius,
    ColorTrack,
    PositionTrack,
    SetHitsound,
    Hold,
    SetSpeed,
    RecolorTrack,
    MoveTrack,
    MoveCamera,
    RepeatEvents,
)
_EVENT_TYPES: dict[str, Any] = {cls.EVENT_TYPE: cls for cls in _EVENT_CLASSES}


class UnknownEventError(ValueError):
    """The action's event type is not one this package understands."""

    def __init__(self, event_type: str) -> None:
        self.event_type = event_type
        super().__init__(f"unknown event type: {event_type!r}")


def parse_event(data: Any) -> Event:
    """Build the event described by an action object, chosen by its ``eventType``."""
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {data!r}")
    event_type = data.get("eventType")
    if not isinstance(event_type, str):
        raise ValueError("action has no eventType")
    cls = _EVENT_TYPES.get(event_type)
    if cls is None:
        raise UnknownEventError(event_type)
    return cls.from_dict(data)