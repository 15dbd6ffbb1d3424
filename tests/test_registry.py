import pytest

from adofai.easing import Easing
from adofai.events.base import DynamicEvent, RelativeIndex, RelativeToTile, StaticEvent
from adofai.events.dlc import Hold, ScaleRadius
from adofai.events.gameplay import AngleCorrectionDir, Pause, SetSpeed, SpeedType, Twirl
from adofai.events.modifiers import RepeatEvents
from adofai.events.registry import UnknownEventError, parse_event
from adofai.events.track import MoveTrack, PositionTrack
from adofai.events.visual import MoveCamera


def test_parse_twirl():
    event = parse_event({"eventType": "Twirl", "floor": 3})
    assert event == Twirl(floor=3)
    assert isinstance(event, StaticEvent)


def test_parse_set_speed_is_dynamic():
    event = parse_event({"eventType": "SetSpeed", "floor": 2, "beatsPerMinute": 150.0})
    assert event == SetSpeed(floor=2, beats_per_minute=150.0)
    assert isinstance(event, DynamicEvent)


@pytest.mark.parametrize(
    "event",
    [
        Twirl(floor=1),
        Pause(floor=2, duration=1.0, countdown_ticks=0.0, angle_correction_dir=AngleCorrectionDir.None_),
        ScaleRadius(floor=3, scale=150.0),
        Hold(floor=4, duration=2.0, distance_multiplier=100.0, landing_animation=False),
        SetSpeed(floor=5, beats_per_minute=200.0, speed_type=SpeedType.Multiplier, bpm_multiplier=2.0),
        RepeatEvents(floor=6, repetitions=2, interval=1.0, execute_on_current_floor=False, tag=["x"]),
        MoveCamera(floor=7, event_tag=[], duration=1.0, angle_offset=0.0, ease=Easing.Linear),
        PositionTrack(floor=8, editor_only=True),
        MoveTrack(
            floor=9,
            event_tag=["t"],
            start_tile=RelativeIndex(0, RelativeToTile.ThisTile),
            end_tile=RelativeIndex(0, RelativeToTile.End),
            duration=1.0,
            position_offset=(1.0, None),
            ease=Easing.OutQuad,
        ),
    ],
)
def test_round_trip_through_registry(event):
    assert parse_event(event.to_dict()) == event


def test_unknown_event_type():
    with pytest.raises(UnknownEventError) as info:
        parse_event({"eventType": "Flash", "floor": 1})
    assert info.value.event_type == "Flash"


def test_unknown_event_is_value_error():
    with pytest.raises(ValueError):
        parse_event({"eventType": "Bloom", "floor": 1})


def test_missing_event_type():
    with pytest.raises(ValueError):
        parse_event({"floor": 1})


def test_not_an_object():
    with pytest.raises(ValueError):
        parse_event(["Twirl", 1])


def test_bad_fields_raise():
    with pytest.raises(ValueError):
        parse_event({"eventType": "ScaleRadius", "floor": 1})