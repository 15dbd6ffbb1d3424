import pytest

from adofai.easing import Easing
from adofai.events.visual import MoveCamera, RelativeToCamera

BASE = {
    "floor": 6,
    "eventType": "MoveCamera",
    "eventTag": "intro",
    "duration": 2,
    "angleOffset": 0,
    "ease": "OutSine",
}


def test_defaults():
    event = MoveCamera.from_dict(BASE)
    assert event.floor == 6
    assert event.event_tag == ["intro"]
    assert event.ease is Easing.OutSine
    assert event.relative_to is None
    assert event.position == (None, None)
    assert event.rotation is None
    assert event.zoom is None


def test_full_event():
    event = MoveCamera.from_dict(
        {
            **BASE,
            "relativeTo": "LastPosition",
            "position": [None, 5],
            "rotation": 30,
            "zoom": 150,
            "eventTag": "a b",
        }
    )
    assert event.relative_to is RelativeToCamera.LastPosition
    assert event.position == (None, 5.0)
    assert event.rotation == 30.0
    assert event.zoom == 150.0
    assert event.event_tag == ["a", "b"]


def test_null_options_stay_empty():
    event = MoveCamera.from_dict({**BASE, "relativeTo": None, "rotation": None, "zoom": None})
    assert (event.relative_to, event.rotation, event.zoom) == (None, None, None)


def test_round_trip():
    event = MoveCamera.from_dict({**BASE, "relativeTo": "Tile", "position": [1, 2], "zoom": 80})
    data = event.to_dict()
    assert data["relativeTo"] == "Tile"
    assert data["position"] == [1.0, 2.0]
    assert data["ease"] == "OutSine"
    assert MoveCamera.from_dict(data) == event


def test_round_trip_without_options():
    event = MoveCamera.from_dict(BASE)
    assert MoveCamera.from_dict(event.to_dict()) == event


@pytest.mark.parametrize(
    "changes",
    [
        {"ease": "Wobble"},
        {"relativeTo": "Nowhere"},
        {"position": [1]},
        {"position": ["a", 1]},
        {"position": None},
        {"eventTag": None},
    ],
)
def test_rejects_bad_data(changes):
    with pytest.raises(ValueError):
        MoveCamera.from_dict({**BASE, **changes})


def test_missing_angle_offset():
    data = dict(BASE)
    del data["angleOffset"]
    with pytest.raises(ValueError):
        MoveCamera.from_dict(data)