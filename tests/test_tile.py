import pytest

from adofai.codec import Rgba
from adofai.tile import (
    DynamicValue,
    DynamicValueEmptyError,
    Hitsound,
    Orbit,
    Tile,
    TileData,
    TrackAnimation,
    TrackColorPulse,
    TrackDisappearAnimation,
    TrackStyle,
)
from adofai.units import Vector2


def test_orbit_opposite():
    assert Orbit.Clockwise.opposite() is Orbit.Anticlockwise
    assert Orbit.Anticlockwise.opposite() is Orbit.Clockwise
    for orbit in Orbit:
        assert orbit.opposite().opposite() is orbit


def test_enum_names_from_level_files():
    assert TrackAnimation("Scatter_Far") is TrackAnimation.ScatterFar
    assert TrackAnimation("Grow_Spin") is TrackAnimation.GrowSpin
    assert TrackDisappearAnimation("Shrink_Spin") is TrackDisappearAnimation.ShrinkSpin
    assert TrackColorPulse("None") is TrackColorPulse.None_
    assert Hitsound("Kick") is Hitsound.Kick
    assert TrackStyle("NeonLight") is TrackStyle.NeonLight
    with pytest.raises(ValueError):
        Hitsound("Cowbell")


def test_dynamic_value_reset():
    value = DynamicValue(orig=1.5)
    assert value.now is None
    value.reset()
    assert value.now == 1.5
    value.now = 9.0
    value.reset()
    assert value.now == value.orig


def test_empty_error_message():
    error = DynamicValueEmptyError()
    assert str(error) == "DynamicValue is empty"


def test_reset_dynamic_copies_every_value():
    data = TileData()
    data.position.orig = Vector2(1.0, 2.0)
    data.color.orig = Rgba(1, 2, 3)
    data.pulse_length.orig = 10
    data.reset_dynamic()
    assert data.position.now == Vector2(1.0, 2.0)
    assert data.color.now == Rgba(1, 2, 3)
    assert data.pulse_length.now == 10
    assert data.opacity.now is None


def test_copy_is_independent():
    data = TileData(beats=2.0, orbit=Orbit.Clockwise)
    data.rotation.orig = 45.0
    clone = data.copy()
    assert clone == data
    clone.rotation.orig = 90.0
    clone.beats = 3.0
    assert data.rotation.orig == 45.0
    assert data.beats == 2.0
    assert clone.rotation is not data.rotation


def test_tile_defaults_are_not_shared():
    first = Tile(angle=90.0)
    second = Tile(angle=180.0)
    first.events.append("event")
    assert second.events == []
    assert first.data is not second.data
    assert first.angle == 90.0