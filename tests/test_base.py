import pytest

from adofai.events.base import (
    DynamicEvent,
    EventData,
    RelativeIndex,
    RelativeToTile,
    StaticEvent,
)
from adofai.events.gameplay import Twirl


def test_relative_index_from_json():
    index = RelativeIndex.from_json([3, "Start"])
    assert index.index == 3
    assert index.relative_to is RelativeToTile.Start


def test_relative_index_round_trip():
    value = [-2, "ThisTile"]
    assert RelativeIndex.from_json(value).to_json() == value


@pytest.mark.parametrize(
    "value",
    [["x", "Start"], [1, "Nowhere"], [1.5, "Start"], [1], [1, "End", 2], "Start", [True, "End"]],
)
def test_relative_index_rejects_bad_json(value):
    with pytest.raises(ValueError):
        RelativeIndex.from_json(value)


def test_calc_start_positive_is_index():
    assert RelativeIndex(5, RelativeToTile.Start).calc(2, 20) == 5


def test_calc_start_negative_is_first_floor():
    assert RelativeIndex(-5, RelativeToTile.Start).calc(7, 20) == 0


def test_calc_this_tile_matches_start_offset():
    relative = RelativeIndex(4, RelativeToTile.ThisTile).calc(10, 20)
    absolute = RelativeIndex(14, RelativeToTile.Start).calc(10, 20)
    assert relative == absolute


def test_calc_this_tile_zero_is_this_floor():
    assert RelativeIndex(0, RelativeToTile.ThisTile).calc(9, 20) == 9


def test_calc_this_tile_does_not_go_below_start():
    below = RelativeIndex(-10, RelativeToTile.ThisTile).calc(3, 20)
    assert below == RelativeIndex(0, RelativeToTile.Start).calc(3, 20)


def test_calc_end_is_last_floor():
    assert RelativeIndex(0, RelativeToTile.End).calc(3, 20) == 20
    assert RelativeIndex(6, RelativeToTile.End).calc(3, 20) == 20


def test_calc_end_negative_resolves_to_first_floor():
    assert RelativeIndex(-1, RelativeToTile.End).calc(3, 20) == 0


def test_event_data_serialises_as_its_event():
    twirl = Twirl(floor=4)
    data = EventData(twirl, beats=1.0, seconds=2.0)
    assert data.to_dict() == twirl.to_dict()
    assert data.to_dict()["eventType"] == "Twirl"
    assert data.to_dict()["floor"] == 4


def test_abstract_events_cannot_be_created():
    with pytest.raises(TypeError):
        StaticEvent(floor=0)
    with pytest.raises(TypeError):
        DynamicEvent(floor=0)