import pytest

from adofai.events.base import EventData
from adofai.events.gameplay import SetSpeed, SpeedType
from adofai.settings import Difficulty, HitMargin, LevelNotParsedError, Settings
from adofai.state import LevelState
from adofai.tile import DynamicValueEmptyError, Orbit, Tile
from adofai.units import Vector2

BASE_BPM = 120.0
FAST_BPM = 240.0


def make_state():
    tiles = [Tile(angle=a) for a in (0.0, 0.0, 90.0, 180.0, 270.0)]
    for index, tile in enumerate(tiles):
        tile.data.beats = float(2 * index)
        tile.data.orbit = Orbit.Clockwise
        tile.data.stick_to_floors = False
        tile.data.position.orig = Vector2(float(index), 0.0)
    tiles[2].events.append(EventData(SetSpeed(floor=2, beats_per_minute=FAST_BPM), beats=4.0))
    tiles[4].events.append(
        EventData(
            SetSpeed(
                floor=4,
                beats_per_minute=0.0,
                speed_type=SpeedType.Multiplier,
                bpm_multiplier=2.0,
            ),
            beats=8.0,
        )
    )
    state = LevelState(tiles, Settings(bpm=BASE_BPM, offset=0.0))
    state.parsed = True
    for tile in tiles:
        tile.data.seconds = state.beats2seconds(tile.data.beats)
        for record in tile.events:
            record.seconds = state.beats2seconds(record.beats)
    return state


def test_unparsed_level_raises():
    state = LevelState([Tile(), Tile()], Settings(bpm=BASE_BPM))
    with pytest.raises(LevelNotParsedError) as info:
        state.beats2seconds(1.0)
    assert info.value.calling_function == "beats2seconds"


def test_beats_seconds_round_trip():
    state = make_state()
    epsilon = 0.00000000005
    for i in range(-20, 40):
        value = float(i)
        assert state.seconds2beats(state.beats2seconds(value)) == pytest.approx(value, abs=epsilon)
        assert state.beats2seconds(state.seconds2beats(value)) == pytest.approx(value, abs=epsilon)


def test_beats2seconds_is_increasing():
    state = make_state()
    times = [state.beats2seconds(b / 2) for b in range(0, 30)]
    assert times == sorted(times)
    assert len(set(times)) == len(times)


def test_missing_speed_beats_raises():
    state = make_state()
    state.tiles[2].events[0].beats = None
    with pytest.raises(DynamicValueEmptyError):
        state.beats2seconds(10.0)


def test_get_bpm_by_beats_and_excluding():
    state = make_state()
    assert state.get_bpm_by_beats(1.0) == BASE_BPM
    assert state.get_bpm_by_beats(4.0) == FAST_BPM
    assert state.get_bpm_excluding_beats(4.0) == BASE_BPM
    assert state.get_bpm_by_beats(100.0) == 480.0


def test_get_bpm_until():
    state = make_state()
    assert state.get_bpm_until(lambda ss, b, s: True) == BASE_BPM
    assert state.get_bpm_until(lambda ss, b, s: ss.floor >= 4) == FAST_BPM


def test_get_bpm_by_seconds_and_floor():
    state = make_state()
    assert state.get_bpm_by_seconds(0.0) == BASE_BPM
    assert state.get_bpm_by_floor_seconds(1, 1000.0) == BASE_BPM
    assert state.get_bpm_by_floor_seconds(4, state.tiles[4].data.seconds) == 480.0


def test_get_timing_at_tile_is_zero():
    state = make_state()
    assert state.get_timing(3, state.tiles[3].data.seconds) == 0.0


def test_get_timing_without_seconds():
    state = make_state()
    state.tiles[3].data.seconds = None
    with pytest.raises(DynamicValueEmptyError):
        state.get_timing(3, 1.0)


def test_get_floor_by_seconds():
    state = make_state()
    middle = (state.tiles[1].data.seconds + state.tiles[2].data.seconds) / 2
    assert state.get_floor_by_seconds(middle) == 1
    assert state.get_floor_by_seconds(-5.0) == 0


def test_hit_margin_bounds_are_ordered():
    state = make_state()
    perfect, late_perfect, very = state.get_hit_margin_bound(2, Difficulty.Normal)
    assert 0 < perfect < late_perfect < very
    assert very / perfect == pytest.approx(2.0)


def test_stricter_difficulty_has_tighter_bounds_at_high_tempo():
    state = make_state()
    lenient = state.get_hit_margin_bound(4, Difficulty.Lenient)
    strict = state.get_hit_margin_bound(4, Difficulty.Strict)
    assert all(s < l for s, l in zip(strict, lenient))


def test_hit_margin_classification():
    state = make_state()
    tile_seconds = state.tiles[3].data.seconds
    perfect, late_perfect, very = state.get_hit_margin_bound(3, Difficulty.Normal)
    assert state.get_hit_margin(3, tile_seconds, Difficulty.Normal) == (HitMargin.Perfect, 0.0)
    margin, timing = state.get_hit_margin(3, tile_seconds + (late_perfect + very) / 2, Difficulty.Normal)
    assert margin is HitMargin.VeryLate and timing > 0
    margin, _ = state.get_hit_margin(3, tile_seconds - 2 * very, Difficulty.Normal)
    assert margin is HitMargin.TooEarly
    margin, _ = state.get_hit_margin(3, tile_seconds - (perfect + late_perfect) / 2, Difficulty.Normal)
    assert margin is HitMargin.EarlyPerfect


def test_planets_direction():
    state = make_state()
    assert state.planets_direction(0, 0.0) == 0.0
    seconds = state.tiles[2].data.seconds
    assert state.planets_direction(2, seconds) == pytest.approx(state.tiles[2].angle - 180.0)
    assert state.planets_direction(2, seconds + 0.1) < state.planets_direction(2, seconds)


def test_planets_direction_midspin_uses_previous_angle():
    state = make_state()
    state.tiles[3].angle = 999.0
    seconds = state.tiles[3].data.seconds
    assert state.planets_direction(3, seconds) == pytest.approx(state.tiles[2].angle)


def test_planets_position_order_and_distance():
    state = make_state()
    even = state.planets_position(2, state.tiles[2].data.seconds + 0.05)
    assert even[0] == state.tiles[2].data.position.orig
    assert (even[1] - even[0]).length() == pytest.approx(1.0)
    odd = state.planets_position(3, state.tiles[3].data.seconds)
    assert odd[1] == state.tiles[3].data.position.orig


def test_planets_position_sticks_to_current_position():
    state = make_state()
    data = state.tiles[2].data
    data.stick_to_floors = True
    data.position.now = Vector2(-3.0, 7.0)
    pivot, _ = state.planets_position(2, data.seconds)
    assert pivot == Vector2(-3.0, 7.0)


def test_planets_position_without_stick_flag():
    state = make_state()
    state.tiles[2].data.stick_to_floors = None
    with pytest.raises(DynamicValueEmptyError):
        state.planets_position(2, 0.0)