# adofai

A parser and timing engine for level files (`.adofai`) of the rhythm game
*A Dance of Fire and Ice*.

It reads the lenient JSON that the game writes: a leading byte-order mark,
`//` and `/* */` comments, trailing commas and raw control characters in
strings are all accepted. It builds the track tile by tile. It works out when
each tile is played. It can then show the track and camera at any moment of
the song.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Loading and parsing a level

```python
from adofai.level import Level

level = Level.open("Hello (BPM) 2025.adofai")
level.parse()

for tile in level.tiles:
    print(tile.angle, tile.data.beats, tile.data.seconds)
```

`Level.open` reads a file. `Level.from_dict` takes an already decoded mapping
with `settings`, `actions` and either `angleData` or `pathData`. Structural
problems raise `adofai.loader.LevelFormatError`. Actions whose event type is
not modelled, or which are malformed, are skipped.

A level has to be parsed before you ask it anything about timing. If you skip
that step, the timing methods raise `adofai.settings.LevelNotParsedError`. A
level with fewer than two tiles cannot be parsed and raises
`adofai.level.LevelParseError`. A value that parsing should have filled in
but did not raises `adofai.tile.DynamicValueEmptyError`.

## Timing queries

```python
from adofai.settings import Difficulty

seconds = level.beats2seconds(16.0)
beats = level.seconds2beats(seconds)

bpm = level.get_bpm_by_seconds(seconds)
floor = level.get_floor_by_seconds(seconds)

margin, timing = level.get_hit_margin(floor, seconds, Difficulty.Normal)
planet_a, planet_b = level.planets_position(floor, seconds)
```

`get_hit_margin` sorts a key press into one of the `HitMargin` values, from
`TooEarly` to `TooLate`. `get_hit_margin_bound` returns the window bounds.
How wide each window is depends on the `Difficulty` and the local BPM. The
BPM is capped at 210, 330 or 500 for `Lenient`, `Normal` and `Strict`.

Other queries are `get_bpm_by_beats`, `get_bpm_excluding_beats`,
`get_bpm_by_floor_seconds`, `get_bpm_until(predicate)`, `get_timing` and
`planets_direction`.

## Animating the track and camera

```python
level.update(seconds)                # applies RecolorTrack / MoveTrack events
level.update_camera(seconds, floor)  # applies MoveCamera events

for tile in level.tiles:
    print(tile.data.position.now, tile.data.opacity.now)

print(level.camera.position, level.camera.rotation, level.camera.zoom)

level.reset_camera()                 # back to the initial camera state
```

`RepeatEvents` are expanded into extra timed events when the level is parsed.
They repeat either by beats or by floors.

## Building blocks

- `adofai.easing.Easing`: the game's easing curves. `Easing.calc(x)` maps
  progress in `[0, 1]` to eased progress. The `Flash` curves are not shaped
  and give `1.0` inside the interval.
- `adofai.codec`: converts colours (`Rgba`), booleans, vectors and event tags
  to and from their form in the file.
- `adofai.events.registry.parse_event`: turns one entry of a level's
  `actions` list into an event object. It raises `UnknownEventError` for
  event types it does not model. The modelled event types are `Twirl`,
  `Pause`, `SetSpeed`, `SetHitsound`, `Hold`, `ScaleRadius`, `ColorTrack`,
  `RecolorTrack`, `MoveTrack`, `PositionTrack`, `MoveCamera` and
  `RepeatEvents`. Each one has `from_dict` and `to_dict`.
- `adofai.settings`: `Settings.from_dict` / `to_dict`, and `path2angle` and
  `angle2path` for converting between the legacy `pathData` letters and the
  `angleData` degrees.
- `adofai.units`: `bpm2crotchet`, `bpm2mspb`, `deg2rad` and the `Vector2`
  type.

## What it does not do

- There is no command-line program; the package is a library only.
- A whole level cannot be written back to a file. Single events and the
  settings can be turned back into dictionaries, but nothing assembles them
  into a level file.
- The package plays no audio and renders nothing. It computes tile and camera
  state, and drawing it is left to the caller.