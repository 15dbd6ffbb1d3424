"""Reading level files into tiles and settings."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from .events.base import EventData
from .events.registry import parse_event
from .settings import Settings, path2angle
from .tile import Tile

_BOM = "\ufeff"
_COMMENTS = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/', re.S)
_TRAILING_COMMAS = re.compile(r'"(?:\\.|[^"\\])*"|,(\s*[}\]])')


class LevelFormatError(ValueError):
    """The text or structure of a level file is not valid."""


def _drop_comment(match: re.Match[str]) -> str:
    text = match.group(0)
    return text if text.startswith('"') else " "


def _drop_trailing_comma(match: re.Match[str]) -> str:
    closing = match.group(1)
    return match.group(0) if closing is None else closing


def loads_lenient(text: str) -> Any:
    """Parse JSON that may carry a BOM, comments, trailing commas and raw control characters."""
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    cleaned = _COMMENTS.sub(_drop_comment, text)
    cleaned = _TRAILING_COMMAS.sub(_drop_trailing_comma, cleaned)
    try:
        return json.loads(cleaned, strict=False)
    except json.JSONDecodeError as exc:
        raise LevelFormatError(f"invalid level JSON: {exc}") from exc


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _read_tiles(data: Mapping[str, Any]) -> list[Tile]:
    tiles = [Tile(0.0)]
    if "angleData" in data:
        angles = data["angleData"]
        if not isinstance(angles, list):
            raise LevelFormatError("angleData is not an array")
        for angle in angles:
            if not _is_number(angle):
                raise LevelFormatError(f"angleData holds a non-number: {angle!r}")
            tiles.append(Tile(float(angle)))
    elif "pathData" in data:
        path = data["pathData"]
        if not isinstance(path, str):
            raise LevelFormatError("pathData is not a string")
        for letter in path:
            try:
                tiles.append(Tile(path2angle(letter)))
            except ValueError as exc:
                raise LevelFormatError(str(exc)) from exc
    else:
        raise LevelFormatError("level has neither angleData nor pathData")
    return tiles


def _attach_actions(tiles: list[Tile], actions: Any) -> None:
    if not isinstance(actions, list):
        raise LevelFormatError("actions is not an array")
    for action in actions:
        if not isinstance(action, Mapping):
            raise LevelFormatError(f"action is not an object: {action!r}")
        floor = action.get("floor")
        if isinstance(floor, bool) or not isinstance(floor, int) or floor < 0:
            raise LevelFormatError(f"action has an invalid floor: {floor!r}")
        if floor >= len(tiles):
            raise LevelFormatError(f"action floor {floor} is beyond the last tile")
        try:
            event = parse_event(action)
        except ValueError:
            # Unknown or malformed actions are skipped.
            continue
        tiles[floor].events.append(EventData(event))


def decode_level(data: Any) -> tuple[list[Tile], Settings]:
    """Build the tiles, with their events, and the settings of a decoded level object."""
    if not isinstance(data, Mapping):
        raise LevelFormatError("The value is not an object")
    try:
        settings = Settings.from_dict(data.get("settings"))
    except ValueError as exc:
        raise LevelFormatError(f"invalid settings: {exc}") from exc
    tiles = _read_tiles(data)
    _attach_actions(tiles, data.get("actions"))
    return tiles, settings


def read_level_file(path: Union[str, Path]) -> Any:
    """Read and decode the JSON of a level file."""
    return loads_lenient(Path(path).read_text(encoding="utf-8"))