"""Conversions between level-file JSON values and Python values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional

from .units import Vector2

_HEX = re.compile(r"\+?[0-9A-Fa-f]+")
_U32_LIMIT = 1 << 32


@dataclass(frozen=True)
class Rgba:
    """An 8-bit-per-channel colour with alpha."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_color(value: Any) -> Rgba:
    """Read a hex colour string: six digits (opaque) or eight (with alpha)."""
    if not isinstance(value, str) or not _HEX.fullmatch(value):
        raise ValueError(f"invalid colour: {value!r}")
    color = int(value, 16)
    if color >= _U32_LIMIT:
        raise ValueError(f"colour out of range: {value!r}")
    if len(value) == 6:
        color = color * 0x100 + 0xFF
    return Rgba(
        r=(color >> 24) & 0xFF,
        g=(color >> 16) & 0xFF,
        b=(color >> 8) & 0xFF,
        a=color & 0xFF,
    )


def format_color(color: Rgba) -> str:
    """Write a colour as upper-case hex, leaving out alpha when it is opaque."""
    channels = (color.r, color.g, color.b) if color.a == 255 else (color.r, color.g, color.b, color.a)
    return "".join(format(channel, "X") for channel in channels)


def parse_bool(value: Any) -> bool:
    """Read a boolean given either as JSON bool or as "Enabled"/"Disabled"."""
    if isinstance(value, bool):
        return value
    if value == "Enabled":
        return True
    if value == "Disabled":
        return False
    raise ValueError(f"unexpected value: {value!r}")


def _pair(value: Any) -> tuple[Any, Any]:
    if not isinstance(value, list) or len(value) < 2:
        raise ValueError(f"expected a two-element array, got {value!r}")
    return value[0], value[1]


def parse_vector(value: Any) -> Vector2:
    """Read a ``[x, y]`` array of numbers."""
    x, y = _pair(value)
    if not (_is_number(x) and _is_number(y)):
        raise ValueError(f"expected numbers, got {value!r}")
    return Vector2(float(x), float(y))


def format_vector(vector: Vector2) -> list[float]:
    """Write a vector as a ``[x, y]`` array."""
    return [vector.x, vector.y]


def _optional_number(item: Any) -> Optional[float]:
    if item is None:
        return None
    if _is_number(item):
        return float(item)
    raise ValueError(f"expected a number or null, got {item!r}")


def parse_optional_vector(value: Any) -> tuple[Optional[float], Optional[float]]:
    """Read a ``[x, y]`` array whose entries may be null."""
    x, y = _pair(value)
    return _optional_number(x), _optional_number(y)


def format_optional_vector(vector: tuple[Optional[float], Optional[float]]) -> list[Optional[float]]:
    """Write a pair of optional numbers as a ``[x, y]`` array."""
    x, y = vector
    return [x, y]


def parse_tag(value: Any) -> list[str]:
    """Split a whitespace-separated tag string into its tags."""
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value.split()


def format_tag(tags: list[str]) -> str:
    """Join tags into a space-separated string."""
    return " ".join(tags)