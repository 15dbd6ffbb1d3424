"""Easing curves used by animated events."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable

_C1 = 1.70158
_C2 = _C1 * 1.525
_C3 = _C1 + 1.0
_C4 = (2.0 * math.pi) / 3.0
_C5 = (2.0 * math.pi) / 4.5
_N1 = 7.5625
_D1 = 2.75


class Easing(Enum):
    """Named easing curve; the value is its name in level files."""

    Linear = "Linear"
    InSine = "InSine"
    OutSine = "OutSine"
    InOutSine = "InOutSine"
    InQuad = "InQuad"
    OutQuad = "OutQuad"
    InOutQuad = "InOutQuad"
    InCubic = "InCubic"
    OutCubic = "OutCubic"
    InOutCubic = "InOutCubic"
    InQuart = "InQuart"
    OutQuart = "OutQuart"
    InOutQuart = "InOutQuart"
    InQuint = "InQuint"
    OutQuint = "OutQuint"
    InOutQuint = "InOutQuint"
    InExpo = "InExpo"
    OutExpo = "OutExpo"
    InOutExpo = "InOutExpo"
    InCirc = "InCirc"
    OutCirc = "OutCirc"
    InOutCirc = "InOutCirc"
    InBack = "InBack"
    OutBack = "OutBack"
    InOutBack = "InOutBack"
    InElastic = "InElastic"
    OutElastic = "OutElastic"
    InOutElastic = "InOutElastic"
    InBounce = "InBounce"
    OutBounce = "OutBounce"
    InOutBounce = "InOutBounce"
    InFlash = "InFlash"
    OutFlash = "OutFlash"
    InOutFlash = "InOutFlash"

    def calc(self, x: float) -> float:
        """Eased progress for linear progress ``x``, clamped to [0, 1] at the ends."""
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        curve = _CURVES.get(self)
        return 1.0 if curve is None else curve(x)


def _out_bounce(x: float) -> float:
    if x < 1.0 / _D1:
        return _N1 * x * x
    if x < 2.0 / _D1:
        x -= 1.5
        return _N1 * (x / _D1) * x + 0.75
    if x < 2.5 / _D1:
        x -= 2.25
        return _N1 * (x / _D1) * x + 0.9375
    x -= 2.625
    return _N1 * (x / _D1) * x + 0.984375


def _in_out(low: Callable[[float], float], high: Callable[[float], float]) -> Callable[[float], float]:
    return lambda x: low(x) if x < 0.5 else high(x)


_CURVES: dict[Easing, Callable[[float], float]] = {
    Easing.Linear: lambda x: x,
    Easing.InSine: lambda x: 1.0 - math.cos((x * math.pi) / 2.0),
    Easing.OutSine: lambda x: math.sin((x * math.pi) / 2.0),
    Easing.InOutSine: lambda x: -(math.cos(math.pi * x) - 1.0) / 2.0,
    Easing.InQuad: lambda x: x**2,
    Easing.OutQuad: lambda x: 1.0 - (1.0 - x) ** 2,
    Easing.InOutQuad: _in_out(lambda x: 2.0 * x**2, lambda x: 1.0 - (-2.0 * x + 2.0) ** 2 / 2.0),
    Easing.InCubic: lambda x: x**3,
    Easing.OutCubic: lambda x: 1.0 - (1.0 - x) ** 3,
    Easing.InOutCubic: _in_out(lambda x: 4.0 * x**3, lambda x: 1.0 - (-2.0 * x + 2.0) ** 3 / 2.0),
    Easing.InQuart: lambda x: x**4,
    Easing.OutQuart: lambda x: 1.0 - (1.0 - x) ** 4,
    Easing.InOutQuart: _in_out(lambda x: 8.0 * x**4, lambda x: 1.0 - (-2.0 * x + 2.0) ** 4 / 2.0),
    Easing.InQuint: lambda x: x**5,
    Easing.OutQuint: lambda x: 1.0 - (1.0 - x) ** 5,
    Easing.InOutQuint: _in_out(lambda x: 16.0 * x**5, lambda x: 1.0 - (-2.0 * x + 2.0) ** 5 / 2.0),
    Easing.InExpo: lambda x: 2.0 ** (10.0 * x - 10.0),
    Easing.OutExpo: lambda x: 1.0 - 2.0 ** (-10.0 * x),
    Easing.InOutExpo: _in_out(
        lambda x: 2.0 ** (20.0 * x - 10.0) / 2.0,
        lambda x: (2.0 - 2.0 ** (-20.0 * x + 10.0)) / 2.0,
    ),
    Easing.InCirc: lambda x: 1.0 - math.sqrt(1.0 - x * x),
    Easing.OutCirc: lambda x: math.sqrt(1.0 - (x - 1.0) ** 2),
    Easing.InOutCirc: _in_out(
        lambda x: (1.0 - math.sqrt(1.0 - (2.0 * x) ** 2)) / 2.0,
        lambda x: (math.sqrt(1.0 - (-2.0 * x + 2.0) ** 2) + 1.0) / 2.0,
    ),
    Easing.InBack: lambda x: _C3 * x**3 - _C1 * x**2,
    Easing.OutBack: lambda x: 1.0 + _C3 * (x - 1.0) ** 3 + _C1 * (x - 1.0) ** 2,
    Easing.InOutBack: _in_out(
        lambda x: ((2.0 * x) ** 2 * ((_C2 + 1.0) * 2.0 * x - _C2)) / 2.0,
        lambda x: ((2.0 * x - 2.0) ** 2 * ((_C2 + 1.0) * (x * 2.0 - 2.0) + _C2) + 2.0) / 2.0,
    ),
    Easing.InElastic: lambda x: -(2.0 ** (10.0 * x - 10.0)) * math.sin((x * 10.0 - 10.75) * _C4),
    Easing.OutElastic: lambda x: 2.0 ** (-10.0 * x) * math.sin((x * 10.0 - 0.75) * _C4) + 1.0,
    Easing.InOutElastic: _in_out(
        lambda x: -(2.0 ** (20.0 * x - 10.0) * math.sin((20.0 * x - 11.125) * _C5)) / 2.0,
        lambda x: (2.0 ** (-20.0 * x + 10.0) * math.sin((20.0 * x - 11.125) * _C5)) / 2.0 + 1.0,
    ),
    Easing.InBounce: lambda x: 1.0 - _out_bounce(1.0 - x),
    Easing.OutBounce: _out_bounce,
    Easing.InOutBounce: _in_out(
        lambda x: (1.0 - _out_bounce(1.0 - 2.0 * x)) / 2.0,
        lambda x: (1.0 + _out_bounce(2.0 * x - 1.0)) / 2.0,
    ),
}