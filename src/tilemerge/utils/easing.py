"""Easing curves mapping normalized progress onto eased progress.

All curves take ``x`` in ``[0, 1]`` and return ``0`` at ``x == 0`` and ``1`` at
``x == 1``. EaseOutBack overshoots past ``1`` before settling.
"""
from __future__ import annotations

import math
from enum import Enum, auto

from tilemerge.constants import EASE_OUT_BACK_C1

_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


class Easing(Enum):
    EASE_IN_CIRC = auto()
    EASE_IN_OUT_CIRC = auto()
    EASE_OUT_BACK = auto()
    EASE_OUT_BOUNCE = auto()


def ease_in_circ(x: float) -> float:
    return 1.0 - math.sqrt(1.0 - x * x)


def ease_in_out_circ(x: float) -> float:
    if x < 0.5:
        return (1.0 - math.sqrt(1.0 - (2.0 * x) ** 2)) / 2.0
    return ((1.0 - math.sqrt((-2.0 * x + 2.0) ** 2)) + 1.0) / 2.0


def ease_out_back(x: float) -> float:
    c1 = EASE_OUT_BACK_C1
    c3 = c1 + 1.0
    return 1.0 + c3 * (x - 1.0) ** 3 + c1 * (x - 1.0) ** 2


def ease_out_bounce(x: float) -> float:
    if x < 1.0 / _BOUNCE_D1:
        return _BOUNCE_N1 * x * x
    if x < 2.0 / _BOUNCE_D1:
        x -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * x * x + 0.75
    if x < 2.5 / _BOUNCE_D1:
        x -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * x * x + 0.9375
    x -= 2.625 / _BOUNCE_D1
    return _BOUNCE_N1 * x * x + 0.984375


def ease(kind: Easing, x: float) -> float:
    """Apply the curve named by ``kind`` to ``x``."""
    if kind is Easing.EASE_IN_CIRC:
        return ease_in_circ(x)
    if kind is Easing.EASE_IN_OUT_CIRC:
        return ease_in_out_circ(x)
    if kind is Easing.EASE_OUT_BACK:
        return ease_out_back(x)
    if kind is Easing.EASE_OUT_BOUNCE:
        return ease_out_bounce(x)
    raise ValueError(f"Unknown easing '{kind}'")
