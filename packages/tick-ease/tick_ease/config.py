"""Tweener configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_ease.tweener import Tweener

DEFAULT_SPEED = 0.5
DEFAULT_SPRING = 0.0
DEFAULT_TOLERANCE = 0.01

TweenerCallback = Callable[["Tweener"], None]


def check_settings(speed: float, spring: float, tolerance: float) -> None:
    """Raise ValueError for settings that would make the value non-finite."""
    for name, value in (("speed", speed), ("spring", spring), ("tolerance", tolerance)):
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value}")
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")


@dataclass(frozen=True)
class TweenOptions:
    """Immutable settings used when a group creates a tweener on demand.

    Attributes:
        speed: Fraction of the remaining gap turned into velocity each step.
        spring: Fraction of the previous velocity kept each step (0 = no bounce).
        tolerance: Gap below which the value snaps to its target and rests.
        on_update: Called with the tweener after every step that does work.
        on_settled: Called with the tweener on the step where motion stops.

    ``speed`` and ``spring`` are not clamped. Values outside (0, 1) are the
    caller's business and may oscillate or diverge.
    """

    speed: float = DEFAULT_SPEED
    spring: float = DEFAULT_SPRING
    tolerance: float = DEFAULT_TOLERANCE
    on_update: TweenerCallback | None = None
    on_settled: TweenerCallback | None = None

    def __post_init__(self) -> None:
        check_settings(self.speed, self.spring, self.tolerance)
