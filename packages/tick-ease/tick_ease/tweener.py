"""Spring-damped easing of a single scalar value."""
from __future__ import annotations

import math
from typing import Any

from tick_ease.config import (
    DEFAULT_SPEED,
    DEFAULT_SPRING,
    DEFAULT_TOLERANCE,
    TweenerCallback,
    TweenOptions,
    check_settings,
)
from tick_ease.types import Animatable


def _noop(tweener: Tweener) -> None:
    pass


def _coerce(value: Any, default: float = 0.0) -> float:
    """Best-effort float conversion used for initial values."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


class Tweener(Animatable):
    """Moves ``current`` toward ``target`` a little on every ``update()``.

    Each step the previous velocity is scaled by ``spring`` and a fraction
    ``speed`` of the remaining gap is added to it. Once the gap is within
    ``tolerance`` the value snaps to the target and the tweener rests.

    Callbacks receive the tweener itself. ``on_update`` fires on every step
    that does work. ``on_settled`` fires on the step where motion stops.
    A tweener already sitting exactly on its target fires neither.
    """

    def __init__(
        self,
        value: Any = 0.0,
        speed: float = DEFAULT_SPEED,
        spring: float = DEFAULT_SPRING,
        *,
        tolerance: float = DEFAULT_TOLERANCE,
        on_update: TweenerCallback | None = None,
        on_settled: TweenerCallback | None = None,
    ) -> None:
        check_settings(speed, spring, tolerance)
        self.current = self.target = _coerce(value)
        self.velocity = 0.0
        self.speed = speed
        self.spring = spring
        self.tolerance = tolerance
        self.on_update = on_update or _noop
        self.on_settled = on_settled or _noop
        self._at_rest = True

    @classmethod
    def from_options(cls, value: Any, options: TweenOptions) -> Tweener:
        return cls(
            value,
            options.speed,
            options.spring,
            tolerance=options.tolerance,
            on_update=options.on_update,
            on_settled=options.on_settled,
        )

    @property
    def at_rest(self) -> bool:
        return self._at_rest

    def set_target(self, value: Any) -> None:
        """Retarget without touching velocity, so motion redirects smoothly."""
        target = float(value)
        if not math.isfinite(target):
            raise ValueError(f"target must be finite, got {target}")
        self.target = target

    def get_target(self) -> float:
        return self.target

    def update(self) -> bool:
        if self.current == self.target:
            # Exactly on target: rest quietly, no callbacks.
            self.velocity = 0.0
            self._at_rest = True
            return False

        gap = self.target - self.current
        self.velocity *= self.spring

        settled = abs(gap) <= self.tolerance
        if not settled:
            self.velocity += gap * self.speed
            stepped = self.current + self.velocity
            # Steps below float resolution at large magnitudes never land.
            settled = stepped == self.current and self.velocity != 0.0

        if not settled:
            self.current = stepped
            self._at_rest = False
            changed = True
        else:
            # Snap: never leave a residual error behind.
            self.velocity = 0.0
            self.current = self.target
            changed = not self._at_rest or abs(gap) > self.tolerance
            self._at_rest = True

        self.on_update(self)
        if settled:
            self.on_settled(self)
        return changed

    def __repr__(self) -> str:
        return (
            f"Tweener(current={self.current!r}, target={self.target!r}, "
            f"velocity={self.velocity!r}, at_rest={self._at_rest!r})"
        )
