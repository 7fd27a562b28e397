"""Step loop for running an animatable until it comes to rest."""
from __future__ import annotations

import logging
from typing import Callable

from tick_ease.types import Animatable

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10_000


def settle(
    animatable: Animatable,
    max_steps: int = DEFAULT_MAX_STEPS,
    on_step: Callable[[int], None] | None = None,
) -> int:
    """Call ``update()`` until it reports rest or ``max_steps`` is reached.

    ``on_step`` receives the 1-based step number after every call. Returns
    how many calls reported motion. Hitting the cap with the animatable
    still moving is logged, not raised; diverging spring settings can
    legitimately never settle.
    """
    if max_steps <= 0:
        raise ValueError(f"max_steps must be positive, got {max_steps}")

    moved = 0
    for step in range(1, max_steps + 1):
        still_moving = animatable.update()
        if on_step is not None:
            on_step(step)
        if not still_moving:
            logger.debug("settled after %d steps", step)
            return moved
        moved += 1

    logger.warning("still moving after %d steps", max_steps)
    return moved
