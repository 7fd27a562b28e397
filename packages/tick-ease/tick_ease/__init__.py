"""tick-ease - Spring-damped value easing driven one tick at a time."""
from __future__ import annotations

from tick_ease.config import DEFAULT_SPEED, DEFAULT_SPRING, DEFAULT_TOLERANCE, TweenOptions
from tick_ease.driver import settle
from tick_ease.group import TweenerGroup
from tick_ease.tweener import Tweener
from tick_ease.types import Animatable, InvalidAnimatableError, MemberKey

__all__ = [
    "Animatable",
    "DEFAULT_SPEED",
    "DEFAULT_SPRING",
    "DEFAULT_TOLERANCE",
    "InvalidAnimatableError",
    "MemberKey",
    "TweenOptions",
    "Tweener",
    "TweenerGroup",
    "settle",
]
