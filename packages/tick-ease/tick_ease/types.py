"""Shared types for tick-ease."""
from __future__ import annotations

from abc import ABC, abstractmethod

MemberKey = str | int


class Animatable(ABC):
    """Anything that can be advanced one discrete step.

    Both single tweeners and groups derive from this, so groups can nest
    groups. A subclass that does not override ``update`` cannot be
    instantiated. Foreign classes can opt in with ``Animatable.register``.
    """

    @abstractmethod
    def update(self) -> bool:
        """Advance one step. Return True while still in motion."""


class InvalidAnimatableError(TypeError):
    """Raised when a group is handed something it cannot animate."""

    def __init__(self, entity: object, message: str) -> None:
        self.entity = entity
        super().__init__(message)
