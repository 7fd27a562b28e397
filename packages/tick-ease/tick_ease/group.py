"""TweenerGroup - one animatable made of many."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from tick_ease.config import TweenOptions
from tick_ease.tweener import Tweener
from tick_ease.types import Animatable, InvalidAnimatableError, MemberKey

logger = logging.getLogger(__name__)


class TweenerGroup(Animatable):
    """Ordered collection of named or positional animatables.

    Members are kept in insertion order. Named members use their string key;
    unnamed ones get consecutive integer keys starting at 0. ``update()``
    steps every member and reports True only while all of them moved.

    ``after_update`` is called with each member's key right after that
    member has been stepped.
    """

    def __init__(self, after_update: Callable[[MemberKey], None] | None = None) -> None:
        self._members: dict[MemberKey, Animatable] = {}
        self._next_index = 0
        self._after_update = after_update

    def add(self, entity: Animatable, name: str | None = None) -> MemberKey:
        """Register ``entity``. Overwrites any member already under ``name``."""
        if not isinstance(entity, Animatable):
            raise InvalidAnimatableError(
                entity, f"{type(entity).__name__} does not implement Animatable"
            )
        key: MemberKey
        if isinstance(name, str):
            key = name
        else:
            key = self._next_index
            self._next_index += 1
        self._members[key] = entity
        logger.debug("registered %s under %r", type(entity).__name__, key)
        return key

    def set_target(
        self,
        name: MemberKey,
        start_value: Any,
        target_value: Any,
        options: TweenOptions | None = None,
    ) -> None:
        """Retarget the tweener under ``name``, creating it on first use.

        ``start_value`` and ``options`` only matter when the tweener does not
        exist yet. An existing tweener keeps its current value and velocity.
        """
        if not isinstance(name, (str, int)):
            raise TypeError(f"member key must be str or int, got {type(name).__name__}")
        member = self._members.get(name)
        if member is None:
            member = Tweener.from_options(start_value, options or TweenOptions())
            self._members[name] = member
            if isinstance(name, int) and name >= self._next_index:
                self._next_index = name + 1
            logger.debug("created tweener %r at %r", name, member.current)
        elif not isinstance(member, Tweener):
            raise InvalidAnimatableError(
                member, f"member {name!r} is a {type(member).__name__}, not a Tweener"
            )
        member.set_target(target_value)

    def get_target(self, name: MemberKey) -> float | None:
        member = self._members.get(name)
        if isinstance(member, Tweener):
            return member.get_target()
        return None

    def get_key(self, entity: Animatable) -> MemberKey | None:
        """Reverse lookup by identity."""
        for key, member in self._members.items():
            if member is entity:
                return key
        return None

    def get_tweener(self, key: MemberKey) -> Animatable | None:
        return self._members.get(key)

    def keys(self) -> list[MemberKey]:
        return list(self._members)

    def update(self) -> bool:
        if not self._members:
            return False

        moving = True
        for key, member in list(self._members.items()):
            # Every member is stepped even after one has come to rest.
            moving = member.update() and moving
            if self._after_update is not None:
                self._after_update(key)
        return moving

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __iter__(self) -> Iterator[MemberKey]:
        return iter(list(self._members))
