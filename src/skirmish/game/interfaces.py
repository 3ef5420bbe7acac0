"""Protocol definitions for entities and their optional capabilities."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    """Protocol every entity satisfies: it can move and it can attack."""

    name: str

    def attack(self, target: "Entity") -> None:
        """Attack *target*. Attacking oneself is allowed."""

    def move(self) -> None:
        """Move under the entity's own power."""


# Capabilities stay independent of Entity and of each other. A new ability
# gets a new protocol here.


@runtime_checkable
class Flyable(Protocol):
    """Something that can take to the air."""

    def fly(self) -> None: ...


@runtime_checkable
class Shootable(Protocol):
    """Something that can fire a ranged shot."""

    def shoot(self) -> None: ...
