"""Concrete entity variants.

Each variant implements the base contract (``move``/``attack``) and only the
capability protocols it can genuinely honour. None of them is forced to carry
a method it would have to refuse at runtime.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from skirmish.game.interfaces import Entity
from skirmish.ui.feedback import ConsoleSink, LineSink

__all__ = ["Character", "Goblin", "Ghost", "Archer"]


@dataclass
class Character:
    """The player's hero. Walks, fights, cannot fly."""

    name: str = ""
    out: LineSink = field(default_factory=ConsoleSink, repr=False, compare=False)
    default_name: ClassVar[str] = "Hero"

    def attack(self, target: Entity) -> None:
        self.out.write(f"{self.name} swings a sword at {target.name}.")

    def move(self) -> None:
        self.out.write(f"{self.name} walks forward.")


@dataclass
class Goblin:
    """Ground-bound melee enemy."""

    name: str = ""
    out: LineSink = field(default_factory=ConsoleSink, repr=False, compare=False)
    default_name: ClassVar[str] = "Goblin"

    def attack(self, target: Entity) -> None:
        self.out.write(f"{self.name} stabs {target.name} with a rusty dagger.")

    def move(self) -> None:
        self.out.write(f"{self.name} scurries along the ground.")


@dataclass
class Ghost:
    """Spectral enemy that can fly."""

    name: str = ""
    out: LineSink = field(default_factory=ConsoleSink, repr=False, compare=False)
    default_name: ClassVar[str] = "Ghost"

    def attack(self, target: Entity) -> None:
        self.out.write(f"{self.name} attacks {target.name} with a chilling touch.")

    def move(self) -> None:
        self.out.write(f"{self.name} floats silently.")

    def fly(self) -> None:
        self.out.write(f"{self.name} flies rapidly through the air.")


@dataclass
class Archer:
    """Ranged fighter that can shoot but not fly."""

    name: str = ""
    out: LineSink = field(default_factory=ConsoleSink, repr=False, compare=False)
    default_name: ClassVar[str] = "Archer"

    def attack(self, target: Entity) -> None:
        self.out.write(f"{self.name} jabs {target.name} with the end of a bow.")

    def move(self) -> None:
        self.out.write(f"{self.name} steps lightly into position.")

    def shoot(self) -> None:
        self.out.write(f"{self.name} looses an arrow downrange.")
