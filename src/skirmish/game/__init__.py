"""Entity variants and the protocols they implement."""

from .classes import Archer, Character, Ghost, Goblin
from .interfaces import Entity, Flyable, Shootable

__all__ = [
    "Entity",
    "Flyable",
    "Shootable",
    "Character",
    "Goblin",
    "Ghost",
    "Archer",
]
