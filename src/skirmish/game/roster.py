"""Build the ordered list of entities handed to the dispatcher."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from skirmish.errors import UnknownVariantError
from skirmish.game.classes import Archer, Character, Ghost, Goblin
from skirmish.game.interfaces import Entity
from skirmish.ui.feedback import ConsoleSink, LineSink

__all__ = ["VARIANTS", "DEFAULT_ROSTER", "build_roster", "default_roster", "parse_roster"]

VARIANTS: Dict[str, type] = {
    "character": Character,
    "goblin": Goblin,
    "ghost": Ghost,
    "archer": Archer,
}

DEFAULT_ROSTER: tuple[str, ...] = ("character", "goblin", "ghost")


def parse_roster(raw: str) -> List[str]:
    """Split a comma separated roster string into normalised variant keys.

    Raises :class:`UnknownVariantError` for keys not in :data:`VARIANTS`.
    """

    keys = [token.strip().lower() for token in raw.split(",") if token.strip()]
    unknown = [key for key in keys if key not in VARIANTS]
    if unknown:
        known = ", ".join(VARIANTS)
        raise UnknownVariantError(f"Unknown variant(s) {', '.join(unknown)} (known: {known})")
    return keys


def build_roster(names: Iterable[str], out: Optional[LineSink] = None) -> List[Entity]:
    """Instantiate one entity per variant key, in order, sharing one sink."""

    sink = out if out is not None else ConsoleSink()
    roster: List[Entity] = []
    for raw in names:
        key = str(raw).strip().lower()
        cls = VARIANTS.get(key)
        if cls is None:
            raise UnknownVariantError(f"Unknown variant {raw!r}")
        roster.append(cls(out=sink))
    return roster


def default_roster(out: Optional[LineSink] = None) -> List[Entity]:
    """Return the Hero, Goblin, Ghost line-up with names left unset."""

    return build_roster(DEFAULT_ROSTER, out)
