from __future__ import annotations

import logging
from typing import Any, Final, Optional, Sequence, Tuple

from skirmish.engine.capabilities import CapabilityRegistry, default_registry
from skirmish.errors import InvalidEntityError, UnknownFallbackError
from skirmish.game.interfaces import Entity
from skirmish.ui.feedback import LineSink

LOG = logging.getLogger(__name__)

FALLBACK_NOTICE: Final[str] = "notice"
FALLBACK_SILENT: Final[str] = "silent"
FALLBACKS: Final[frozenset[str]] = frozenset({FALLBACK_NOTICE, FALLBACK_SILENT})

# Hero -> Goblin, Goblin -> Hero, Ghost -> Hero for the default roster.
DEFAULT_COMBAT_PAIRS: Final[Tuple[Tuple[int, int], ...]] = ((0, 1), (1, 0), (2, 0))


def _default_name(entity: Any) -> str:
    cls = type(entity)
    name = getattr(cls, "default_name", None)
    if isinstance(name, str) and name:
        return name
    return cls.__name__


class Dispatcher:
    """
    Runs one pass over a roster: every entity moves, then each registered
    capability is performed by the entities that support it. Entities that
    lack a capability take the fallback path, which either writes a
    "cannot" notice or stays silent. The capability method is never reached
    for those entities.
    """

    def __init__(
        self,
        out: LineSink,
        registry: Optional[CapabilityRegistry] = None,
        *,
        fallback: str = FALLBACK_NOTICE,
        headings: bool = False,
        combat_pairs: Sequence[Tuple[int, int]] = DEFAULT_COMBAT_PAIRS,
    ) -> None:
        if fallback not in FALLBACKS:
            raise UnknownFallbackError(
                f"Unknown fallback {fallback!r} (expected one of: {', '.join(sorted(FALLBACKS))})"
            )
        self._out = out
        self._registry = registry if registry is not None else default_registry()
        self._fallback = fallback
        self._headings = headings
        self._combat_pairs = tuple(combat_pairs)

    @property
    def registry(self) -> CapabilityRegistry:
        return self._registry

    def _heading(self, title: str, *, first: bool) -> None:
        if not self._headings:
            return
        if not first:
            self._out.write("")
        self._out.write(f"=== {title} ===")

    def process(self, entity: Entity) -> None:
        entity.move()

        for capability in self._registry:
            if self._registry.supports(entity, capability.kind):
                LOG.debug("%s performs %s", entity.name, capability.kind)
                self._registry.invoke(entity, capability.kind)
            elif self._fallback == FALLBACK_NOTICE:
                LOG.debug("%s lacks %s; writing notice", entity.name, capability.kind)
                self._out.write(capability.render_notice(entity.name))
            else:
                LOG.debug("%s lacks %s; skipped", entity.name, capability.kind)

    def assign_names(self, entities: Sequence[Entity]) -> None:
        """Give every unnamed entity its variant's default name.

        All names are checked before anything is written, so a bad roster
        fails without partial output.
        """

        for index, entity in enumerate(entities):
            name = getattr(entity, "name", None)
            if name is None or name == "":
                name = _default_name(entity)
                entity.name = name
                LOG.debug("entity #%d named %s", index, name)
            if not isinstance(name, str):
                raise InvalidEntityError(
                    f"Entity #{index} ({type(entity).__name__}) has non-string name {name!r}"
                )

    def run(self, entities: Sequence[Entity]) -> None:
        roster = tuple(entities)
        self.assign_names(roster)
        LOG.info(
            "dispatch start entities=%d kinds=%s fallback=%s",
            len(roster),
            ",".join(self._registry.kinds()),
            self._fallback,
        )

        for index, entity in enumerate(roster):
            self._heading(f"Processing {type(entity).__name__}", first=index == 0)
            self.process(entity)

        self._heading("Combat", first=not roster)
        for attacker_idx, target_idx in self._combat_pairs:
            if not (0 <= attacker_idx < len(roster) and 0 <= target_idx < len(roster)):
                LOG.debug(
                    "combat pair (%d, %d) skipped; roster has %d entities",
                    attacker_idx,
                    target_idx,
                    len(roster),
                )
                continue
            roster[attacker_idx].attack(roster[target_idx])
