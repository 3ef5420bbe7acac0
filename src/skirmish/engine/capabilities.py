"""Registry of optional capability kinds and the query used to gate them.

A capability is described by the protocol an entity must satisfy and the
no-argument method that performs it. The dispatcher never calls a capability
method directly; it asks :meth:`CapabilityRegistry.supports` first and only
then goes through :meth:`CapabilityRegistry.invoke`.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from skirmish.errors import DuplicateCapabilityError
from skirmish.game.interfaces import Flyable, Shootable

LOG = logging.getLogger(__name__)

__all__ = [
    "Capability",
    "CapabilityRegistry",
    "FLY",
    "SHOOT",
    "default_registry",
    "extended_registry",
]

DEFAULT_NOTICE = "  {name} cannot {kind}."


def _callable_without_arguments(entity: Any, method: str, attr: Any) -> bool:
    """Return ``True`` when ``getattr(entity, method)()`` binds cleanly.

    *attr* is the statically looked-up attribute, so descriptors are
    unwrapped by hand instead of being triggered.
    """

    try:
        instance_dict = object.__getattribute__(entity, "__dict__")
    except AttributeError:
        instance_dict = {}

    if isinstance(instance_dict, dict) and method in instance_dict:
        target, args = attr, ()
    elif isinstance(attr, staticmethod):
        target, args = attr.__func__, ()
    elif isinstance(attr, classmethod):
        target, args = attr.__func__, (type(entity),)
    elif inspect.isfunction(attr):
        target, args = attr, (entity,)
    else:
        # Builtins and other callables stored on the class.
        target, args = attr, ()

    if not callable(target):
        return False
    try:
        inspect.signature(target).bind(*args)
    except (TypeError, ValueError):
        return False
    return True


@dataclass(frozen=True)
class Capability:
    kind: str
    protocol: type
    method: str
    notice: str = DEFAULT_NOTICE

    def render_notice(self, name: str) -> str:
        return self.notice.format(name=name, kind=self.kind)


FLY = Capability(kind="fly", protocol=Flyable, method="fly")
SHOOT = Capability(kind="shoot", protocol=Shootable, method="shoot")


class CapabilityRegistry:
    """Ordered set of known capability kinds."""

    def __init__(self) -> None:
        self._caps: Dict[str, Capability] = {}

    def register(self, capability: Capability) -> None:
        if capability.kind in self._caps:
            raise DuplicateCapabilityError(f"Capability {capability.kind!r} is already registered")
        self._caps[capability.kind] = capability
        LOG.debug("registered capability kind=%s method=%s", capability.kind, capability.method)

    def kinds(self) -> List[str]:
        return list(self._caps)

    def get(self, kind: str) -> Optional[Capability]:
        if not isinstance(kind, str):
            return None
        return self._caps.get(kind)

    def __iter__(self):
        return iter(list(self._caps.values()))

    def __len__(self) -> int:
        return len(self._caps)

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, str) and kind in self._caps

    def supports(self, entity: Any, kind: str) -> bool:
        """Return ``True`` when *entity* can safely perform *kind*.

        Never raises and never runs entity code: the method is looked up
        statically on the object before the protocol check, so properties and
        ``__getattr__`` hooks are not triggered. Unknown kinds and ``None``
        answer ``False``.
        """

        capability = self.get(kind)
        # Classes are not entities: their methods would be unbound.
        if capability is None or entity is None or isinstance(entity, type):
            return False
        attr = inspect.getattr_static(entity, capability.method, None)
        if attr is None or not _callable_without_arguments(entity, capability.method, attr):
            return False
        return isinstance(entity, capability.protocol)

    def invoke(self, entity: Any, kind: str) -> None:
        """Perform *kind* on *entity*. Callers check :meth:`supports` first."""

        capability = self._caps[kind]
        getattr(entity, capability.method)()


def default_registry() -> CapabilityRegistry:
    """Registry with the ``fly`` capability only."""

    registry = CapabilityRegistry()
    registry.register(FLY)
    return registry


def extended_registry() -> CapabilityRegistry:
    """Registry with ``fly`` followed by ``shoot``."""

    registry = default_registry()
    registry.register(SHOOT)
    return registry
