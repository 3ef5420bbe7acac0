"""Exceptions raised for misconfigured rosters, registries and dispatchers."""

from __future__ import annotations

__all__ = [
    "DuplicateCapabilityError",
    "InvalidEntityError",
    "UnknownFallbackError",
    "UnknownVariantError",
]


class DuplicateCapabilityError(ValueError):
    """Raised when a capability kind is registered twice."""


class UnknownVariantError(ValueError):
    """Raised when a roster names an entity variant that does not exist."""


class InvalidEntityError(ValueError):
    """Raised when an entity cannot be given a usable name before dispatch."""


class UnknownFallbackError(ValueError):
    """Raised when a dispatcher is configured with an unsupported fallback."""
