"""Capability-dispatch demo: entities that move and fight, some that fly or shoot."""

__version__ = "0.1.0"
