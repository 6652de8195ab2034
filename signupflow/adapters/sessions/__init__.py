"""Session adapters - Live workflow storage."""

from .memory import InMemorySessionStore

__all__ = ["InMemorySessionStore"]
